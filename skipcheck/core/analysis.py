"""Moteur d'analyse des verdicts SKIPPED."""

from typing import Any, Dict, List, Sequence, Tuple

from skipcheck.api.client import CodeforcesClient
from skipcheck.api.settings import load_settings
from skipcheck.api.submissions import SubmissionsAPI
from skipcheck.api.users import UsersAPI
from skipcheck.core.errors import InvalidInputError
from skipcheck.core.models import AnalysisConfig, AnalysisResult, Profile, Submission


class AnalysisEngine:
    """
    Orchestration profil -> historique -> agrégation.

    Le moteur ne garde aucun état entre deux appels : chaque analyse
    reconstruit son résultat. Il ne journalise rien et ne rattrape
    aucune erreur, tout échec remonte tel quel à l'appelant.
    """

    def __init__(
        self,
        users_api: UsersAPI = None,
        submissions_api: SubmissionsAPI = None,
        config: AnalysisConfig = None,
        settings: Dict[str, Any] = None
    ):
        """
        Initialise le moteur.

        Args:
            users_api: Récupération des profils
            submissions_api: Récupération des historiques
            config: Règle de classification (verdict sentinelle, limite)
            settings: Configuration déjà chargée (load_settings() si nécessaire)
        """
        needs_client = users_api is None or submissions_api is None
        if settings is None and (needs_client or config is None):
            settings = load_settings()

        if needs_client:
            client = CodeforcesClient(settings=settings)
            users_api = users_api or UsersAPI(client)
            submissions_api = submissions_api or SubmissionsAPI(client)
        self.users_api = users_api
        self.submissions_api = submissions_api
        self.config = config if config is not None else AnalysisConfig.from_settings(settings)

    @staticmethod
    def normalize_handle(raw_handle: str) -> str:
        """Retire les espaces ; lève InvalidInputError si rien ne reste."""
        if not isinstance(raw_handle, str) or not raw_handle.strip():
            raise InvalidInputError("Veuillez saisir un handle")
        return raw_handle.strip()

    def is_suspicious_submission(self, submission: Submission) -> bool:
        """Suspect ssi le verdict est présent et égal au verdict sentinelle."""
        return submission.verdict is not None and submission.verdict == self.config.skip_verdict

    def summarize(self, submissions: Sequence[Submission]) -> AnalysisResult:
        """
        Agrège un historique en AnalysisResult.

        Un seul verdict sentinelle suffit à marquer le compte comme suspect.
        Le compte suspect est toujours le compte réel, même si seules les
        `display_limit` premières soumissions sont conservées.
        """
        suspicious: List[Submission] = [s for s in submissions if self.is_suspicious_submission(s)]

        total = len(submissions)
        count = len(suspicious)
        percentage = (count / total * 100) if total > 0 else 0.0

        return AnalysisResult(
            is_suspicious=count > 0,
            total_submission_count=total,
            suspicious_submission_count=count,
            suspicious_percentage=percentage,
            suspicious_submissions=tuple(suspicious[:self.config.display_limit]),
        )

    def analyze(self, raw_handle: str) -> Tuple[Profile, AnalysisResult]:
        """
        Analyse un handle.

        Le profil est demandé avant l'historique : un handle inconnu
        interrompt l'analyse sans second appel.

        Returns:
            (profil, résultat)

        Raises:
            InvalidInputError, ProfileNotFoundError, HistoryFetchError, TransportError
        """
        handle = self.normalize_handle(raw_handle)
        profile = self.users_api.fetch_profile(handle)
        submissions = self.submissions_api.fetch_history(handle)
        return profile, self.summarize(submissions)


def build_engine(settings_path: str = None) -> AnalysisEngine:
    """Construit un moteur configuré depuis config/codeforces.yaml et l'environnement."""
    return AnalysisEngine(settings=load_settings(settings_path))


def analyze(handle: str) -> Tuple[Profile, AnalysisResult]:
    """Fonction raccourci : analyse un handle avec la configuration par défaut."""
    return build_engine().analyze(handle)
