"""Modèles de données."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

CODEFORCES_URL = "https://codeforces.com"

# Les contests gym ont des identifiants >= 100000
GYM_CONTEST_MIN_ID = 100000


def _contest_section(contest_id: int) -> str:
    return "gym" if contest_id >= GYM_CONTEST_MIN_ID else "contest"


@dataclass(frozen=True)
class Profile:
    """Métadonnées d'un compte Codeforces."""
    handle: str
    rating: Optional[int] = None
    max_rating: Optional[int] = None
    rank: Optional[str] = None
    max_rank: Optional[str] = None

    @property
    def is_rated(self) -> bool:
        """Un compte sans rating est "unrated", pas à 0."""
        return self.rating is not None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Profile":
        """Construit un profil depuis un enregistrement `user.info`."""
        return cls(
            handle=data['handle'],
            rating=data.get('rating'),
            max_rating=data.get('maxRating'),
            rank=data.get('rank'),
            max_rank=data.get('maxRank'),
        )


@dataclass(frozen=True)
class Problem:
    """Référence vers un problème."""
    index: str
    name: str
    contest_id: Optional[int] = None
    rating: Optional[int] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def problem_url(self) -> Optional[str]:
        """Lien vers l'énoncé, ou None si le contest est inconnu."""
        if self.contest_id is None:
            return None
        section = _contest_section(self.contest_id)
        return f"{CODEFORCES_URL}/{section}/{self.contest_id}/problem/{self.index}"

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Problem":
        return cls(
            index=data['index'],
            name=data['name'],
            contest_id=data.get('contestId'),
            rating=data.get('rating'),
            tags=tuple(data.get('tags', ())),
        )


@dataclass(frozen=True)
class Submission:
    """Soumission telle que rapportée par la plateforme."""
    id: int
    creation_time_seconds: int
    programming_language: str
    problem: Problem
    contest_id: Optional[int] = None
    # None = encore en cours de jugement
    verdict: Optional[str] = None

    relative_time_seconds: Optional[int] = None
    participant_type: Optional[str] = None
    passed_test_count: Optional[int] = None
    time_consumed_millis: Optional[int] = None
    memory_consumed_bytes: Optional[int] = None

    @property
    def is_judged(self) -> bool:
        return self.verdict is not None

    @property
    def created_at(self) -> datetime:
        """Date de soumission (UTC)."""
        return datetime.fromtimestamp(self.creation_time_seconds, tz=timezone.utc)

    @property
    def submission_url(self) -> str:
        """Lien vers la soumission sur Codeforces."""
        if self.contest_id is not None:
            section = _contest_section(self.contest_id)
            return f"{CODEFORCES_URL}/{section}/{self.contest_id}/submission/{self.id}"
        return f"{CODEFORCES_URL}/problemset/submission/{self.id}"

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Submission":
        """
        Construit une soumission depuis un enregistrement `user.status`.

        Les champs absents restent à None : un verdict manquant signifie
        "en test", jamais une chaîne vide.
        """
        author = data.get('author') or {}
        return cls(
            id=data['id'],
            creation_time_seconds=data['creationTimeSeconds'],
            programming_language=data['programmingLanguage'],
            problem=Problem.from_api(data['problem']),
            contest_id=data.get('contestId'),
            verdict=data.get('verdict'),
            relative_time_seconds=data.get('relativeTimeSeconds'),
            participant_type=author.get('participantType'),
            passed_test_count=data.get('passedTestCount'),
            time_consumed_millis=data.get('timeConsumedMillis'),
            memory_consumed_bytes=data.get('memoryConsumedBytes'),
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Résultat d'une analyse, recalculé à chaque appel."""
    is_suspicious: bool = False
    total_submission_count: int = 0
    suspicious_submission_count: int = 0
    suspicious_percentage: float = 0.0
    # Échantillon affiché, borné ; ne pas confondre avec le compte réel
    suspicious_submissions: Tuple[Submission, ...] = field(default_factory=tuple)


@dataclass
class AnalysisConfig:
    """Configuration de la règle de classification."""
    skip_verdict: str = "SKIPPED"
    display_limit: int = 10

    def __post_init__(self):
        if not self.skip_verdict:
            raise ValueError("skip_verdict ne peut pas être vide")
        if self.display_limit < 0:
            raise ValueError(f"display_limit doit être positif ou nul (reçu: {self.display_limit})")

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "AnalysisConfig":
        """Construit la config depuis la section `analysis` des settings."""
        section = settings.get('analysis', {}) or {}
        defaults = cls()
        return cls(
            skip_verdict=section.get('skip_verdict', defaults.skip_verdict),
            display_limit=int(section.get('display_limit', defaults.display_limit)),
        )
