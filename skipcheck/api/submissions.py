"""Endpoint de l'historique des soumissions."""

import logging
from typing import List

from skipcheck.api.client import CodeforcesClient, CodeforcesAPIError
from skipcheck.core.errors import HistoryFetchError
from skipcheck.core.models import Submission

logger = logging.getLogger(__name__)


class SubmissionsAPI:
    """Récupération de l'historique complet d'un handle."""

    DEFAULT_MESSAGE = "Impossible de récupérer les soumissions"

    def __init__(self, client: CodeforcesClient = None):
        self.client = client or CodeforcesClient()

    def fetch_history(self, handle: str) -> List[Submission]:
        """
        Récupère toutes les soumissions via `user.status`.

        L'ordre de l'API (plus récente d'abord) est conservé tel quel,
        sans tri ni filtre.

        Raises:
            HistoryFetchError: statut distant != OK ou enregistrement invalide
        """
        try:
            result = self.client.get_user_status(handle)
        except CodeforcesAPIError as e:
            raise HistoryFetchError(e.comment or self.DEFAULT_MESSAGE, comment=e.comment) from e

        submissions = []
        for record in result or []:
            try:
                submissions.append(Submission.from_api(record))
            except (KeyError, TypeError) as e:
                raise HistoryFetchError(f"Soumission invalide pour {handle}: {e}") from e

        logger.debug("%d soumissions pour %s", len(submissions), handle)
        return submissions
