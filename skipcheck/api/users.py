"""Endpoint des profils utilisateurs."""

import logging

from skipcheck.api.client import CodeforcesClient, CodeforcesAPIError
from skipcheck.core.errors import ProfileNotFoundError
from skipcheck.core.models import Profile

logger = logging.getLogger(__name__)


class UsersAPI:
    """Récupération du profil d'un handle."""

    DEFAULT_MESSAGE = "Utilisateur introuvable"

    def __init__(self, client: CodeforcesClient = None):
        self.client = client or CodeforcesClient()

    def fetch_profile(self, handle: str) -> Profile:
        """
        Récupère le profil d'un handle via `user.info`.

        Seul le premier profil de la réponse est retenu.

        Raises:
            ProfileNotFoundError: statut distant != OK ou réponse inexploitable
        """
        try:
            result = self.client.get_user_info(handle)
        except CodeforcesAPIError as e:
            raise ProfileNotFoundError(e.comment or self.DEFAULT_MESSAGE, comment=e.comment) from e

        if not result:
            raise ProfileNotFoundError(self.DEFAULT_MESSAGE)

        try:
            profile = Profile.from_api(result[0])
        except (KeyError, TypeError) as e:
            raise ProfileNotFoundError(f"Profil invalide pour {handle}: {e}") from e

        logger.debug("Profil %s: rating=%s", profile.handle, profile.rating)
        return profile
