"""Taxonomie des erreurs de l'analyse."""

from enum import Enum
from typing import Optional


class FailureKind(str, Enum):
    """Catégories d'échec remontées à l'appelant."""
    INVALID_INPUT = "invalid_input"
    PROFILE_NOT_FOUND = "profile_not_found"
    HISTORY_FETCH_FAILED = "history_fetch_failed"
    TRANSPORT_ERROR = "transport_error"


class AnalysisError(Exception):
    """Exception de base pour tous les échecs d'analyse."""

    kind: Optional[FailureKind] = None

    def __init__(self, message: str, comment: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.comment = comment


class InvalidInputError(AnalysisError):
    """Handle vide ou invalide (aucun appel réseau)."""
    kind = FailureKind.INVALID_INPUT


class ProfileNotFoundError(AnalysisError):
    """Le profil n'a pas pu être récupéré (statut distant != OK)."""
    kind = FailureKind.PROFILE_NOT_FOUND


class HistoryFetchError(AnalysisError):
    """L'historique des soumissions n'a pas pu être récupéré."""
    kind = FailureKind.HISTORY_FETCH_FAILED


class TransportError(AnalysisError):
    """L'appel réseau lui-même n'a pas abouti (DNS, timeout, reset)."""
    kind = FailureKind.TRANSPORT_ERROR
