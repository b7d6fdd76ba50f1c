"""Core module - Modèles et erreurs de l'analyse."""

from skipcheck.core.errors import (
    AnalysisError,
    FailureKind,
    InvalidInputError,
    ProfileNotFoundError,
    HistoryFetchError,
    TransportError,
)
from skipcheck.core.models import (
    Profile,
    Problem,
    Submission,
    AnalysisResult,
    AnalysisConfig,
)

__all__ = [
    "AnalysisError",
    "FailureKind",
    "InvalidInputError",
    "ProfileNotFoundError",
    "HistoryFetchError",
    "TransportError",
    "Profile",
    "Problem",
    "Submission",
    "AnalysisResult",
    "AnalysisConfig",
]
