"""Détection des verdicts SKIPPED dans l'historique Codeforces d'un handle."""

import logging

from skipcheck.core.analysis import AnalysisEngine, analyze, build_engine
from skipcheck.core.errors import (
    AnalysisError,
    FailureKind,
    HistoryFetchError,
    InvalidInputError,
    ProfileNotFoundError,
    TransportError,
)
from skipcheck.core.models import AnalysisResult, Profile, Submission

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AnalysisEngine",
    "analyze",
    "build_engine",
    "AnalysisError",
    "FailureKind",
    "HistoryFetchError",
    "InvalidInputError",
    "ProfileNotFoundError",
    "TransportError",
    "AnalysisResult",
    "Profile",
    "Submission",
]
