"""Data module - Vues tabulaires des résultats."""

from skipcheck.data.transformers import SubmissionTransformer

__all__ = [
    "SubmissionTransformer",
]
