"""Transformateurs de données."""

from typing import Sequence

import pandas as pd

from skipcheck.core.models import Submission

SUBMISSION_COLUMNS = [
    'id', 'contest_id', 'problem_index', 'problem_name', 'problem_rating',
    'programming_language', 'verdict', 'created_at', 'submission_url',
]

# Libellé des soumissions encore en test
PENDING_VERDICT = "TESTING"


class SubmissionTransformer:
    """Vues tabulaires d'un historique de soumissions."""

    @staticmethod
    def to_dataframe(submissions: Sequence[Submission]) -> pd.DataFrame:
        """
        Convertit des soumissions en DataFrame, une ligne par soumission.

        L'ordre d'entrée est conservé ; les champs absents restent vides.
        """
        rows = [{
            'id': s.id,
            'contest_id': s.contest_id,
            'problem_index': s.problem.index,
            'problem_name': s.problem.name,
            'problem_rating': s.problem.rating,
            'programming_language': s.programming_language,
            'verdict': s.verdict,
            'created_at': s.created_at,
            'submission_url': s.submission_url,
        } for s in submissions]

        return pd.DataFrame(rows, columns=SUBMISSION_COLUMNS)

    @staticmethod
    def verdict_breakdown(submissions: Sequence[Submission]) -> pd.DataFrame:
        """
        Compte les soumissions par verdict, du plus fréquent au moins fréquent.

        Returns:
            DataFrame avec colonnes: verdict, count
        """
        verdicts = pd.Series(
            [s.verdict if s.verdict is not None else PENDING_VERDICT for s in submissions],
            dtype=object,
        )
        if verdicts.empty:
            return pd.DataFrame(columns=['verdict', 'count'])

        counts = verdicts.value_counts()
        return pd.DataFrame({'verdict': counts.index, 'count': counts.values})
