# tests/test_models.py
import dataclasses
from datetime import datetime, timezone

import pytest

from skipcheck.core.models import AnalysisConfig, Problem, Profile, Submission


class TestProfile:
    def test_from_api(self):
        profile = Profile.from_api({
            'handle': 'Benq', 'rating': 3792, 'maxRating': 3833,
            'rank': 'legendary grandmaster', 'maxRank': 'legendary grandmaster',
            'contribution': 0,
        })

        assert profile == Profile('Benq', 3792, 3833, 'legendary grandmaster', 'legendary grandmaster')

    def test_rating_zero_is_rated(self):
        """Un rating explicite à 0 reste distinct d'un compte unrated."""
        assert Profile.from_api({'handle': 'x', 'rating': 0}).is_rated
        assert not Profile.from_api({'handle': 'x'}).is_rated

    def test_is_immutable(self):
        profile = Profile(handle='tourist')
        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.rating = 1500


class TestProblem:
    def test_practice_problem_without_contest(self):
        """Un problème sans contest n'a pas de lien."""
        problem = Problem.from_api({'index': 'A', 'name': 'Hello'})

        assert problem.contest_id is None
        assert problem.rating is None
        assert problem.tags == ()
        assert problem.problem_url is None

    def test_problem_url(self):
        problem = Problem(index='B', name='Two Arrays', contest_id=1850)
        assert problem.problem_url == "https://codeforces.com/contest/1850/problem/B"

    def test_gym_problem_url(self):
        problem = Problem(index='C', name='Gym Task', contest_id=104114)
        assert problem.problem_url == "https://codeforces.com/gym/104114/problem/C"


class TestSubmission:
    def test_from_api(self, record_factory):
        submission = Submission.from_api(record_factory(42, 'SKIPPED'))

        assert submission.id == 42
        assert submission.contest_id == 1850
        assert submission.verdict == 'SKIPPED'
        assert submission.programming_language == 'GNU C++17'
        assert submission.participant_type == 'PRACTICE'
        assert submission.problem.tags == ('brute force', 'math')
        assert submission.memory_consumed_bytes == 0

    def test_missing_optional_fields(self, record_factory):
        """Les champs absents restent None, jamais 0 ou ''."""
        record = record_factory(1, verdict=None)
        for key in ('contestId', 'author', 'passedTestCount', 'relativeTimeSeconds'):
            del record[key]
        del record['problem']['rating']

        submission = Submission.from_api(record)

        assert submission.verdict is None
        assert submission.contest_id is None
        assert submission.participant_type is None
        assert submission.passed_test_count is None
        assert submission.problem.rating is None

    def test_created_at(self, submission_factory):
        submission = submission_factory(0)
        assert submission.created_at == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_submission_urls(self, submission_factory):
        assert submission_factory(7, contest_id=1850).submission_url == \
            "https://codeforces.com/contest/1850/submission/7"
        assert submission_factory(7, contest_id=104114).submission_url == \
            "https://codeforces.com/gym/104114/submission/7"
        assert submission_factory(7, contest_id=None).submission_url == \
            "https://codeforces.com/problemset/submission/7"


class TestAnalysisConfig:
    def test_defaults(self):
        config = AnalysisConfig()
        assert config.skip_verdict == 'SKIPPED'
        assert config.display_limit == 10

    def test_from_settings(self, settings):
        settings['analysis']['display_limit'] = '3'

        config = AnalysisConfig.from_settings(settings)

        assert config.display_limit == 3
        assert config.skip_verdict == 'SKIPPED'

    def test_from_empty_settings(self):
        assert AnalysisConfig.from_settings({}) == AnalysisConfig()

    def test_negative_display_limit_rejected(self):
        """Une limite négative tronquerait l'échantillon : refusée."""
        with pytest.raises(ValueError, match="display_limit"):
            AnalysisConfig(display_limit=-1)

    def test_zero_display_limit_allowed(self):
        assert AnalysisConfig(display_limit=0).display_limit == 0

    def test_empty_skip_verdict_rejected(self):
        with pytest.raises(ValueError, match="skip_verdict"):
            AnalysisConfig(skip_verdict='')

    def test_negative_limit_from_settings_rejected(self, settings):
        settings['analysis']['display_limit'] = -3

        with pytest.raises(ValueError, match="display_limit"):
            AnalysisConfig.from_settings(settings)
