# tests/conftest.py
import pytest
import os
import sys
from unittest.mock import Mock

# Ajoute le répertoire parent au path pour les imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from skipcheck.core.models import Problem, Submission


def make_record(submission_id, verdict="OK", contest_id=1850, **overrides):
    """Enregistrement brut tel que renvoyé par `user.status`."""
    record = {
        'id': submission_id,
        'contestId': contest_id,
        'creationTimeSeconds': 1700000000 - submission_id,
        'relativeTimeSeconds': 2147483647,
        'problem': {
            'contestId': contest_id,
            'index': 'A',
            'name': 'Watermelon',
            'type': 'PROGRAMMING',
            'rating': 800,
            'tags': ['brute force', 'math'],
        },
        'author': {
            'contestId': contest_id,
            'members': [{'handle': 'tourist'}],
            'participantType': 'PRACTICE',
            'ghost': False,
        },
        'programmingLanguage': 'GNU C++17',
        'testset': 'TESTS',
        'passedTestCount': 20,
        'timeConsumedMillis': 15,
        'memoryConsumedBytes': 0,
    }
    if verdict is not None:
        record['verdict'] = verdict
    record.update(overrides)
    return record


def make_submission(submission_id, verdict="OK", contest_id=1850):
    return Submission(
        id=submission_id,
        creation_time_seconds=1700000000 - submission_id,
        programming_language='GNU C++17',
        problem=Problem(index='A', name='Watermelon', contest_id=contest_id, rating=800),
        contest_id=contest_id,
        verdict=verdict,
    )


def make_response(payload=None, status_code=200, text=None):
    """Faux `requests.Response` ; payload=None simule un corps non JSON."""
    response = Mock()
    response.status_code = status_code
    response.text = text or ""
    if payload is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def settings():
    """Configuration figée, indépendante du fichier YAML et de l'environnement."""
    return {
        'api': {'endpoint': 'https://codeforces.test/api/', 'timeout': None},
        'analysis': {'skip_verdict': 'SKIPPED', 'display_limit': 10},
    }


@pytest.fixture
def profile_payload():
    return {
        'status': 'OK',
        'result': [{
            'handle': 'tourist',
            'rating': 3757,
            'maxRating': 4229,
            'rank': 'legendary grandmaster',
            'maxRank': 'tourist',
        }],
    }


@pytest.fixture
def not_found_payload():
    return {'status': 'FAILED', 'comment': 'handles: User with handle nobody not found'}


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def submission_factory():
    return make_submission


@pytest.fixture
def response_factory():
    return make_response
