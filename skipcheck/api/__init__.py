"""API module - Client et endpoints Codeforces."""

from skipcheck.api.client import CodeforcesClient, CodeforcesAPIError
from skipcheck.api.settings import load_settings
from skipcheck.api.users import UsersAPI
from skipcheck.api.submissions import SubmissionsAPI

__all__ = [
    "CodeforcesClient",
    "CodeforcesAPIError",
    "load_settings",
    "UsersAPI",
    "SubmissionsAPI",
]
