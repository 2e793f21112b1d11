"""Cloud Functions backing the community families app."""

from .claims import build_claims, sync_family_claims
from .errors import ErrorKind, Result
from .logins import decrement_login_count, next_login_count

__all__ = [
    "ErrorKind",
    "Result",
    "build_claims",
    "sync_family_claims",
    "decrement_login_count",
    "next_login_count",
]
