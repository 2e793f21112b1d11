from __future__ import annotations

from typing import Any, Dict

from firebase_admin import App, auth


class FamilyDirectory:
    """Firebase Authentication users the families sign in as."""

    def __init__(self, app: App | None = None):
        self._app = app

    def get_user_by_email(self, email: str) -> auth.UserRecord:
        return auth.get_user_by_email(email, app=self._app)

    def set_custom_user_claims(self, uid: str, claims: Dict[str, Any]) -> None:
        auth.set_custom_user_claims(uid, claims, app=self._app)
