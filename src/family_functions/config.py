from __future__ import annotations

import os


# ----------------------------------------------------------------------
# CONFIGURATION VIA ENV
# ----------------------------------------------------------------------

FAMILIES_COLLECTION = os.environ.get("FAMILIES_COLLECTION", "families")
FAMILY_EMAIL_DOMAIN = os.environ.get("FAMILY_EMAIL_DOMAIN", "families.local")

# Field names on a family document
LOGIN_COUNT_FIELD = os.environ.get("LOGIN_COUNT_FIELD", "currentLoggedIn")
ADMIN_FIELD = os.environ.get("ADMIN_FIELD", "isAdmin")

FUNCTIONS_REGION = os.environ.get("FUNCTIONS_REGION", "us-central1")

NOTIFICATION_ICON = os.environ.get("NOTIFICATION_ICON", "/icons/Icon-192.png")


def family_email(doc_id: str, domain: str | None = None) -> str:
    """Silent-auth address the mobile app signs a family in with."""
    return f"{doc_id}@{domain or FAMILY_EMAIL_DOMAIN}"
