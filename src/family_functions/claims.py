from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from firebase_admin import auth
from firebase_functions import logger

from . import config
from .errors import ErrorKind, Result


def build_claims(doc_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    # Only a literal True grants admin
    return {
        "admin": data.get(config.ADMIN_FIELD) is True,
        "familyId": doc_id,
    }


def sync_family_claims(
    directory,
    doc_id: str,
    data: Optional[Mapping[str, Any]],
) -> Result:
    """
    Mirror a family document's admin flag onto its auth user.

    The user's whole custom claim set is replaced with {admin, familyId};
    any other claim it carried is dropped. Deleted documents are skipped, but
    a document with no fields still gets {admin: False, familyId}.
    Nothing is retried: a user created after the write keeps stale claims
    until the document is written again (see tools.resync_claims).
    """
    if data is None:
        return Result.ok(docId=doc_id, skipped=True)

    email = config.family_email(doc_id)
    claims = build_claims(doc_id, data)

    try:
        user = directory.get_user_by_email(email)
    except auth.UserNotFoundError as e:
        logger.error(
            f"Error setting admin claim: no user for {email}",
            email=email,
            kind=ErrorKind.LOOKUP_FAILURE.value,
        )
        return Result.fail(ErrorKind.LOOKUP_FAILURE, str(e), email=email)
    except Exception as e:
        logger.error(
            f"Error setting admin claim: lookup failed for {email}: {e}",
            email=email,
            kind=ErrorKind.LOOKUP_FAILURE.value,
        )
        return Result.fail(ErrorKind.LOOKUP_FAILURE, str(e), email=email)

    try:
        directory.set_custom_user_claims(user.uid, claims)
    except Exception as e:
        logger.error(
            f"Error setting admin claim: {e}",
            email=email,
            uid=user.uid,
            kind=ErrorKind.CLAIM_WRITE_FAILURE.value,
        )
        return Result.fail(ErrorKind.CLAIM_WRITE_FAILURE, str(e), email=email, uid=user.uid)

    logger.info(
        f"Custom claims updated -> email={email} | admin={claims['admin']}",
        email=email,
        admin=claims["admin"],
    )
    return Result.ok(docId=doc_id, email=email, uid=user.uid, claims=claims)
