from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional

from firebase_admin import firestore
from firebase_functions import firestore_fn, https_fn

from . import config
from .claims import sync_family_claims
from .directory import FamilyDirectory
from .logins import decrement_login_count
from .store import FamilyStore


@dataclass(frozen=True)
class FunctionsContext:
    store: FamilyStore
    directory: FamilyDirectory


@lru_cache(maxsize=1)
def get_context() -> FunctionsContext:
    # Requires firebase_admin.initialize_app() to have run (functions/main.py)
    return FunctionsContext(
        store=FamilyStore(firestore.client()),
        directory=FamilyDirectory(),
    )


# ----------------------------------------------------------------------
# setAdminClaim: runs on every write to a family document
# ----------------------------------------------------------------------

def _after_data(change: Optional[firestore_fn.Change]) -> Optional[Dict[str, Any]]:
    after = change.after if change is not None else None
    if after is None or not after.exists:
        return None
    return after.to_dict() or {}


@firestore_fn.on_document_written(
    document=f"{config.FAMILIES_COLLECTION}/{{docId}}",
    region=config.FUNCTIONS_REGION,
)
def set_admin_claim(event: firestore_fn.Event[firestore_fn.Change[firestore_fn.DocumentSnapshot | None]]) -> None:
    # Failures are logged by sync_family_claims; the trigger never retries
    sync_family_claims(get_context().directory, event.params["docId"], _after_data(event.data))


# ----------------------------------------------------------------------
# decrementLogin: called by the app on logout for non-admin families
# ----------------------------------------------------------------------

def _doc_id_from(data: Any) -> Any:
    if not isinstance(data, dict):
        return None
    return data.get("docId")


@https_fn.on_call(region=config.FUNCTIONS_REGION)
def decrement_login(req: https_fn.CallableRequest) -> dict:
    result = decrement_login_count(get_context().store, _doc_id_from(req.data))
    return result.to_dict()
