from __future__ import annotations

import numbers
from typing import Any

from firebase_functions import logger

from . import config
from .errors import ErrorKind, Result


def next_login_count(current: Any) -> numbers.Real:
    """Counter value after one logout; never below zero."""
    # Firestore may store the counter as a double
    if isinstance(current, bool) or not isinstance(current, numbers.Real):
        current = 0
    return max(current - 1, 0)


def decrement_login_count(store, doc_id: Any) -> Result:
    """
    Atomically decrement a family's logged-in counter.

    A family document that no longer exists is left alone and still counts as
    success. Repeated calls are not deduplicated: two logout signals mean two
    decrements.
    """
    if not isinstance(doc_id, str) or not doc_id:
        logger.warn("decrementLogin called without docId")
        return Result.fail(ErrorKind.INVALID_ARGUMENT, "Missing docId")

    field = config.LOGIN_COUNT_FIELD

    def _txn(transaction, ref):
        snapshot = ref.get(transaction=transaction)
        if not snapshot.exists:
            return None

        current = (snapshot.to_dict() or {}).get(field)
        new_value = next_login_count(current)
        transaction.update(ref, {field: new_value})
        return new_value

    try:
        new_value = store.run_transaction(_txn, store.ref(doc_id))
    except Exception as e:
        logger.error(
            f"decrementLogin error: {e}",
            docId=doc_id,
            kind=ErrorKind.TRANSACTION_FAILURE.value,
        )
        return Result.fail(ErrorKind.TRANSACTION_FAILURE, str(e), docId=doc_id)

    if new_value is None:
        logger.info(f"Family {doc_id} not found, login count unchanged", docId=doc_id)
        return Result.ok(docId=doc_id, missing=True)

    logger.info(f"Login count decremented -> family {doc_id}", docId=doc_id, count=new_value)
    return Result.ok(docId=doc_id, count=new_value)
