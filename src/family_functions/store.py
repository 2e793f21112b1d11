from __future__ import annotations

from typing import Any, Callable

from firebase_admin import firestore
from google.cloud.firestore import Client, DocumentReference, Transaction

from . import config


class FamilyStore:
    """Families collection in Firestore."""

    def __init__(self, client: Client, collection: str = config.FAMILIES_COLLECTION):
        self._client = client
        self.collection = collection

    def ref(self, doc_id: str) -> DocumentReference:
        return self._client.collection(self.collection).document(doc_id)

    def documents(self):
        return self._client.collection(self.collection).stream()

    def run_transaction(
        self,
        fn: Callable[[Transaction, DocumentReference], Any],
        ref: DocumentReference,
    ) -> Any:
        """
        Run fn(transaction, ref) atomically.

        Firestore re-runs the whole function if the document changed between
        the read and the commit, and raises once it runs out of attempts.
        """
        return firestore.transactional(fn)(self._client.transaction(), ref)
