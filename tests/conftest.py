import threading
import time
from types import SimpleNamespace

import pytest
from firebase_admin import auth


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeTransaction:
    def __init__(self):
        self.reads = {}
        self.writes = []

    def update(self, ref, data):
        self.writes.append((ref.id, data))


class FakeRef:
    def __init__(self, store, doc_id):
        self._store = store
        self.id = doc_id

    def get(self, transaction=None):
        with self._store.lock:
            version, data = self._store.docs.get(self.id, (0, None))
        if transaction is not None:
            transaction.reads[self.id] = version
        if self._store.read_delay:
            time.sleep(self._store.read_delay)
        return FakeSnapshot(self.id, data)


class FakeStore:
    """
    In-memory families collection with optimistic transactions: a commit
    only lands if nothing it read has changed, otherwise the function reruns.
    """

    def __init__(self, docs=None, read_delay=0.0, max_attempts=50):
        self.lock = threading.Lock()
        self.docs = {k: (1, dict(v)) for k, v in (docs or {}).items()}
        self.read_delay = read_delay
        self.max_attempts = max_attempts
        self.transactions = 0
        self.commits = 0
        self.retries = 0

    def data(self, doc_id):
        return self.docs.get(doc_id, (0, None))[1]

    def ref(self, doc_id):
        return FakeRef(self, doc_id)

    def documents(self):
        return [FakeSnapshot(k, v[1]) for k, v in sorted(self.docs.items())]

    def run_transaction(self, fn, ref):
        self.transactions += 1
        for _ in range(self.max_attempts):
            tx = FakeTransaction()
            result = fn(tx, ref)
            with self.lock:
                stale = any(
                    self.docs.get(doc_id, (0, None))[0] != version
                    for doc_id, version in tx.reads.items()
                )
                if not stale:
                    for doc_id, update in tx.writes:
                        version, data = self.docs[doc_id]
                        self.docs[doc_id] = (version + 1, {**data, **update})
                        self.commits += 1
                    return result
                self.retries += 1
        raise RuntimeError("Too much contention on these documents")


class BrokenStore(FakeStore):
    def __init__(self, message="Deadline exceeded"):
        super().__init__()
        self.message = message

    def run_transaction(self, fn, ref):
        self.transactions += 1
        raise RuntimeError(self.message)


class FakeDirectory:
    def __init__(self, users=None, fail_writes=False):
        # email -> uid
        self.users = dict(users or {})
        self.claims = {}
        self.lookups = []
        self.fail_writes = fail_writes

    def get_user_by_email(self, email):
        self.lookups.append(email)
        if email not in self.users:
            raise auth.UserNotFoundError(f"No user record found for the provided email: {email}.")
        return SimpleNamespace(uid=self.users[email], email=email)

    def set_custom_user_claims(self, uid, claims):
        if self.fail_writes:
            raise ValueError("Custom claims payload must not exceed 1000 characters.")
        self.claims[uid] = dict(claims)


@pytest.fixture
def directory():
    return FakeDirectory(users={"fam1@families.local": "uid-1"})
