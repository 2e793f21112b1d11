#!/usr/bin/env python3
"""
Re-run the setAdminClaim sync for existing family documents.

The trigger does not retry, so a family whose auth user was created after its
document was last written keeps no claims until the document changes again.

    python -m family_functions.tools.resync_claims fam1 fam2
    python -m family_functions.tools.resync_claims --all
"""
import argparse
import sys

import firebase_admin
from firebase_admin import firestore

from family_functions import config
from family_functions.claims import sync_family_claims
from family_functions.directory import FamilyDirectory
from family_functions.store import FamilyStore


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Sync auth custom claims from family documents.")
    p.add_argument("doc_ids", nargs="*", help="Family document ids (e.g., fam1 fam2)")
    p.add_argument("--all", action="store_true",
                   help=f"Sync every document in the '{config.FAMILIES_COLLECTION}' collection.")
    p.add_argument("--collection", default=config.FAMILIES_COLLECTION,
                   help=f"Families collection (default: {config.FAMILIES_COLLECTION}).")
    return p.parse_args(argv)


def iter_families(store, doc_ids, sync_all):
    if sync_all:
        for snap in store.documents():
            yield snap.id, snap.to_dict() or {}
        return
    for doc_id in doc_ids:
        snap = store.ref(doc_id).get()
        yield doc_id, (snap.to_dict() or {}) if snap.exists else None


def run(store, directory, doc_ids, sync_all=False, out=sys.stdout, err=sys.stderr) -> int:
    failed = 0
    for doc_id, data in iter_families(store, doc_ids, sync_all):
        result = sync_family_claims(directory, doc_id, data)
        if not result.success:
            failed += 1
            print(f"{doc_id}: FAILED ({result.kind.value}) {result.error}", file=err)
        elif result.details.get("skipped"):
            print(f"{doc_id}: skipped (no document)", file=out)
        else:
            print(f"{doc_id}: {result.details['claims']}", file=out)
    return 1 if failed else 0


def main(argv=None):
    args = parse_args(argv)
    if not args.doc_ids and not args.all:
        print("No family ids provided (use --all to sync the whole collection).", file=sys.stderr)
        sys.exit(2)

    if not firebase_admin._apps:
        firebase_admin.initialize_app()

    store = FamilyStore(firestore.client(), collection=args.collection)
    sys.exit(run(store, FamilyDirectory(), args.doc_ids, sync_all=args.all))


if __name__ == "__main__":
    main()
