"""
Cloud Functions for the community app.

- setAdminClaim: mirror a family's isAdmin flag into its auth custom claims
- decrementLogin: safely decrement a family's login count on logout
"""
import firebase_admin

# Initialise Firebase Admin once
if not firebase_admin._apps:
    firebase_admin.initialize_app()

# Deployed names are the ones the mobile app calls.
from family_functions.handlers import decrement_login as decrementLogin  # noqa: E402,F401,N812
from family_functions.handlers import set_admin_claim as setAdminClaim  # noqa: E402,F401,N812
