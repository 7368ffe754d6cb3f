import os

# Cheapest bcrypt cost passlib accepts; must be set before config is imported.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_DEMO_DATA", "true")
