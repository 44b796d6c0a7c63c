"""Root conftest — shared test configuration."""

import os

# Tests build their own stores; keep startup settings deterministic
os.environ.setdefault("SEED_DEMO_DATA", "false")
os.environ.setdefault("LOG_FORMAT", "text")
