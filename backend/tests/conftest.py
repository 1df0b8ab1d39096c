"""Root conftest — shared test configuration."""

import os

# Ensure tests never depend on a developer's .env
os.environ.setdefault("STORE_BASE_URL", "https://store.steampowered.com")
os.environ.setdefault("LOG_FORMAT", "text")
