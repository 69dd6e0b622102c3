"""Root conftest — shared test configuration."""

import os

# Module-level app in backstage_app.main reads settings at import time
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")
