"""Root conftest — shared test configuration."""

import os

# Tests never depend on a developer's .env or a production environment
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("RATE_LIMIT_ENABLED", "true")
os.environ.setdefault("LOG_FORMAT", "text")
