"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real MongoDB or emit JSON logs by default
os.environ.setdefault("MONGO_URI", "mongodb://localhost:1")
os.environ.setdefault("MONGO_SERVER_SELECTION_TIMEOUT_MS", "50")
os.environ.setdefault("LOG_FORMAT", "text")
