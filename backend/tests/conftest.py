"""Root conftest: shared test configuration."""

import os

# Keep tests independent of whatever LOG_* a developer exported
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("LOG_FORMAT", "text")
