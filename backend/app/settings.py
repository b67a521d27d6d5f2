"""Application settings."""
import os
from pathlib import Path

# Database file lives at repo root unless DATABASE_URL says otherwise
REPO_ROOT = Path(__file__).resolve().parent.parent.parent
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{REPO_ROOT / 'puzzles.db'}")

# Comma-separated list of origins allowed to call the API
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

# Identity provider (issues and resolves opaque session tokens)
USERS_SERVICE_API_URL = os.getenv("USERS_SERVICE_API_URL", "http://localhost:8787").rstrip("/")
USERS_SERVICE_API_KEY = os.getenv("USERS_SERVICE_API_KEY", "")
IDENTITY_TIMEOUT_SEC = float(os.getenv("IDENTITY_TIMEOUT_SEC", "5"))

SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "puzzle_session_token")
# 60 days
SESSION_COOKIE_MAX_AGE = int(os.getenv("SESSION_COOKIE_MAX_AGE", str(60 * 24 * 60 * 60)))

# Number of sessions returned by the history endpoint
HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
