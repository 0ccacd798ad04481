"""Process-wide settings, read once from the environment (.env supported)."""

import os

from dotenv import load_dotenv

load_dotenv()

SEAT_IDS = [s.strip() for s in os.getenv("SEAT_IDS", "1,2,3,4,5").split(",") if s.strip()]

# Unconfirmed locks are released after this many milliseconds
LOCK_TTL_MS = int(os.getenv("LOCK_TTL_MS", "60000"))

SWEEP_ENABLED = os.getenv("SWEEP_ENABLED", "true").lower() in ("1", "true", "yes")
SWEEP_GRACE_MS = int(os.getenv("SWEEP_GRACE_MS", "100"))
TIMEZONE = os.getenv("TIMEZONE", "UTC")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

DEFAULT_HOLDER = "anonymous"
