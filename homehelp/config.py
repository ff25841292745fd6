import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./homehelp.db")

# Security - CRITICAL: No default secret key in production
SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    import warnings

    warnings.warn(
        "SECRET_KEY not set! Using insecure default - DO NOT USE IN PRODUCTION", RuntimeWarning, stacklevel=2
    )
    SECRET_KEY = "INSECURE-DEV-KEY-CHANGE-IN-PRODUCTION"  # noqa: S105 - Dev fallback only

# Authentication
# "token" = signed bearer tokens issued by /api/login
# "none"  = every request resolves to DEFAULT_USER_ID (demo/testing only)
AUTH_MODE = os.getenv("AUTH_MODE", "token").lower()
DEFAULT_USER_ID = int(os.getenv("DEFAULT_USER_ID", "1"))
SESSION_TOKEN_TTL_SECONDS = int(os.getenv("SESSION_TOKEN_TTL_SECONDS", str(7 * 24 * 3600)))
# bcrypt work factor (4-31); lower it only for tests
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# Daily slot template offered to users (HH:MM, comma separated)
SLOT_TEMPLATE = os.getenv(
    "SLOT_TEMPLATE", "08:00,09:00,10:00,11:00,12:00,13:00,14:00,15:00,16:00,17:00"
)

# Booking policies
# Reject a booking when the provider already has a scheduled booking at the same timestamp
ENFORCE_SLOT_AVAILABILITY = os.getenv("ENFORCE_SLOT_AVAILABILITY", "true").lower() == "true"
# Reject bookings whose appointment date is in the past (off by default, the UI checks this)
REQUIRE_FUTURE_BOOKINGS = os.getenv("REQUIRE_FUTURE_BOOKINGS", "false").lower() == "true"

# Provider auto-reply simulation
AUTO_REPLY_ENABLED = os.getenv("AUTO_REPLY_ENABLED", "true").lower() == "true"
AUTO_REPLY_DELAY_SECONDS = int(os.getenv("AUTO_REPLY_DELAY_SECONDS", "10"))
AUTO_REPLY_TEXT = os.getenv(
    "AUTO_REPLY_TEXT", "Thank you for your message. I'll get back to you shortly."
)

# Frontend base URL, used for CORS defaults
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")
