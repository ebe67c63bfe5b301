from dotenv import load_dotenv
import os

# Load environment variables from .env file (if exists)
load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Seeded admin account (plaintext, compared as-is on login)
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

SESSION_TTL_HOURS = float(os.getenv("SESSION_TTL_HOURS", "24"))

# "memory" keeps everything in process; "database" goes through SQLAlchemy
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").strip().lower()
DATABASE_URL = os.getenv("DATABASE_URL")

SEED_SAMPLE_CONTENT = _flag("SEED_SAMPLE_CONTENT")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", 8000))
