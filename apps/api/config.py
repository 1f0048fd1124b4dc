"""
config.py
---------
Runtime settings for the trip planner API, read from the environment.
A .env next to the repo root (or in the working directory) is loaded first.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# ── Storage ───────────────────────────────────────────────────────────────────
# Local JSON store is used unless DATABASE_URL points at a Postgres instance.
DATA_DIR: str = os.getenv("DATA_DIR", "data")
LOCAL_STORE_FILE: str = os.getenv("LOCAL_STORE_FILE", "planner_store.json")

DATABASE_URL: str = os.getenv("DATABASE_URL", "")
DB_MIN_CONN: int = int(os.getenv("DB_MIN_CONN", "1"))
DB_MAX_CONN: int = int(os.getenv("DB_MAX_CONN", "5"))

# ── Chat assistant ────────────────────────────────────────────────────────────
GROQ_API_KEY: str = os.getenv("GROQ_API_KEY", "")
CHAT_MODEL: str = os.getenv("CHAT_MODEL", "llama-3.1-8b-instant")

# ── Budget ────────────────────────────────────────────────────────────────────
EXCHANGE_RATE_JPY_PER_USD: float = float(os.getenv("EXCHANGE_RATE_JPY_PER_USD", "152"))

# ── Misc ──────────────────────────────────────────────────────────────────────
HTTP_TIMEOUT: int = int(os.getenv("HTTP_TIMEOUT", "20"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
