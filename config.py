# config.py
# Runtime configuration: ALL secrets come from environment variables.
# Optional: a local .env can be used in development; it must NOT be committed.
import os
from pathlib import Path

from dotenv import load_dotenv

# Load variables from a local .env if it exists (dev convenience only).
if Path(".env").exists():
    load_dotenv()

# --- SECRETS ---
# Checked when the bot starts (see bot.get_app), so the engine and the web
# page can run without a token.
TELEGRAM_TOKEN = os.getenv("TELEGRAM_TOKEN")

# --- OPTIONAL SETTINGS ---
# DB: override with DATABASE_URL in env; fallback to local SQLite for dev
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///aquarium_bot.db")

# Timezone for reading timestamps
TZ = os.getenv("TZ", "Europe/Moscow")

# Language of summaries and advice: "es" or "en"
LANGUAGE = os.getenv("LANGUAGE", "es")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

WEB_PORT = int(os.getenv("WEB_PORT", "5000"))
