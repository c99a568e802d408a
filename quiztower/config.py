# quiztower/config.py

import os


def _database_uri() -> str:
    uri = os.getenv("DATABASE_URL", "")
    if uri.startswith("postgres://"):
        uri = uri.replace("postgres://", "postgresql://", 1)
    return uri or os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///quiztower.db")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "super-secret-dev-key")
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Question generation (Groq). Empty key → generation endpoints answer 503.
    GROQ_API_KEY = os.getenv("GROQ_API_KEY", "")
    GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")

    ANSWER_KEY_TTL_HOURS = int(os.getenv("ANSWER_KEY_TTL_HOURS", "24"))
    LEDGER_MAX_RETRIES = int(os.getenv("LEDGER_MAX_RETRIES", "3"))
    DAILY_SECRET = os.getenv("DAILY_SECRET", "")
