# config/config.py
import os
from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()


def _flag(name, default="false"):
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Config:
    # --- App settings ---
    FLASK_ENV = os.getenv("FLASK_ENV", "production")
    DEBUG = _flag("FLASK_DEBUG")
    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    # PORT is what most PaaS hosts inject
    APP_PORT = int(os.getenv("APP_PORT") or os.getenv("PORT") or 3001)

    # --- Logging ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_REQUESTS = _flag("LOG_REQUESTS", "true")

    # --- CORS Settings ---
    # Accept comma-separated values: e.g., "https://colabx-frontend.vercel.app,http://localhost:5500"
    ALLOWED_ORIGINS = [
        o.strip()
        for o in os.getenv(
            "ALLOWED_ORIGINS",
            os.getenv("CORS_ORIGINS", "https://colabx-frontend.vercel.app,http://localhost:5500"),
        ).split(",")
        if o.strip()
    ]

    # --- Database ---
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./colabx.db")

    # --- Passwords ---
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 10))

