"""
Runtime configuration, read from the environment.

Values may also be placed in a .env file in the backend root:

CORS_ORIGINS=https://example.org,https://app.example.org
PORT=3000

The app loads environment variables automatically using python-dotenv.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")


def _parse_origins(raw: str) -> list[str]:
    values = [item.strip() for item in raw.split(",")]
    values = [item for item in values if item]
    return values or ["*"]


CORS_ORIGINS = _parse_origins(os.getenv("CORS_ORIGINS", "*"))
HOST = os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0"
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
GREENCHECK_API_URL = os.getenv(
    "GREENCHECK_API_URL",
    "https://api.thegreenwebfoundation.org/greencheck",
).strip().rstrip("/")
