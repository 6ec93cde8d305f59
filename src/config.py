import logging
import os

from dotenv import load_dotenv

load_dotenv()

HOST = os.environ.get("RECEIPTS_HOST", "0.0.0.0")
RELOAD = os.environ.get("RECEIPTS_RELOAD", "false").lower() == "true"

try:
    PORT = int(os.environ.get("RECEIPTS_PORT", "8080"))
except ValueError:
    raise ValueError("RECEIPTS_PORT must be an integer.")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise ValueError(f"Unknown LOG_LEVEL: {LOG_LEVEL}")
