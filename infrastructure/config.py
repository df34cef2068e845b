"""Application settings, read from the environment (and .env when present)"""
import os

from dotenv import load_dotenv

load_dotenv()

APP_TITLE = os.environ.get("APP_TITLE", "Meeting Room Booking API")
APP_HOST = os.environ.get("APP_HOST", "0.0.0.0")
APP_PORT = int(os.environ.get("APP_PORT", "3000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
