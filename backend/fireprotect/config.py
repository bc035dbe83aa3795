import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_PATH = os.getenv("DATABASE_PATH", "../data/fireprotect.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR")  # defaults to <repo>/logs
CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

# ThingSpeak upstream
THINGSPEAK_BASE_URL = os.getenv("THINGSPEAK_BASE_URL", "https://api.thingspeak.com")
THINGSPEAK_TIMEOUT = float(os.getenv("THINGSPEAK_TIMEOUT", "10"))

# Alert rules
GAS_THRESHOLD = float(os.getenv("GAS_THRESHOLD", "300"))
TEMPERATURE_THRESHOLD = float(os.getenv("TEMPERATURE_THRESHOLD", "25"))
FLAME_SENTINEL = os.getenv("FLAME_SENTINEL", "0")

# Opt-in: reject statuses outside the known set instead of writing them through
STRICT_ALERT_STATUS = os.getenv("STRICT_ALERT_STATUS", "false").lower() == "true"
# Reuse an active alert of the same type/location instead of inserting a new row
DEDUPLICATE_ACTIVE_ALERTS = os.getenv("DEDUPLICATE_ACTIVE_ALERTS", "false").lower() == "true"
