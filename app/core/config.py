import os
from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


# -----------------------
# Storage Config
# -----------------------
DATA_FILE = os.getenv("DATA_FILE", os.path.join("data", "business_data.json"))
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")

MAX_UPLOAD_SIZE_MB = _int_env("MAX_UPLOAD_SIZE_MB", 50)
MAX_UPLOAD_SIZE = MAX_UPLOAD_SIZE_MB * 1024 * 1024
MAX_UPLOAD_FILES = _int_env("MAX_UPLOAD_FILES", 10)

# -----------------------
# API Config
# -----------------------
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# -----------------------
# Quote Config
# -----------------------
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₪")
WHATSAPP_COUNTRY_CODE = os.getenv("WHATSAPP_COUNTRY_CODE", "972")
DEFAULT_QUOTE_VALIDITY_DAYS = _int_env("DEFAULT_QUOTE_VALIDITY_DAYS", 30)
if DEFAULT_QUOTE_VALIDITY_DAYS < 1:
    raise ValueError("DEFAULT_QUOTE_VALIDITY_DAYS must be positive")

MAX_QUOTE_VALIDITY_DAYS = 3650
if DEFAULT_QUOTE_VALIDITY_DAYS > MAX_QUOTE_VALIDITY_DAYS:
    raise ValueError(f"DEFAULT_QUOTE_VALIDITY_DAYS must be at most {MAX_QUOTE_VALIDITY_DAYS}")
ACTIVITY_LOG_LIMIT = _int_env("ACTIVITY_LOG_LIMIT", 500)

# -----------------------
# Business profile used to seed a new data file
# -----------------------
DEFAULT_BUSINESS_PROFILE = {
    "business_name": os.getenv("BUSINESS_NAME", "Master Code"),
    "owner": os.getenv("BUSINESS_OWNER", "Yair"),
    "phone": os.getenv("BUSINESS_PHONE", "052-209-1733"),
    "email": os.getenv("BUSINESS_EMAIL", "info@example.com"),
    "website": os.getenv("BUSINESS_WEBSITE", "https://example.com"),
}
