import json
import os


def _float_overrides(raw: str) -> dict:
    """Parse SCORING_OVERRIDES, e.g. '{"auto_approve_threshold": 0.75}'."""
    if not raw or not raw.strip():
        return {}
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("SCORING_OVERRIDES must be a JSON object")
    return {str(k): float(v) for k, v in data.items()}


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "photo-validation-dev"

    # DB
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "attendance_db")

    # Annotation provider
    VISION_API_KEY = os.environ.get("VISION_API_KEY", "")
    VISION_ENDPOINT = os.environ.get("VISION_ENDPOINT", "https://vision.googleapis.com/v1/images:annotate")
    VISION_TIMEOUT_SECONDS = float(os.environ.get("VISION_TIMEOUT_SECONDS", "60"))

    # Scoring
    SCORING_PROFILE = os.environ.get("SCORING_PROFILE", "brand_weighted")
    SCORING_OVERRIDES = _float_overrides(os.environ.get("SCORING_OVERRIDES", ""))

    # Backfill sweep
    BACKFILL_ENABLED = bool(int(os.environ.get("BACKFILL_ENABLED", "0")))
    BACKFILL_INTERVAL_SECONDS = float(os.environ.get("BACKFILL_INTERVAL_SECONDS", "300"))
    BACKFILL_BATCH_SIZE = int(os.environ.get("BACKFILL_BATCH_SIZE", "50"))

    UPLOAD_HOOK_TOKEN = os.environ.get("UPLOAD_HOOK_TOKEN", "")
    UPLOAD_BUCKET = os.environ.get("UPLOAD_BUCKET", "")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))


DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}
