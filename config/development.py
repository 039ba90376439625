import os

from .config import Config, DB_CONFIG

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
DB_CONFIG = dict(DB_CONFIG)

VISION_API_KEY = Config.VISION_API_KEY
VISION_ENDPOINT = Config.VISION_ENDPOINT
VISION_TIMEOUT_SECONDS = Config.VISION_TIMEOUT_SECONDS

SCORING_PROFILE = Config.SCORING_PROFILE
SCORING_OVERRIDES = Config.SCORING_OVERRIDES

BACKFILL_ENABLED = Config.BACKFILL_ENABLED
BACKFILL_INTERVAL_SECONDS = Config.BACKFILL_INTERVAL_SECONDS
BACKFILL_BATCH_SIZE = Config.BACKFILL_BATCH_SIZE

UPLOAD_HOOK_TOKEN = os.getenv("UPLOAD_HOOK_TOKEN", "dev-hook-token")
UPLOAD_BUCKET = Config.UPLOAD_BUCKET
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
