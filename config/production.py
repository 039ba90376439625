import os

from .config import Config, DB_CONFIG

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = dict(DB_CONFIG)

VISION_API_KEY = Config.VISION_API_KEY
VISION_ENDPOINT = Config.VISION_ENDPOINT
VISION_TIMEOUT_SECONDS = Config.VISION_TIMEOUT_SECONDS

SCORING_PROFILE = Config.SCORING_PROFILE
SCORING_OVERRIDES = Config.SCORING_OVERRIDES

BACKFILL_ENABLED = Config.BACKFILL_ENABLED
BACKFILL_INTERVAL_SECONDS = Config.BACKFILL_INTERVAL_SECONDS
BACKFILL_BATCH_SIZE = Config.BACKFILL_BATCH_SIZE

UPLOAD_HOOK_TOKEN = Config.UPLOAD_HOOK_TOKEN
UPLOAD_BUCKET = Config.UPLOAD_BUCKET
LOG_LEVEL = Config.LOG_LEVEL

DEBUG = False

AUTO_INIT_DB = Config.AUTO_INIT_DB
