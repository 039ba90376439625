from .config import DB_CONFIG

SECRET_KEY = "test-secret"
DB_CONFIG = dict(DB_CONFIG)

VISION_API_KEY = ""
VISION_ENDPOINT = "http://vision.invalid/v1/images:annotate"
VISION_TIMEOUT_SECONDS = 1.0

SCORING_PROFILE = "brand_weighted"
SCORING_OVERRIDES = {}

BACKFILL_ENABLED = False
BACKFILL_INTERVAL_SECONDS = 300.0
BACKFILL_BATCH_SIZE = 10

UPLOAD_HOOK_TOKEN = "test-hook-token"
UPLOAD_BUCKET = ""
LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
