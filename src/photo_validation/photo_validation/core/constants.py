"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Annotation request sizes
LABEL_MAX_RESULTS = 20
LOGO_MAX_RESULTS = 10
OBJECT_MAX_RESULTS = 10

DEFAULT_VISION_ENDPOINT = "https://vision.googleapis.com/v1/images:annotate"
DEFAULT_VISION_TIMEOUT_SECONDS = 60

# Upload trigger
PHOTO_PATH_PREFIX = "attendance-photos/"
SYSTEM_ACTOR_ID = "system:upload-trigger"

# Backfill sweep
DEFAULT_BACKFILL_INTERVAL_SECONDS = 300
DEFAULT_BACKFILL_BATCH_SIZE = 50

# Messages
NO_PERSON_REASON = "No person clearly visible in the photo. Make sure you are visible and facing the camera."
REQUIREMENTS_NOT_MET = "Photo does not meet the requirements."
DEFAULT_REVIEW_REJECTION = "Rejected by supervisor"
DEFAULT_REJECTION_DETAIL = "does not meet the requirements"
