"""Storage upload hook: validate entry-photo uploads as they land.

Object paths look like ``attendance-photos/<yyyy>/<mm>/<uid>/<checkInId>_<ts>.jpg``.
The image annotated is the uploaded object, ``gs://<bucket>/<path>``.
Only entry check-ins are validated; everything else is skipped. The hook
reports what happened instead of raising, since the storage event source
has nobody to surface an error to.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..checkins.repository import CheckInRepository
from ..core.constants import PHOTO_PATH_PREFIX, SYSTEM_ACTOR_ID
from ..core.enums import CheckInType
from ..core.exceptions import DomainError
from .model import ValidationResult
from .service import PhotoReviewService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TriggerOutcome:
    processed: bool
    reason: str
    check_in_id: Optional[str] = None
    result: Optional[ValidationResult] = None


def check_in_id_from_path(object_path: str) -> Optional[str]:
    if not object_path or not object_path.startswith(PHOTO_PATH_PREFIX):
        return None
    file_name = object_path.rsplit("/", 1)[-1]
    check_in_id = file_name.split("_", 1)[0]
    if not check_in_id or check_in_id == file_name:
        return None
    return check_in_id


def image_ref_for_upload(bucket: str, object_path: str) -> str:
    return f"gs://{bucket.strip().strip('/')}/{object_path.lstrip('/')}"


class PhotoUploadTrigger:
    def __init__(
        self,
        reviews: PhotoReviewService,
        checkins: CheckInRepository,
        *,
        actor_id: str = SYSTEM_ACTOR_ID,
        default_bucket: Optional[str] = None,
    ):
        self._reviews = reviews
        self._checkins = checkins
        self._actor_id = actor_id
        self._default_bucket = default_bucket

    def handle_upload(self, object_path: str, bucket: Optional[str] = None) -> TriggerOutcome:
        """Validate the uploaded object itself, not the check-in's stored photo."""

        if not object_path or not object_path.startswith(PHOTO_PATH_PREFIX):
            logger.debug("ignoring upload outside %s: %s", PHOTO_PATH_PREFIX, object_path)
            return TriggerOutcome(processed=False, reason="not a check-in photo")

        check_in_id = check_in_id_from_path(object_path)
        if not check_in_id:
            logger.error("could not extract check-in id from %s", object_path)
            return TriggerOutcome(processed=False, reason="no check-in id in path")

        bucket = (bucket or self._default_bucket or "").strip()
        if not bucket:
            logger.error("no bucket given for upload %s", object_path)
            return TriggerOutcome(processed=False, reason="no bucket for upload", check_in_id=check_in_id)

        try:
            check_in = self._checkins.get_by_id(check_in_id)
            if not check_in:
                logger.error("check-in %s not found for upload %s", check_in_id, object_path)
                return TriggerOutcome(processed=False, reason="check-in not found", check_in_id=check_in_id)

            if check_in.check_in_type != CheckInType.ENTRY:
                logger.info("check-in %s is %s, skipping validation", check_in_id, check_in.check_in_type.value)
                return TriggerOutcome(processed=False, reason="not an entry check-in", check_in_id=check_in_id)

            result = self._reviews.validate_check_in(
                check_in_id=check_in_id,
                triggered_by=self._actor_id,
                image_ref=image_ref_for_upload(bucket, object_path),
            )
        except DomainError as e:
            logger.error("validation of %s failed: %s", object_path, e)
            return TriggerOutcome(processed=False, reason=str(e), check_in_id=check_in_id)
        except Exception as e:
            logger.exception("unexpected error validating %s", object_path)
            return TriggerOutcome(processed=False, reason=str(e), check_in_id=check_in_id)

        return TriggerOutcome(processed=True, reason=result.status.value, check_in_id=check_in_id, result=result)
