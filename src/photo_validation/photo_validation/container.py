from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .annotation.client import AnnotationClient
from .annotation.vision_rest_client import VisionRestAnnotationClient
from .checkins.mysql_checkin_repository import MySQLCheckInRepository
from .checkins.repository import CheckInRepository
from .core.constants import (
    DEFAULT_BACKFILL_BATCH_SIZE,
    DEFAULT_BACKFILL_INTERVAL_SECONDS,
    DEFAULT_VISION_ENDPOINT,
    DEFAULT_VISION_TIMEOUT_SECONDS,
)
from .database.connection import DatabaseConnection, DBConfig
from .jobs.backfill import BackfillJob
from .jobs.recurring import RecurringTask
from .notifications.mysql_notifier import MySQLNotifier
from .notifications.notifier import Notifier
from .scoring.config import ScoringProfile, get_profile, profile_with_overrides
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import ReviewerAuthorizer
from .validation.engine import PhotoValidationEngine
from .validation.mysql_validation_repository import MySQLValidationRepository
from .validation.repository import ValidationRepository
from .validation.service import PhotoReviewService
from .validation.upload_trigger import PhotoUploadTrigger


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    checkins_repo: CheckInRepository
    validations_repo: ValidationRepository
    notifier: Notifier

    authorizer: ReviewerAuthorizer
    engine: PhotoValidationEngine
    review_service: PhotoReviewService
    upload_trigger: PhotoUploadTrigger
    backfill_task: RecurringTask


def wire(
    *,
    users_repo: UserRepository,
    checkins_repo: CheckInRepository,
    validations_repo: ValidationRepository,
    notifier: Notifier,
    annotator: AnnotationClient,
    profile: ScoringProfile,
    backfill_interval_seconds: float = DEFAULT_BACKFILL_INTERVAL_SECONDS,
    backfill_batch_size: int = DEFAULT_BACKFILL_BATCH_SIZE,
    upload_bucket: Optional[str] = None,
) -> Container:
    """Assemble services on top of already-built repositories and clients."""

    authorizer = ReviewerAuthorizer(users_repo)
    engine = PhotoValidationEngine(annotator, profile)
    review_service = PhotoReviewService(validations_repo, checkins_repo, authorizer, notifier, engine)
    upload_trigger = PhotoUploadTrigger(review_service, checkins_repo, default_bucket=upload_bucket)
    backfill_task = RecurringTask(
        "photo-validation-backfill",
        backfill_interval_seconds,
        BackfillJob(review_service, checkins_repo, batch_size=backfill_batch_size),
    )

    return Container(
        users_repo=users_repo,
        checkins_repo=checkins_repo,
        validations_repo=validations_repo,
        notifier=notifier,
        authorizer=authorizer,
        engine=engine,
        review_service=review_service,
        upload_trigger=upload_trigger,
        backfill_task=backfill_task,
    )


def build_container(
    *,
    db_config: dict,
    vision_api_key: str,
    vision_endpoint: str = DEFAULT_VISION_ENDPOINT,
    vision_timeout: float = DEFAULT_VISION_TIMEOUT_SECONDS,
    scoring_profile: str = "brand_weighted",
    scoring_overrides: Optional[dict] = None,
    backfill_interval_seconds: float = DEFAULT_BACKFILL_INTERVAL_SECONDS,
    backfill_batch_size: int = DEFAULT_BACKFILL_BATCH_SIZE,
    upload_bucket: Optional[str] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    profile = profile_with_overrides(get_profile(scoring_profile), **(scoring_overrides or {}))

    return wire(
        users_repo=MySQLUserRepository(conn),
        checkins_repo=MySQLCheckInRepository(conn),
        validations_repo=MySQLValidationRepository(conn),
        notifier=MySQLNotifier(conn),
        annotator=VisionRestAnnotationClient(vision_api_key, endpoint=vision_endpoint, timeout=vision_timeout),
        profile=profile,
        backfill_interval_seconds=backfill_interval_seconds,
        backfill_batch_size=backfill_batch_size,
        upload_bucket=upload_bucket,
    )
