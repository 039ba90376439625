from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from ..checkins.model import CheckIn
from ..checkins.repository import CheckInRepository
from ..common.validators import optional_text, require_bool, require_identifier
from ..core.constants import DEFAULT_REJECTION_DETAIL, DEFAULT_REVIEW_REJECTION, REQUIREMENTS_NOT_MET
from ..core.enums import NotificationType, ValidationStatus
from ..core.exceptions import DomainError, NotFoundError, PersistenceError, PreconditionError
from ..notifications.model import Notification
from ..notifications.notifier import Notifier
from ..users.service import ReviewerAuthorizer
from .engine import PhotoValidationEngine
from .model import ValidationResult
from .repository import ValidationRepository

logger = logging.getLogger(__name__)


class PhotoReviewService:
    """Lifecycle of a check-in's validation record.

    unvalidated -> (auto_approved | needs_review | rejected) -> (approved | rejected)

    Each operation performs exactly one write to the record store. Writes are
    last-writer-wins: a concurrent automated run and human review for the
    same check-in may overwrite each other.
    """

    def __init__(
        self,
        validations: ValidationRepository,
        checkins: CheckInRepository,
        authorizer: ReviewerAuthorizer,
        notifier: Notifier,
        engine: PhotoValidationEngine,
    ):
        self._validations = validations
        self._checkins = checkins
        self._authorizer = authorizer
        self._notifier = notifier
        self._engine = engine

    def run_automated_validation(
        self,
        *,
        check_in_id: str,
        actor_id: Optional[str],
        now: Optional[datetime] = None,
    ) -> ValidationResult:
        self._authorizer.require_reviewer(actor_id)
        return self.validate_check_in(check_in_id=check_in_id, triggered_by=str(actor_id), now=now)

    def validate_check_in(
        self,
        *,
        check_in_id: str,
        triggered_by: str,
        now: Optional[datetime] = None,
        image_ref: Optional[str] = None,
    ) -> ValidationResult:
        """Automated run without the role check, for trusted internal callers.

        `image_ref` names the image to annotate when the caller already has
        it (an upload event); otherwise the check-in's stored photo is used.
        """

        check_in = self._require_check_in(check_in_id)
        if image_ref is None:
            if not check_in.has_photo:
                raise PreconditionError("The check-in has no photo to validate")
            image_ref = check_in.photo_ref

        result = self._engine.validate(image_ref, triggered_by=triggered_by, now=now)
        self._persist(check_in.check_in_id, result)
        logger.info(
            "check-in %s validated by %s: %s (%.2f)",
            check_in.check_in_id,
            triggered_by,
            result.status.value,
            result.confidence,
        )

        if result.status == ValidationStatus.REJECTED:
            self._emit(
                check_in,
                type_=NotificationType.PHOTO_REJECTED,
                title="Check-in photo rejected",
                message=result.rejection_reason or REQUIREMENTS_NOT_MET,
                now=result.processed_at,
            )
        return result

    def apply_human_review(
        self,
        *,
        check_in_id: str,
        approved: bool,
        actor_id: Optional[str],
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> str:
        reviewer = self._authorizer.require_reviewer(actor_id)
        approved = require_bool(approved, "approved")
        check_in = self._require_check_in(check_in_id)

        current = self._validations.get(check_in.check_in_id)
        if current is None:
            raise PreconditionError("The check-in photo has not been validated yet")

        notes = optional_text(notes)
        now = now or datetime.now(timezone.utc)
        updated = current.with_review(
            approved=approved,
            reviewed_by=reviewer.user_id,
            reviewed_at=now,
            notes=notes,
            default_reason=DEFAULT_REVIEW_REJECTION,
        )
        self._persist(check_in.check_in_id, updated)
        logger.info(
            "check-in %s reviewed by %s: %s -> %s",
            check_in.check_in_id,
            reviewer.user_id,
            current.status.value,
            updated.status.value,
        )

        if approved:
            self._emit(
                check_in,
                type_=NotificationType.PHOTO_APPROVED,
                title="Photo approved",
                message="Your check-in photo has been approved",
                now=now,
            )
            return "Photo approved"

        self._emit(
            check_in,
            type_=NotificationType.PHOTO_REJECTED,
            title="Photo rejected",
            message=f"Your check-in photo was rejected: {notes or DEFAULT_REJECTION_DETAIL}",
            now=now,
        )
        return "Photo rejected"

    def get_validation(self, check_in_id: str) -> Optional[ValidationResult]:
        return self._validations.get(require_identifier(check_in_id, "checkInId"))

    def _require_check_in(self, check_in_id: str) -> CheckIn:
        check_in_id = require_identifier(check_in_id, "checkInId")
        check_in = self._checkins.get_by_id(check_in_id)
        if not check_in:
            raise NotFoundError(f"Check-in {check_in_id} not found")
        return check_in

    def _persist(self, check_in_id: str, result: ValidationResult) -> None:
        try:
            self._validations.set(check_in_id, result)
        except DomainError:
            raise
        except Exception as e:
            raise PersistenceError(f"Could not store validation for check-in {check_in_id}") from e

    def _emit(self, check_in: CheckIn, *, type_: NotificationType, title: str, message: str, now: Optional[datetime]) -> None:
        notification = Notification(
            type=type_,
            title=title,
            message=message,
            recipient_user_id=check_in.user_id,
            check_in_id=check_in.check_in_id,
            created_at=now or datetime.now(timezone.utc),
        )
        try:
            self._notifier.notify(notification)
        except Exception:
            # Delivery problems never fail the decision that was already stored.
            logger.exception("notification %s for check-in %s was not delivered", type_.value, check_in.check_in_id)
