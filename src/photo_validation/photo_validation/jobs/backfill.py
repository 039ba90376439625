from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..checkins.repository import CheckInRepository
from ..core.constants import DEFAULT_BACKFILL_BATCH_SIZE, SYSTEM_ACTOR_ID
from ..core.enums import CheckInType
from ..core.exceptions import DomainError
from ..validation.service import PhotoReviewService

logger = logging.getLogger(__name__)


@dataclass
class BackfillReport:
    validated: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)


class BackfillJob:
    """Validates entry photos that never went through the upload hook."""

    def __init__(
        self,
        reviews: PhotoReviewService,
        checkins: CheckInRepository,
        *,
        batch_size: int = DEFAULT_BACKFILL_BATCH_SIZE,
        actor_id: str = SYSTEM_ACTOR_ID,
    ):
        self._reviews = reviews
        self._checkins = checkins
        self._batch_size = int(batch_size)
        self._actor_id = actor_id

    def __call__(self) -> BackfillReport:
        report = BackfillReport()
        for check_in in self._checkins.list_unvalidated(check_in_type=CheckInType.ENTRY, limit=self._batch_size):
            try:
                self._reviews.validate_check_in(check_in_id=check_in.check_in_id, triggered_by=self._actor_id)
            except DomainError as e:
                # One bad check-in must not stop the sweep.
                report.failed[check_in.check_in_id] = str(e)
                logger.error("backfill of check-in %s failed: %s", check_in.check_in_id, e)
                continue
            except Exception as e:
                report.failed[check_in.check_in_id] = str(e)
                logger.exception("unexpected error backfilling check-in %s", check_in.check_in_id)
                continue
            report.validated.append(check_in.check_in_id)

        if report.validated or report.failed:
            logger.info("backfill: %d validated, %d failed", len(report.validated), len(report.failed))
        return report
