"""In-memory stand-ins for the repository and client protocols."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from src.photo_validation.photo_validation.annotation.model import AnnotationPayload
from src.photo_validation.photo_validation.checkins.model import CheckIn
from src.photo_validation.photo_validation.core.enums import CheckInType, Role
from src.photo_validation.photo_validation.notifications.model import Notification
from src.photo_validation.photo_validation.users.model import User
from src.photo_validation.photo_validation.validation.model import ValidationResult

CREATED_AT = datetime(2025, 12, 1, 8, 0, 0)

GOOD_PAYLOAD = AnnotationPayload.of(
    labels=[("Person", 0.95), ("Polo shirt", 0.9), ("Retail", 0.8)],
    logos=[("Aviva", 0.7)],
    colors=[(30, 210, 60, 0.6)],
)

WEAK_PAYLOAD = AnnotationPayload.of(labels=[("Person", 0.7)])

NO_PERSON_PAYLOAD = AnnotationPayload.of(labels=[("Shelf", 0.9)], colors=[(30, 210, 60, 0.9)])


@dataclass
class InMemoryUsers:
    users_by_id: dict[str, User] = field(default_factory=dict)

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.users_by_id.get(user_id)


@dataclass
class InMemoryCheckIns:
    by_id: dict[str, CheckIn] = field(default_factory=dict)
    validations: Optional["InMemoryValidations"] = None

    def get_by_id(self, check_in_id: str) -> Optional[CheckIn]:
        return self.by_id.get(check_in_id)

    def list_unvalidated(self, *, check_in_type: CheckInType, limit: int):
        done = set(self.validations.records) if self.validations else set()
        items = [
            c
            for c in self.by_id.values()
            if c.has_photo and c.check_in_type == check_in_type and c.check_in_id not in done
        ]
        items.sort(key=lambda c: c.created_at)
        return items[:limit]


class InMemoryValidations:
    def __init__(self, *, fail_writes: bool = False):
        self.records: dict[str, ValidationResult] = {}
        self.writes: list[tuple[str, ValidationResult]] = []
        self.fail_writes = fail_writes

    def get(self, check_in_id: str) -> Optional[ValidationResult]:
        return self.records.get(check_in_id)

    def set(self, check_in_id: str, result: ValidationResult) -> None:
        if self.fail_writes:
            raise ConnectionError("database is unavailable")
        self.writes.append((check_in_id, result))
        self.records[check_in_id] = result


class RecordingNotifier:
    def __init__(self, *, fail: bool = False):
        self.sent: list[Notification] = []
        self.fail = fail

    def notify(self, notification: Notification) -> None:
        if self.fail:
            raise ConnectionError("notification sink is down")
        self.sent.append(notification)


class StubAnnotator:
    def __init__(self, payload: Optional[AnnotationPayload] = None, *, error: Optional[Exception] = None):
        self.payload = payload or AnnotationPayload()
        self.error = error
        self.calls: list[str] = []

    def annotate(self, image_ref: str) -> AnnotationPayload:
        self.calls.append(image_ref)
        if self.error is not None:
            raise self.error
        return self.payload


def make_users() -> InMemoryUsers:
    return InMemoryUsers(
        {
            "sup-1": User(user_id="sup-1", full_name="Sofia Supervisor", role=Role.SUPERVISOR),
            "adm-1": User(user_id="adm-1", full_name="Ana Admin", role=Role.ADMIN),
            "root-1": User(user_id="root-1", full_name="Root", role=Role.SUPER_ADMIN),
            "emp-1": User(user_id="emp-1", full_name="Emilio Employee", role=Role.EMPLOYEE),
            "sup-off": User(user_id="sup-off", full_name="Former Supervisor", role=Role.SUPERVISOR, is_active=False),
        }
    )


def make_check_ins(validations: Optional[InMemoryValidations] = None) -> InMemoryCheckIns:
    return InMemoryCheckIns(
        {
            "chk-1": CheckIn(
                check_in_id="chk-1",
                user_id="emp-1",
                check_in_type=CheckInType.ENTRY,
                created_at=CREATED_AT,
                photo_ref="gs://bucket/attendance-photos/2025/12/emp-1/chk-1_1733040000.jpg",
            ),
            "chk-nophoto": CheckIn(
                check_in_id="chk-nophoto",
                user_id="emp-1",
                check_in_type=CheckInType.ENTRY,
                created_at=CREATED_AT,
                photo_ref=None,
            ),
            "chk-exit": CheckIn(
                check_in_id="chk-exit",
                user_id="emp-1",
                check_in_type=CheckInType.EXIT,
                created_at=CREATED_AT,
                photo_ref="gs://bucket/attendance-photos/2025/12/emp-1/chk-exit_1733070000.jpg",
            ),
        },
        validations=validations,
    )
