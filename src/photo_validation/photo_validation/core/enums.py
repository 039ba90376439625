from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    EMPLOYEE = "employee"
    SUPERVISOR = "supervisor"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


REVIEWER_ROLES = frozenset({Role.SUPERVISOR, Role.ADMIN, Role.SUPER_ADMIN})


class ValidationStatus(str, Enum):
    """Disposition of a check-in photo.

    AUTO_APPROVED and NEEDS_REVIEW are only produced by the automated run;
    APPROVED is only produced by a human override. REJECTED is shared.
    """

    AUTO_APPROVED = "auto_approved"
    NEEDS_REVIEW = "needs_review"
    REJECTED = "rejected"
    APPROVED = "approved"


class CheckInType(str, Enum):
    ENTRY = "entry"
    MEAL = "meal"
    RETURN = "return"
    EXIT = "exit"


class NotificationType(str, Enum):
    PHOTO_REJECTED = "photo_rejected"
    PHOTO_APPROVED = "photo_approved"


class Category(str, Enum):
    """Semantic categories scored for every photo."""

    PERSON = "person"
    UNIFORM = "uniform"
    LOCATION = "location"
    LOGO = "logo"
    BRAND_COLOR = "brand_color"
