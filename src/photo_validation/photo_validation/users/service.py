from __future__ import annotations

from typing import Optional

from ..core.enums import REVIEWER_ROLES
from ..core.exceptions import AuthenticationError, AuthorizationError
from .model import User
from .repository import UserRepository


class ReviewerAuthorizer:
    """Use case: make sure the caller may validate or review check-in photos."""

    def __init__(self, users: UserRepository):
        self._users = users

    def require_reviewer(self, actor_id: Optional[str]) -> User:
        if not actor_id:
            raise AuthenticationError("You must be signed in to perform this action")

        user = self._users.get_by_id(str(actor_id))
        if not user or not user.is_active or user.role not in REVIEWER_ROLES:
            raise AuthorizationError("Only supervisors and administrators can validate photos")
        return user
