from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    user_id: str
    full_name: str
    role: Role
    is_active: bool = True
