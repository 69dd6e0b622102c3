"""User Schemas — listing response for the static user set."""

from datetime import datetime

from backstage_app.core.domain_types import UserRole
from backstage_app.schemas.common import CamelModel


class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    role: UserRole


class UserListResponse(CamelModel):
    """GET /api/users payload."""
    users: list[UserResponse]
    total: int
    timestamp: datetime
