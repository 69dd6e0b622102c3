"""User Listing — the fixed user set."""

from datetime import datetime, timezone

from fastapi import APIRouter

from backstage_app.api.routes import READ_METHODS
from backstage_app.core.catalog import USERS
from backstage_app.schemas.user import UserListResponse, UserResponse

router = APIRouter(prefix="/api/users", tags=["users"])


@router.api_route(
    "", methods=READ_METHODS, response_model=UserListResponse,
)
async def list_users():
    users = [UserResponse.model_validate(u) for u in USERS]
    return UserListResponse(
        users=users, total=len(users), timestamp=datetime.now(timezone.utc),
    )
