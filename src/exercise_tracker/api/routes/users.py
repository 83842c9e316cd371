"""
User API routes.

Registration and listing of users.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from ..deps import get_identity_store, get_request_body
from ..schemas import UserResponse
from ...services.identity_store import IdentityStore

router = APIRouter()


@router.post("", response_model=UserResponse)
def create_user(
    body: Dict[str, Any] = Depends(get_request_body),
    identity_store: IdentityStore = Depends(get_identity_store),
):
    """
    Register a user.

    Fails with 400 when ``username`` is missing and with 500 when the store
    rejects the write, including a duplicate username.
    """
    user = identity_store.create_user(body.get("username"))
    return UserResponse(username=user.username, id=user.id)


@router.get("", response_model=List[UserResponse])
def list_users(identity_store: IdentityStore = Depends(get_identity_store)):
    """List all users in registration order."""
    return [
        UserResponse(username=user.username, id=user.id)
        for user in identity_store.list_users()
    ]
