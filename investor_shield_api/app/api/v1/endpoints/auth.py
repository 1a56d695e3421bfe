"""
Authentication endpoints for API v1.

Registration and login are the only routes reachable without a bearer
token.  Both return the public user record together with a freshly
issued access token.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from investor_shield_api.app.core.security import create_access_token, get_current_user
from investor_shield_api.app.core.store import RecordStore, get_store
from investor_shield_api.app.schemas.user import AuthResponse, UserCreate, UserLogin, UserRead
from investor_shield_api.app.services.user_service import UserService


router = APIRouter()


def _issue_token(user: UserRead) -> AuthResponse:
    token = create_access_token({"sub": user.id, "email": user.email})
    return AuthResponse(user=user, token=token)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    data: UserCreate,
    store: RecordStore = Depends(get_store),
) -> AuthResponse:
    """Register a new user and log them in.

    Returns 400 if the email address is already registered.
    """
    try:
        user = await UserService.create_user(store, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _issue_token(user)


@router.post("/login", response_model=AuthResponse)
async def login_user(
    data: UserLogin,
    store: RecordStore = Depends(get_store),
) -> AuthResponse:
    """Authenticate a user and return an access token."""
    user = await UserService.authenticate(store, data.email, data.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return _issue_token(user)


@router.get("/me", response_model=UserRead)
async def read_current_user(
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
) -> UserRead:
    user = await UserService.get_user_by_id(store, current_user["user_id"])
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
