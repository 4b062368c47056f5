# File: blog_api/api/v1/routes_auth.py

"""
User auth routes: signup, signin and the current user's profile.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from blog_api.api.deps import current_user, get_token_service
from blog_api.core.security import TokenService
from blog_api.db.session import get_db
from blog_api.models.user import User
from blog_api.schemas.user import AuthResponse, SigninInput, SignupInput, UserRead
from blog_api.services import auth_service

router = APIRouter()


@router.post("/signup", response_model=AuthResponse, summary="Create an account")
def signup(
    payload: SignupInput,
    request: Request,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Register with email + password. Returns a bearer token and the new user.
    409 if the email is already registered.
    """
    settings = request.app.state.settings
    return auth_service.signup(
        db,
        tokens,
        payload,
        iterations=settings.password_hash_iterations,
    )


@router.post("/signin", response_model=AuthResponse, summary="Sign in")
def signin(
    payload: SigninInput,
    request: Request,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    settings = request.app.state.settings
    return auth_service.signin(
        db,
        tokens,
        payload,
        iterations=settings.password_hash_iterations,
    )


@router.get("/me", response_model=UserRead, summary="Current user")
def read_me(user: User = Depends(current_user)):
    return user
