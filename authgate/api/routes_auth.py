# File: authgate/api/routes_auth.py

"""
Auth API routes.

Both endpoints take urlencoded form fields and answer with the secrets
page on success. Failures are raised as AuthError subclasses and turned
into ``{"error": ...}`` JSON by the handler installed in authgate.main.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from authgate.db.session import get_db
from authgate.core.views import render_page
from authgate.schemas.user import ErrorResponse
from authgate.services.auth_service import authenticate_user, register_user

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_class=HTMLResponse,
    summary="User registration",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def register(
    request: Request,
    username: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    register_user(db, username=username, password=password)
    return render_page(request, "secrets")


@router.post(
    "/login",
    response_class=HTMLResponse,
    summary="User login",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def login(
    request: Request,
    username: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    authenticate_user(db, username=username, password=password)
    return render_page(request, "secrets")
