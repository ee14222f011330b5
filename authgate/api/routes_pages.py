# File: authgate/api/routes_pages.py

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from authgate.core.views import render_page

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse, summary="Home page")
def home(request: Request):
    return render_page(request, "home")


@router.get("/login", response_class=HTMLResponse, summary="Login form")
def login_form(request: Request):
    return render_page(request, "login")


@router.get("/register", response_class=HTMLResponse, summary="Registration form")
def register_form(request: Request):
    return render_page(request, "register")
