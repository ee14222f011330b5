# File: authgate/core/views.py

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from authgate.core.config import settings

templates = Jinja2Templates(directory=str(settings.templates_dir))


def render_page(request: Request, name: str, status_code: int = 200) -> HTMLResponse:
    """Render ``templates/<name>.html``."""
    return templates.TemplateResponse(
        request,
        f"{name}.html",
        {"project_name": settings.PROJECT_NAME},
        status_code=status_code,
    )
