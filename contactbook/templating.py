"""
Contactbook — Template Rendering
=================================

What:  The Jinja2 view renderer used by the contact pages.
How:   FastAPI's Jinja2Templates over the package's `templates/` directory,
       autoescaping enabled for .html files.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_template(
    request: Request,
    template_name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
) -> Response:
    """Render `template_name` with `context` into an HTML response."""
    return templates.TemplateResponse(
        request,
        template_name,
        context or {},
        status_code=status_code,
    )
