"""
Template rendering utilities
"""
from pathlib import Path
from fastapi import Request
from fastapi.templating import Jinja2Templates

from nova.constants.constants import NAV_LABELS, Page

# Templates ship inside the package
TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_page(request: Request, page: Page, context: dict = None):
    """Render a site page inside the shared layout with its nav link marked active"""
    return templates.TemplateResponse(
        request,
        f"{page.value}.html",
        {
            "current_page": page.value,
            "nav": [(p.value, label) for p, label in NAV_LABELS.items()],
            **(context or {}),
        },
    )
