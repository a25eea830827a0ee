"""Server-rendered site pages."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from nova.constants.constants import Page
from nova.core.templates import render_page
from nova.services.CatalogService import CatalogService


router = APIRouter(tags=["pages"])


@router.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/home", status_code=303)


@router.get("/home", response_class=HTMLResponse)
async def home_page(request: Request):
    return render_page(request, Page.home)


@router.get("/features", response_class=HTMLResponse)
async def features_page(request: Request):
    """Feature grid rendered from the catalog."""
    return render_page(request, Page.features, {"features": CatalogService.get_features()})


@router.get("/specs", response_class=HTMLResponse)
async def specs_page(request: Request):
    """Specifications grouped by category."""
    return render_page(request, Page.specs, {"specs": CatalogService.get_specs()})


@router.get("/contacts", response_class=HTMLResponse)
async def contacts_page(request: Request):
    """Contact form posting to /api/contact."""
    return render_page(request, Page.contacts)
