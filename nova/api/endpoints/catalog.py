"""Product catalog router for the NOVA site."""

from typing import List
from fastapi import APIRouter

from nova.schemas.catalogSchema import Feature, Spec
from nova.schemas.responseSchema import APIResponse
from nova.services.CatalogService import CatalogService


router = APIRouter(tags=["catalog"])


@router.get(
    "/features",
    response_model=APIResponse[List[Feature]],
    response_model_exclude_none=True,
)
async def get_features():
    """Get the product feature catalog."""
    return APIResponse(success=True, data=CatalogService.get_features())


@router.get(
    "/specs",
    response_model=APIResponse[List[Spec]],
    response_model_exclude_none=True,
)
async def get_specs():
    """Get the technical specifications grouped by category."""
    return APIResponse(success=True, data=CatalogService.get_specs())
