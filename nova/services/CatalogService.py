# Read-only product catalog served by the API and the site pages
from typing import List
from nova.constants.constants import FEATURES, SPECS
from nova.schemas.catalogSchema import Feature, Spec


class CatalogService:

    @classmethod
    def get_features(cls) -> List[Feature]:
        """Return the product feature catalog in display order"""
        return [
            Feature(icon=icon, title=title, description=description)
            for icon, title, description in FEATURES
        ]

    @classmethod
    def get_specs(cls) -> List[Spec]:
        """Return the technical specifications grouped by category"""
        return [
            Spec(category=category, items=list(items))
            for category, items in SPECS
        ]
