"""
Feature Builder for plag
"""

from typing import Any, Dict, Optional

from .models import Feature, GeodeticCoordinate


class FeatureBuilder:
    """Packages a coordinate and its properties into a Feature"""

    def build(self, coordinate: GeodeticCoordinate,
              properties: Optional[Dict[str, Any]] = None) -> Feature:
        return Feature(coordinate=coordinate, properties=dict(properties or {}))
