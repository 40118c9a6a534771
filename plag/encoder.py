"""
GeoJSON encoding for plag

Serializes a FeatureCollection to GeoJSON text and parses such text back into
a FeatureCollection.
"""

import json
from typing import Any, Dict, TextIO

from .models import Feature, FeatureCollection, GeodeticCoordinate


def encode_collection(collection: FeatureCollection, pretty: bool = False) -> str:
    """Encode a collection as GeoJSON, compact unless pretty is set"""
    document = collection.to_geojson()
    if pretty:
        return json.dumps(document, indent=2, allow_nan=False)
    return json.dumps(document, separators=(',', ':'), allow_nan=False)


def write_collection(collection: FeatureCollection, stream: TextIO,
                     pretty: bool = False) -> None:
    stream.write(encode_collection(collection, pretty=pretty))
    stream.write('\n')


def decode_collection(text: str) -> FeatureCollection:
    """Parse GeoJSON text produced by encode_collection"""
    document = json.loads(text)
    if document.get("type") != "FeatureCollection":
        raise ValueError(f"expected a FeatureCollection, got {document.get('type')!r}")
    return FeatureCollection(
        features=[_decode_feature(item) for item in document.get("features", [])]
    )


def _decode_feature(item: Dict[str, Any]) -> Feature:
    geometry = item.get("geometry") or {}
    if item.get("type") != "Feature" or geometry.get("type") != "Point":
        raise ValueError("only Point features are supported")

    longitude, latitude = geometry["coordinates"][:2]
    return Feature(
        coordinate=GeodeticCoordinate(latitude=float(latitude), longitude=float(longitude)),
        properties=dict(item.get("properties") or {}),
    )
