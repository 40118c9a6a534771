"""
Data models for plag

This module contains the data structures passed between the pipeline stages:
raw EXIF field values, the decoded metadata record of one photo, coordinates,
features and the final feature collection.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Tuple, Union

from .enums import Tag
from .errors import FieldMissingError, PlagError


class Rational(NamedTuple):
    """EXIF rational number"""
    numerator: int
    denominator: int

    def to_float(self) -> float:
        if self.denominator == 0:
            return math.nan
        return self.numerator / self.denominator


@dataclass(frozen=True)
class RationalValue:
    """Field payload made of rational numbers"""
    values: Tuple[Rational, ...]


@dataclass(frozen=True)
class TextValue:
    """Field payload holding ASCII text, kept as raw bytes"""
    raw: bytes


@dataclass(frozen=True)
class UnsupportedValue:
    """Field payload of any other EXIF type; rejected only when the tag is read"""
    type_name: str


RawFieldValue = Union[RationalValue, TextValue, UnsupportedValue]


@dataclass(frozen=True)
class MetadataRecord:
    """Read-only EXIF fields decoded from one photo"""
    source: str
    fields: Mapping[Tag, RawFieldValue]

    def __post_init__(self):
        object.__setattr__(self, 'fields', MappingProxyType(dict(self.fields)))

    def field(self, tag: Tag) -> RawFieldValue:
        try:
            return self.fields[tag]
        except KeyError:
            raise FieldMissingError(tag) from None


@dataclass(frozen=True)
class GeodeticCoordinate:
    """Latitude/longitude pair in decimal degrees"""
    latitude: float
    longitude: float


@dataclass
class Feature:
    """Point geometry with its properties"""
    coordinate: GeodeticCoordinate
    properties: Dict[str, Any] = field(default_factory=dict)

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "geometry": {
                "type": "Point",
                # GeoJSON axis order
                "coordinates": [self.coordinate.longitude, self.coordinate.latitude],
            },
            "properties": dict(self.properties),
        }


@dataclass
class FeatureCollection:
    """Ordered features, one per photo that was converted"""
    features: List[Feature] = field(default_factory=list)

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "FeatureCollection",
            "features": [feature.to_geojson() for feature in self.features],
        }

    def __len__(self):
        return len(self.features)


@dataclass
class SourceOutcome:
    """Result of converting one photo: a feature or the error that stopped it"""
    index: int
    source: str
    feature: Optional[Feature] = None
    error: Optional[PlagError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    """Feature collection plus the photos that were skipped"""
    collection: FeatureCollection
    failures: List[SourceOutcome] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.collection)

    @property
    def failed(self) -> int:
        return len(self.failures)
