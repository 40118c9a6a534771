"""
plag - Photo Location As GeoJSON

This package provides classes and utilities for:
- Reading EXIF metadata from photos
- Converting GPS degrees/minutes/seconds to decimal degrees
- Attaching per-photo properties (file name, path, capture time)
- Building and encoding GeoJSON feature collections
- Parallel processing of photo batches
"""

__version__ = "0.1.0"
__author__ = "plag developers"

from .enums import Tag, PropertySelector
from .errors import (
    PlagError, AccessError, DecodeError, FieldMissingError,
    InvalidFieldError, TextEncodingError, UnknownPropertyError, ConfigError,
)
from .models import (
    Rational, RationalValue, TextValue, UnsupportedValue, MetadataRecord, GeodeticCoordinate,
    Feature, FeatureCollection, SourceOutcome, BatchResult,
)
from .accessor import MetadataAccessor, PillowMetadataAccessor
from .coordinates import CoordinateExtractor
from .properties import PropertyExtractor
from .builder import FeatureBuilder
from .parallel import ParallelProcessor
from .pipeline import PhotoLocationPipeline
from .encoder import encode_collection, decode_collection, write_collection

__all__ = [
    'Tag',
    'PropertySelector',
    'PlagError',
    'AccessError',
    'DecodeError',
    'FieldMissingError',
    'InvalidFieldError',
    'TextEncodingError',
    'UnknownPropertyError',
    'ConfigError',
    'Rational',
    'RationalValue',
    'TextValue',
    'UnsupportedValue',
    'MetadataRecord',
    'GeodeticCoordinate',
    'Feature',
    'FeatureCollection',
    'SourceOutcome',
    'BatchResult',
    'MetadataAccessor',
    'PillowMetadataAccessor',
    'CoordinateExtractor',
    'PropertyExtractor',
    'FeatureBuilder',
    'ParallelProcessor',
    'PhotoLocationPipeline',
    'encode_collection',
    'decode_collection',
    'write_collection',
]
