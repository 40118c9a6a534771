"""
Coordinate Extractor for plag

Converts the GPS latitude/longitude fields of a photo from degrees, minutes
and seconds into signed decimal degrees.
"""

import logging

from .accessor import MetadataAccessor
from .enums import Tag
from .errors import InvalidFieldError
from .models import GeodeticCoordinate, MetadataRecord, RationalValue

logger = logging.getLogger(__name__)


class CoordinateExtractor:
    """Reads GPS coordinates from a metadata record"""

    def __init__(self, accessor: MetadataAccessor):
        self.accessor = accessor

    def degrees_magnitude(self, record: MetadataRecord, tag: Tag) -> float:
        """Convert a [degrees, minutes, seconds] rational triple to degrees"""
        value = self.accessor.field(record, tag)
        if not isinstance(value, RationalValue):
            raise InvalidFieldError(tag, "invalid field type, expected rationals")
        if len(value.values) != 3:
            raise InvalidFieldError(
                tag, f"expected 3 rationals, got {len(value.values)}"
            )

        degrees, minutes, seconds = (part.to_float() for part in value.values)
        return degrees + minutes / 60.0 + seconds / 3600.0

    def hemisphere_sign(self, record: MetadataRecord, ref_tag: Tag,
                        negative_letter: str) -> int:
        """Return -1 when the reference text ends with the negative letter"""
        ref = self.accessor.text(record, ref_tag)
        return -1 if ref.endswith(negative_letter) else 1

    def latitude(self, record: MetadataRecord) -> float:
        magnitude = self.degrees_magnitude(record, Tag.GPS_LATITUDE)
        return magnitude * self.hemisphere_sign(record, Tag.GPS_LATITUDE_REF, "S")

    def longitude(self, record: MetadataRecord) -> float:
        magnitude = self.degrees_magnitude(record, Tag.GPS_LONGITUDE)
        return magnitude * self.hemisphere_sign(record, Tag.GPS_LONGITUDE_REF, "W")

    def coordinate(self, record: MetadataRecord) -> GeodeticCoordinate:
        """Extract a range-checked coordinate, all or nothing"""
        latitude = self.latitude(record)
        # NaN fails these comparisons too
        if not -90.0 <= latitude <= 90.0:
            raise InvalidFieldError(Tag.GPS_LATITUDE, f"latitude {latitude} out of range")

        longitude = self.longitude(record)
        if not -180.0 <= longitude <= 180.0:
            raise InvalidFieldError(Tag.GPS_LONGITUDE, f"longitude {longitude} out of range")

        return GeodeticCoordinate(latitude=latitude, longitude=longitude)
