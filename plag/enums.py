"""
Enums for plag

This module contains enumeration classes that define the EXIF tags read from
photos and the descriptive properties that can be attached to each feature.
"""

from enum import Enum
from typing import List

from .errors import UnknownPropertyError

# EXIF directory pointers
GPS_IFD = 0x8825
EXIF_IFD = 0x8769


class Tag(Enum):
    """Enumeration of the EXIF fields plag knows how to read"""
    GPS_LATITUDE_REF = (GPS_IFD, 0x0001)
    GPS_LATITUDE = (GPS_IFD, 0x0002)
    GPS_LONGITUDE_REF = (GPS_IFD, 0x0003)
    GPS_LONGITUDE = (GPS_IFD, 0x0004)
    DATETIME_ORIGINAL = (EXIF_IFD, 0x9003)

    @property
    def ifd(self) -> int:
        return self.value[0]

    @property
    def tag_id(self) -> int:
        return self.value[1]

    def __str__(self):
        return _TAG_NAMES[self]


_TAG_NAMES = {
    Tag.GPS_LATITUDE_REF: "GPSLatitudeRef",
    Tag.GPS_LATITUDE: "GPSLatitude",
    Tag.GPS_LONGITUDE_REF: "GPSLongitudeRef",
    Tag.GPS_LONGITUDE: "GPSLongitude",
    Tag.DATETIME_ORIGINAL: "DateTimeOriginal",
}


class PropertySelector(Enum):
    """Enumeration of per-photo properties"""
    FILENAME = "filename"
    PATH = "path"
    DATETIME = "datetime"

    @classmethod
    def from_name(cls, name: str) -> "PropertySelector":
        """Look up a selector by its canonical name"""
        try:
            return cls(name.strip())
        except ValueError:
            raise UnknownPropertyError(name) from None


def parse_selectors(names: List[str]) -> List[PropertySelector]:
    """Parse property names, accepting comma separated lists"""
    selectors = []
    for name in names:
        for part in name.split(','):
            if part.strip():
                selectors.append(PropertySelector.from_name(part))
    return selectors
