"""
Metadata Accessor for plag

This module contains the MetadataAccessor interface, which the extractors use
to read EXIF fields, and PillowMetadataAccessor, which decodes the EXIF block
of an image file with Pillow.
"""

import logging
import os
import struct
from abc import ABC, abstractmethod
from typing import Any, Union

from PIL import Image, UnidentifiedImageError
from PIL.TiffImagePlugin import IFDRational

from .enums import Tag
from .errors import AccessError, DecodeError, InvalidFieldError, TextEncodingError
from .models import (
    MetadataRecord, Rational, RationalValue, RawFieldValue, TextValue,
    UnsupportedValue,
)

logger = logging.getLogger(__name__)

ImageSource = Union[str, "os.PathLike[str]"]


class MetadataAccessor(ABC):
    """Opens photos and looks up EXIF fields by tag"""

    @abstractmethod
    def open(self, source: ImageSource) -> MetadataRecord:
        """Open a photo and decode its EXIF fields"""

    def field(self, record: MetadataRecord, tag: Tag) -> RawFieldValue:
        """Look up a tag, raising FieldMissingError when it is absent"""
        return record.field(tag)

    def text(self, record: MetadataRecord, tag: Tag) -> str:
        """Read a tag as UTF-8 text with trailing NUL padding removed"""
        value = self.field(record, tag)
        if not isinstance(value, TextValue):
            raise InvalidFieldError(tag, "field is not a string")
        try:
            return value.raw.rstrip(b'\x00').decode('utf-8')
        except UnicodeDecodeError as e:
            raise TextEncodingError(tag, e) from e


class PillowMetadataAccessor(MetadataAccessor):
    """Reads EXIF metadata from image files using Pillow"""

    def open(self, source: ImageSource) -> MetadataRecord:
        name = os.fspath(source)
        logger.debug(f"Reading EXIF from: {name}")

        try:
            with Image.open(name) as image:
                exif = image.getexif()
                directories = {
                    ifd: exif.get_ifd(ifd) for ifd in {tag.ifd for tag in Tag}
                }
        except UnidentifiedImageError as e:
            raise DecodeError(f"not a recognized image: {e}") from e
        except Image.DecompressionBombError as e:
            raise DecodeError(str(e)) from e
        except OSError as e:
            raise AccessError(str(e)) from e
        except (SyntaxError, ValueError, EOFError, struct.error) as e:
            # Pillow reports corrupt TIFF/EXIF structures this way
            raise DecodeError(f"corrupt EXIF data: {e}") from e

        if not exif:
            raise DecodeError("no EXIF data found")

        fields = {}
        for tag in Tag:
            values = directories[tag.ifd]
            if tag.tag_id in values:
                fields[tag] = self._convert(values[tag.tag_id])

        return MetadataRecord(source=name, fields=fields)

    def _convert(self, value: Any) -> RawFieldValue:
        """Map a Pillow field value onto a rational sequence or text"""
        if isinstance(value, str):
            # Pillow decodes ASCII fields as latin-1, which round-trips the bytes
            return TextValue(raw=value.encode('latin-1', errors='replace'))
        if isinstance(value, bytes):
            return TextValue(raw=value)

        items = value if isinstance(value, tuple) else (value,)
        if items and all(_is_rational(item) for item in items):
            return RationalValue(values=tuple(_to_rational(item) for item in items))

        return UnsupportedValue(type_name=type(value).__name__)


def _is_rational(value: Any) -> bool:
    if isinstance(value, IFDRational):
        return True
    return (isinstance(value, tuple) and len(value) == 2
            and all(isinstance(part, int) for part in value))


def _to_rational(value: Any) -> Rational:
    if isinstance(value, IFDRational):
        return Rational(value.numerator, value.denominator)
    return Rational(*value)
