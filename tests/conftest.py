import struct
import zlib
from typing import Dict, Union

import piexif
import pytest
from PIL import Image

from plag.accessor import MetadataAccessor
from plag.enums import Tag
from plag.models import MetadataRecord, Rational, RationalValue, TextValue
from plag.pipeline import diagnostics


def rationals(*values) -> RationalValue:
    """RationalValue from ints or (numerator, denominator) pairs"""
    parts = []
    for value in values:
        if isinstance(value, tuple):
            parts.append(Rational(*value))
        else:
            parts.append(Rational(value, 1))
    return RationalValue(values=tuple(parts))


def text(value: Union[str, bytes]) -> TextValue:
    if isinstance(value, str):
        value = value.encode('utf-8')
    return TextValue(raw=value)


def gps_fields(lat=(40, 26, 46), lat_ref="N", lon=(79, 56, 55), lon_ref="W") -> Dict:
    return {
        Tag.GPS_LATITUDE: rationals(*lat),
        Tag.GPS_LATITUDE_REF: text(lat_ref),
        Tag.GPS_LONGITUDE: rationals(*lon),
        Tag.GPS_LONGITUDE_REF: text(lon_ref),
    }


class FakeAccessor(MetadataAccessor):
    """Serves fixed fields per source; an exception entry is raised on open"""

    def __init__(self, sources: Dict):
        self.sources = sources
        self.opened = []

    def open(self, source):
        self.opened.append(source)
        entry = self.sources[source]
        if isinstance(entry, Exception):
            raise entry
        return MetadataRecord(source=source, fields=entry)


def record(fields: Dict, source: str = "photo.jpg") -> MetadataRecord:
    return MetadataRecord(source=source, fields=fields)


@pytest.fixture
def write_photo(tmp_path):
    """Write a small JPEG carrying the given GPS and Exif IFD entries"""

    def _write(name="photo.jpg", gps=None, exif=None):
        path = tmp_path / name
        image = Image.new("RGB", (8, 8), color=(120, 80, 40))
        if gps is None and exif is None:
            image.save(path, "JPEG")
        else:
            payload = piexif.dump({"0th": {}, "Exif": exif or {}, "GPS": gps or {},
                                   "1st": {}, "thumbnail": None})
            image.save(path, "JPEG", exif=payload)
        return path

    return _write


def pittsburgh_gps(lat=((40, 1), (26, 1), (46, 1))):
    return {
        piexif.GPSIFD.GPSLatitudeRef: "N",
        piexif.GPSIFD.GPSLatitude: lat,
        piexif.GPSIFD.GPSLongitudeRef: "W",
        piexif.GPSIFD.GPSLongitude: ((79, 1), (56, 1), (55, 1)),
    }


@pytest.fixture(autouse=True)
def restore_global_limits(monkeypatch):
    """The CLI changes Pillow's pixel limit and the diagnostics level"""
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", Image.MAX_IMAGE_PIXELS)
    level = diagnostics.level
    yield
    diagnostics.setLevel(level)


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return (struct.pack(">I", len(data)) + kind + data
            + struct.pack(">I", zlib.crc32(kind + data) & 0xffffffff))


@pytest.fixture
def write_panorama(tmp_path):
    """Write a PNG declaring 30000x30000 pixels with no pixel data"""

    def _write(name="pano.png", gps=None):
        header = struct.pack(">IIBBBBB", 30000, 30000, 8, 2, 0, 0, 0)
        chunks = [_png_chunk(b"IHDR", header)]
        if gps is not None:
            payload = piexif.dump({"0th": {}, "Exif": {}, "GPS": gps,
                                   "1st": {}, "thumbnail": None})
            chunks.append(_png_chunk(b"eXIf", payload[6:]))
        chunks.append(_png_chunk(b"IDAT", b""))
        chunks.append(_png_chunk(b"IEND", b""))

        path = tmp_path / name
        path.write_bytes(b"\x89PNG\r\n\x1a\n" + b"".join(chunks))
        return path

    return _write
