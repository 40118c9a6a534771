import math

import pytest

from conftest import FakeAccessor, gps_fields, rationals, record, text
from plag.coordinates import CoordinateExtractor
from plag.enums import Tag
from plag.errors import FieldMissingError, InvalidFieldError, TextEncodingError
from plag.models import UnsupportedValue


@pytest.fixture
def extractor():
    return CoordinateExtractor(FakeAccessor({}))


def test_degrees_magnitude(extractor):
    rec = record({Tag.GPS_LATITUDE: rationals(40, 26, 46)})
    assert extractor.degrees_magnitude(rec, Tag.GPS_LATITUDE) == pytest.approx(
        40 + 26 / 60 + 46 / 3600, abs=1e-12
    )


def test_degrees_magnitude_fractional_seconds(extractor):
    rec = record({Tag.GPS_LATITUDE: rationals(12, 30, (4550, 100))})
    assert extractor.degrees_magnitude(rec, Tag.GPS_LATITUDE) == pytest.approx(
        12 + 30 / 60 + 45.5 / 3600
    )


@pytest.mark.parametrize("dms, bumped", [
    ((10, 20, 30), (11, 20, 30)),
    ((10, 20, 30), (10, 21, 30)),
    ((10, 20, 30), (10, 20, 31)),
])
def test_degrees_magnitude_increases_with_each_component(extractor, dms, bumped):
    low = extractor.degrees_magnitude(record({Tag.GPS_LATITUDE: rationals(*dms)}), Tag.GPS_LATITUDE)
    high = extractor.degrees_magnitude(record({Tag.GPS_LATITUDE: rationals(*bumped)}), Tag.GPS_LATITUDE)
    assert high > low


def test_two_rationals_is_invalid_field(extractor):
    rec = record({Tag.GPS_LATITUDE: rationals(40, 26)})
    with pytest.raises(InvalidFieldError) as excinfo:
        extractor.degrees_magnitude(rec, Tag.GPS_LATITUDE)
    assert excinfo.value.tag is Tag.GPS_LATITUDE
    assert "expected 3 rationals" in str(excinfo.value)


def test_text_value_is_invalid_field(extractor):
    rec = record({Tag.GPS_LATITUDE: text("40 26 46")})
    with pytest.raises(InvalidFieldError):
        extractor.degrees_magnitude(rec, Tag.GPS_LATITUDE)


def test_missing_tag(extractor):
    with pytest.raises(FieldMissingError) as excinfo:
        extractor.degrees_magnitude(record({}), Tag.GPS_LONGITUDE)
    assert excinfo.value.tag is Tag.GPS_LONGITUDE
    assert "GPSLongitude" in str(excinfo.value)


@pytest.mark.parametrize("ref, letter, sign", [
    ("N", "S", 1),
    ("S", "S", -1),
    ("E", "W", 1),
    ("W", "W", -1),
    # suffix match
    ("  S", "S", -1),
    ("SN", "S", 1),
])
def test_hemisphere_sign(extractor, ref, letter, sign):
    rec = record({Tag.GPS_LATITUDE_REF: text(ref)})
    assert extractor.hemisphere_sign(rec, Tag.GPS_LATITUDE_REF, letter) == sign


def test_hemisphere_sign_ignores_nul_padding(extractor):
    rec = record({Tag.GPS_LATITUDE_REF: text(b"S\x00")})
    assert extractor.hemisphere_sign(rec, Tag.GPS_LATITUDE_REF, "S") == -1


def test_hemisphere_sign_rejects_rationals(extractor):
    rec = record({Tag.GPS_LATITUDE_REF: rationals(1)})
    with pytest.raises(InvalidFieldError):
        extractor.hemisphere_sign(rec, Tag.GPS_LATITUDE_REF, "S")


def test_hemisphere_sign_rejects_invalid_utf8(extractor):
    rec = record({Tag.GPS_LATITUDE_REF: text(b"\xffS")})
    with pytest.raises(TextEncodingError):
        extractor.hemisphere_sign(rec, Tag.GPS_LATITUDE_REF, "S")


def test_coordinate_example(extractor):
    coordinate = extractor.coordinate(record(gps_fields()))
    assert coordinate.latitude == pytest.approx(40.446111, abs=1e-6)
    assert coordinate.longitude == pytest.approx(-79.948611, abs=1e-6)


@pytest.mark.parametrize("lat_ref, lon_ref, lat_sign, lon_sign", [
    ("N", "E", 1, 1),
    ("S", "E", -1, 1),
    ("N", "W", 1, -1),
    ("S", "W", -1, -1),
])
def test_coordinate_signs(extractor, lat_ref, lon_ref, lat_sign, lon_sign):
    coordinate = extractor.coordinate(record(gps_fields(lat_ref=lat_ref, lon_ref=lon_ref)))
    assert math.copysign(1, coordinate.latitude) == lat_sign
    assert math.copysign(1, coordinate.longitude) == lon_sign


def test_missing_latitude_ref(extractor):
    fields = gps_fields()
    del fields[Tag.GPS_LATITUDE_REF]
    with pytest.raises(FieldMissingError) as excinfo:
        extractor.coordinate(record(fields))
    assert excinfo.value.tag is Tag.GPS_LATITUDE_REF


def test_latitude_out_of_range(extractor):
    with pytest.raises(InvalidFieldError) as excinfo:
        extractor.coordinate(record(gps_fields(lat=(95, 0, 0))))
    assert excinfo.value.tag is Tag.GPS_LATITUDE


def test_longitude_out_of_range(extractor):
    with pytest.raises(InvalidFieldError) as excinfo:
        extractor.coordinate(record(gps_fields(lon=(180, 0, 1))))
    assert excinfo.value.tag is Tag.GPS_LONGITUDE


def test_zero_denominator_is_rejected(extractor):
    with pytest.raises(InvalidFieldError):
        extractor.coordinate(record(gps_fields(lat=((40, 0), 26, 46))))


def test_unsupported_value_is_invalid_field(extractor):
    rec = record({Tag.GPS_LATITUDE: UnsupportedValue(type_name="int")})
    with pytest.raises(InvalidFieldError) as excinfo:
        extractor.degrees_magnitude(rec, Tag.GPS_LATITUDE)
    assert excinfo.value.tag is Tag.GPS_LATITUDE
