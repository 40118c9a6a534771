"""
Errors for plag

Every failure that can happen while turning one photo into a feature is a
PlagError. The pipeline catches these per photo; anything else is a bug and
propagates.
"""


class PlagError(Exception):
    """Base class for per-photo failures"""


class AccessError(PlagError):
    """The photo could not be read"""


class DecodeError(PlagError):
    """The photo does not contain a recognizable EXIF container"""


class FieldMissingError(PlagError):
    """A required EXIF field is absent"""

    def __init__(self, tag):
        super().__init__(f"missing field {tag}")
        self.tag = tag


class InvalidFieldError(PlagError):
    """An EXIF field is present but has the wrong shape or type"""

    def __init__(self, tag, reason: str):
        super().__init__(f"invalid field {tag}: {reason}")
        self.tag = tag
        self.reason = reason


class TextEncodingError(PlagError):
    """A text field holds bytes that are not valid UTF-8"""

    def __init__(self, tag, cause: UnicodeDecodeError):
        super().__init__(f"field {tag} is not valid text: {cause}")
        self.tag = tag


class UnknownPropertyError(ValueError):
    """A requested property name is not supported"""

    def __init__(self, name: str):
        super().__init__(
            f"unknown property {name!r} (expected one of: filename, path, datetime)"
        )
        self.name = name


class ConfigError(ValueError):
    """The configuration file is unreadable or malformed"""
