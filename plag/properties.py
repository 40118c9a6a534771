"""
Property Extractor for plag

Derives the optional per-photo properties (file name, canonical path and
capture time) that are attached to each feature.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List

from .accessor import ImageSource, MetadataAccessor
from .enums import PropertySelector, Tag
from .errors import AccessError
from .models import MetadataRecord

logger = logging.getLogger(__name__)


class PropertyExtractor:
    """Builds the property mapping for one photo"""

    def __init__(self, accessor: MetadataAccessor):
        self.accessor = accessor

    def extract(self, source: ImageSource, record: MetadataRecord,
                selectors: List[PropertySelector]) -> Dict[str, Any]:
        """Apply selectors in order; a repeated selector overwrites its key"""
        properties = {}
        for selector in selectors:
            properties[selector.value] = self.extract_one(source, record, selector)
        return properties

    def extract_one(self, source: ImageSource, record: MetadataRecord,
                    selector: PropertySelector) -> str:
        if selector is PropertySelector.FILENAME:
            return self.filename(source)
        elif selector is PropertySelector.PATH:
            return self.canonical_path(source)
        elif selector is PropertySelector.DATETIME:
            return self.accessor.text(record, Tag.DATETIME_ORIGINAL)
        raise AssertionError(f"unhandled property selector: {selector}")

    @staticmethod
    def filename(source: ImageSource) -> str:
        return Path(os.fspath(source)).name

    @staticmethod
    def canonical_path(source: ImageSource) -> str:
        """Absolute path with symlinks resolved"""
        try:
            return str(Path(os.fspath(source)).resolve(strict=True))
        except (OSError, RuntimeError) as e:
            raise AccessError(f"cannot canonicalize path: {e}") from e
