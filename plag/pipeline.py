"""
Main Pipeline for plag

This module contains the PhotoLocationPipeline class which turns a batch of
photos into a GeoJSON feature collection. Each photo is converted on its own;
a photo that fails is reported and skipped without affecting the others.
"""

import logging
import os
import time
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .accessor import ImageSource, MetadataAccessor, PillowMetadataAccessor
from .builder import FeatureBuilder
from .config import DEFAULT_CONFIG
from .coordinates import CoordinateExtractor
from .enums import PropertySelector, parse_selectors
from .errors import PlagError
from .models import BatchResult, FeatureCollection, SourceOutcome
from .parallel import ParallelProcessor
from .properties import PropertyExtractor

logger = logging.getLogger(__name__)

# One WARNING line per skipped photo
diagnostics = logging.getLogger("plag.diagnostics")


class PhotoLocationPipeline:
    """Converts photos to GeoJSON point features"""

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 accessor: Optional[MetadataAccessor] = None):
        self.config = dict(DEFAULT_CONFIG)
        self.config.update(config or {})

        # Unknown property names abort here, before any photo is opened
        self.selectors = self._resolve_selectors(self.config["properties"])

        # Initialize components
        self.accessor = accessor or PillowMetadataAccessor()
        self.coordinate_extractor = CoordinateExtractor(self.accessor)
        self.property_extractor = PropertyExtractor(self.accessor)
        self.feature_builder = FeatureBuilder()
        self.parallel_processor = ParallelProcessor(self.config["max_workers"])

        logger.info(
            "Pipeline initialized with properties: "
            f"{[selector.value for selector in self.selectors] or 'none'}"
        )

    @staticmethod
    def _resolve_selectors(properties: Iterable[Union[str, PropertySelector]]
                           ) -> List[PropertySelector]:
        selectors = []
        for prop in properties:
            if isinstance(prop, PropertySelector):
                selectors.append(prop)
            else:
                selectors.extend(parse_selectors([prop]))
        return selectors

    def process_source(self, index: int, source: ImageSource) -> SourceOutcome:
        """Run one photo through open, coordinate, properties and build"""
        name = os.fspath(source)
        try:
            record = self.accessor.open(source)
            coordinate = self.coordinate_extractor.coordinate(record)
            properties = self.property_extractor.extract(source, record, self.selectors)
            feature = self.feature_builder.build(coordinate, properties)
        except PlagError as e:
            return SourceOutcome(index=index, source=name, error=e)

        logger.debug(f"{name}: ({coordinate.latitude}, {coordinate.longitude})")
        return SourceOutcome(index=index, source=name, feature=feature)

    def process_sources(self, sources: Sequence[ImageSource]) -> BatchResult:
        """Convert every photo, keeping input order and skipping failures"""
        logger.info(f"Starting batch of {len(sources)} photo(s)")
        start_time = time.time()

        outcomes = self.parallel_processor.process_batch_parallel(
            list(sources), self.process_source
        )
        result = self._fold(outcomes)

        elapsed = time.time() - start_time
        logger.info(
            f"Batch complete. Converted: {result.processed}, Skipped: {result.failed} "
            f"({elapsed:.2f} seconds)"
        )
        return result

    def _fold(self, outcomes: List[SourceOutcome]) -> BatchResult:
        """Partition outcomes into features and diagnostics"""
        result = BatchResult(collection=FeatureCollection())
        for outcome in sorted(outcomes, key=lambda o: o.index):
            if outcome.ok:
                result.collection.features.append(outcome.feature)
            else:
                diagnostics.warning(f"{outcome.source}: {outcome.error}")
                result.failures.append(outcome)
        return result
