"""
Parallel Processing for plag

This module contains the ParallelProcessor class which runs the per-photo
conversion across a bounded pool of threads.
"""

import multiprocessing as mp
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Sequence

logger = logging.getLogger(__name__)


class ParallelProcessor:
    """Bounded thread pool that keeps results in input order"""

    def __init__(self, max_workers: Optional[int] = None):
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.max_workers = max_workers or mp.cpu_count()
        logger.info(f"Initialized parallel processor with {self.max_workers} workers")

    def process_batch_parallel(self, items: Sequence[Any],
                               processing_func: Callable, **kwargs) -> List[Any]:
        """Apply processing_func to each item; result i belongs to item i"""

        def process_single(indexed):
            index, item = indexed
            return processing_func(index, item, **kwargs)

        # max_workers also caps how many photos are open at once
        if self.max_workers == 1 or len(items) <= 1:
            return [process_single(indexed) for indexed in enumerate(items)]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            results = list(executor.map(process_single, enumerate(items)))

        return results
