from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class Settled(Generic[K, V]):
    """Outcome of one fan-out task: either a value or the error it raised."""

    key: K
    value: Optional[V] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_all_settled(fn: Callable[[K], V], keys: Iterable[K], *, max_workers: int) -> List[Settled[K, V]]:
    """Run ``fn`` for every key concurrently and wait for all of them.

    One failing key never cancels the others. Results come back in the order
    of ``keys`` regardless of completion order.
    """

    keys = list(keys)
    if not keys:
        return []

    by_index: dict[int, Settled[K, V]] = {}
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(keys)))) as executor:
        future_to_index = {executor.submit(fn, key): i for i, key in enumerate(keys)}
        for future in as_completed(future_to_index):
            i = future_to_index[future]
            try:
                by_index[i] = Settled(key=keys[i], value=future.result())
            except Exception as e:
                logger.debug("fan-out task for %r failed: %s", keys[i], e)
                by_index[i] = Settled(key=keys[i], error=e)

    return [by_index[i] for i in range(len(keys))]
