"""
View state for the inventory page.

``InventoryState`` is immutable: handlers build a new state with
``dataclasses.replace`` and swap it in whole, so a failed operation can never
leave a half-updated collection or draft behind.
"""

import heapq
import itertools
import time
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Tuple, Union

from estoque.schemas import Draft, Product


@dataclass(frozen=True)
class InventoryState:
    products: Tuple[Product, ...] = ()
    draft: Draft = field(default_factory=Draft)
    search_query: str = ""
    error: str = ""
    success: str = ""
    # Bumped every time a success banner is shown; a scheduled clear only
    # applies to the generation it was scheduled for.
    banner_generation: int = 0
    pending_delete: Optional[Union[int, str]] = None

    def with_products(self, products) -> "InventoryState":
        return replace(self, products=tuple(products))

    def append_product(self, product: Product) -> "InventoryState":
        return replace(self, products=self.products + (product,))

    def remove_product(self, product_id) -> "InventoryState":
        return replace(self, products=tuple(p for p in self.products if p.id != product_id))

    def with_error(self, message: str) -> "InventoryState":
        return replace(self, error=message)

    def with_success(self, message: str) -> "InventoryState":
        return replace(self, success=message, banner_generation=self.banner_generation + 1)

    def clear_success(self, generation: int) -> "InventoryState":
        if generation != self.banner_generation:
            return self
        return replace(self, success="")


class BannerTimers:
    """
    Deadline queue polled from the UI thread.

    ``call_later`` never runs anything by itself; callbacks fire from
    ``run_due()`` once the clock has passed their deadline, which keeps all
    state changes on the thread that renders the page.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._queue: List[Tuple[float, int, Callable[[], None]]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        heapq.heappush(self._queue, (self._clock() + delay, next(self._counter), callback))

    def run_due(self) -> int:
        now = self._clock()
        fired = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, callback = heapq.heappop(self._queue)
            callback()
            fired += 1
        return fired

    @property
    def pending(self) -> int:
        return len(self._queue)
