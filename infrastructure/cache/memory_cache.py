import logging
import threading

from domain.models.currency import AggregatedRates

logger = logging.getLogger(__name__)


class InMemoryRateCache:
    """Process-local store of aggregated answers keyed by ``RateQuery.cache_key``.

    Entries never expire and the store is unbounded: once a key is computed it
    is served for the lifetime of the process. A deployment that needs fresh
    rates or bounded memory has to add eviction on top of this.

    Concurrent ``put`` calls for the same key are allowed; the last write wins.
    """

    def __init__(self):
        self._entries: dict[str, AggregatedRates] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> AggregatedRates | None:
        with self._lock:
            entry = self._entries.get(key)
        logger.debug("Cache get for %s: %s", key, "HIT" if entry is not None else "MISS")
        return entry

    def put(self, key: str, rates: AggregatedRates) -> None:
        with self._lock:
            self._entries[key] = rates
        logger.debug("Cache put for %s (%d symbols)", key, len(rates.rates))

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
