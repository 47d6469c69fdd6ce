import threading
from dataclasses import dataclass

from domain.models.currency import MetricsSnapshot, ProviderMetrics


@dataclass
class _ProviderCounters:
    requests: int = 0
    responses: int = 0


class MetricsRegistry:
    """Monotonic usage counters: aggregated queries plus per-provider calls.

    Provider names are discovered on first use. Every increment happens under
    one lock so concurrent callers never lose an update.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._total_queries = 0
        self._providers: dict[str, _ProviderCounters] = {}

    def _counters(self, provider_name: str) -> _ProviderCounters:
        # caller holds the lock
        counters = self._providers.get(provider_name)
        if counters is None:
            counters = self._providers[provider_name] = _ProviderCounters()
        return counters

    def record_request(self, provider_name: str) -> None:
        with self._lock:
            self._counters(provider_name).requests += 1

    def record_response(self, provider_name: str) -> None:
        with self._lock:
            self._counters(provider_name).responses += 1

    def record_query(self) -> None:
        with self._lock:
            self._total_queries += 1

    def snapshot(self) -> MetricsSnapshot:
        with self._lock:
            return MetricsSnapshot(
                total_queries=self._total_queries,
                providers={
                    name: ProviderMetrics(
                        requests_issued=c.requests,
                        responses_succeeded=c.responses,
                    )
                    for name, c in self._providers.items()
                },
            )
