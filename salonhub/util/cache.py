"""Process-local TTL cache.

Every cache in the app (rate-limit windows, duplicate fingerprints, the
directory aggregate) is a plain in-memory mapping owned by one process.
Access is serialized by the asyncio event loop: no method here awaits, so a
get/set pair runs without interleaving other requests.

Running more than one worker process means each worker has its own copy;
move these behind a shared store (e.g. Redis) before scaling out.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar

import logfire

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T")

Clock = Callable[[], float]


@dataclass
class _Entry(Generic[V]):
    value: V
    expires_at: float


@dataclass(frozen=True)
class CacheStats:
    """Counters exposed for operational visibility."""

    keys: int
    hits: int
    misses: int
    ttl: float


class TTLCache(Generic[K, V]):
    """Mapping whose entries expire a fixed time after they are written.

    Expired entries are evicted lazily, on the next access that touches them.
    """

    def __init__(
        self,
        ttl_seconds: float,
        name: str = "cache",
        clock: Clock = time.monotonic,
    ) -> None:
        """Initialize cache.

        Args:
            ttl_seconds: Default lifetime of an entry
            name: Label used in log events
            clock: Monotonic time source (seconds), injectable for tests
        """
        self.ttl_seconds = ttl_seconds
        self.name = name
        self._clock = clock
        self._entries: dict[K, _Entry[V]] = {}
        self._hits = 0
        self._misses = 0

    def _live_entry(self, key: K) -> _Entry[V] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._entries[key]
            logfire.debug("Cache entry expired", cache=self.name, key=str(key))
            return None
        return entry

    def get(self, key: K) -> V | None:
        """Return the live value for key, counting a hit or a miss."""
        entry = self._live_entry(key)
        if entry is None:
            self._misses += 1
            return None
        self._hits += 1
        return entry.value

    def __contains__(self, key: K) -> bool:
        return self._live_entry(key) is not None

    def set(self, key: K, value: V, ttl_seconds: float | None = None) -> None:
        """Store value, arming a fresh expiry."""
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        self._entries[key] = _Entry(value=value, expires_at=self._clock() + ttl)
        logfire.debug("Cache set", cache=self.name, key=str(key))

    def replace(self, key: K, value: V) -> bool:
        """Overwrite a live entry without touching its expiry.

        Returns:
            False if there was no live entry to replace
        """
        entry = self._live_entry(key)
        if entry is None:
            return False
        entry.value = value
        return True

    def delete(self, key: K) -> None:
        """Remove key if present."""
        if self._entries.pop(key, None) is not None:
            logfire.debug("Cache delete", cache=self.name, key=str(key))

    def clear(self) -> None:
        """Evict every entry."""
        self._entries.clear()
        logfire.debug("Cache flushed", cache=self.name)

    def keys(self) -> list[K]:
        """Keys of live entries."""
        now = self._clock()
        return [k for k, e in self._entries.items() if e.expires_at > now]

    def stats(self) -> CacheStats:
        """Snapshot of cache counters."""
        return CacheStats(
            keys=len(self.keys()),
            hits=self._hits,
            misses=self._misses,
            ttl=self.ttl_seconds,
        )


class SingleFlight(Generic[K, T]):
    """Collapses concurrent calls for the same key into one execution.

    The first caller runs the work; callers arriving while it is in flight
    await the same result (or exception).
    """

    def __init__(self) -> None:
        self._inflight: dict[K, asyncio.Future[T]] = {}

    @property
    def in_flight(self) -> int:
        return len(self._inflight)

    async def do(self, key: K, fn: Callable[[], Awaitable[T]]) -> T:
        """Run fn for key unless a run for key is already in progress.

        If the caller running fn is cancelled, callers that joined it are
        not: they start the work again, one of them leading.
        """
        while True:
            existing = self._inflight.get(key)
            if existing is None:
                break
            logfire.debug("Joining in-flight call", key=str(key))
            try:
                return await asyncio.shield(existing)
            except asyncio.CancelledError:
                if not existing.cancelled():
                    raise
                logfire.debug("In-flight call cancelled, retrying", key=str(key))

        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        self._inflight[key] = future
        try:
            result = await fn()
        except asyncio.CancelledError:
            future.cancel()
            raise
        except Exception as e:
            future.set_exception(e)
            # Retrieve so an exception with no joiners isn't reported as unhandled
            future.exception()
            raise
        else:
            future.set_result(result)
            return result
        finally:
            del self._inflight[key]
