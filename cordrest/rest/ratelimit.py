from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from typing import AsyncIterator, Callable, Mapping, MutableMapping, Optional

import attr

__all__ = ("Bucket", "RateLimiter", "MAX_BUCKETS")

_log = logging.getLogger(__name__)


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    value = headers.get(name)
    if value is None:
        # plain mappings are case sensitive, aiohttp's are not
        value = headers.get(name.lower())
    return value


@attr.define
class Bucket:
    """The ratelimit state of a single route bucket, requests in the
    same bucket are sent one after another.
    """

    key: str = attr.field()
    """ The route bucket (see `cordrest.rest.route.Route.bucket`) """

    limit: Optional[int] = attr.field(default=None)
    """ The amount of requests the bucket allows per window """

    remaining: Optional[int] = attr.field(default=None)
    """ Requests left in the current window, `None` until discord
    has told us.
    """

    reset_at: Optional[float] = attr.field(default=None)
    """ Clock time at which the window resets """

    lock: asyncio.Lock = attr.field(factory=asyncio.Lock, repr=False, eq=False)

    def delay(self, now: float) -> float:
        """Seconds to wait before the bucket may be used again"""

        if self.remaining != 0 or self.reset_at is None:
            return 0.0
        return max(0.0, self.reset_at - now)

    def update(self, headers: Mapping[str, str], now: float) -> None:
        """Record the ``X-RateLimit-*`` headers of a response"""

        limit = _header(headers, "X-RateLimit-Limit")
        remaining = _header(headers, "X-RateLimit-Remaining")
        reset_after = _header(headers, "X-RateLimit-Reset-After")

        if limit is not None:
            self.limit = int(limit)
        if remaining is not None:
            self.remaining = int(remaining)
        if reset_after is not None:
            self.reset_at = now + float(reset_after)

        _log.debug(
            "bucket %s: %s/%s remaining", self.key, self.remaining, self.limit
        )

    def block(self, retry_after: float, now: float) -> None:
        """Mark the bucket as exhausted for `retry_after` seconds"""

        self.remaining = 0
        self.reset_at = now + retry_after

    def is_expired(self, now: float) -> bool:
        """Whether the bucket holds nothing worth keeping, no request
        is using it and its window (if any) is over.
        """

        if self.lock.locked():
            return False
        return self.reset_at is None or self.reset_at <= now


MAX_BUCKETS: int = 256
""" Past this many buckets the expired ones are dropped """


@attr.define
class RateLimiter:
    """Tracks every bucket the client has seen, keyed by the
    normalized route.
    """

    clock: Callable[[], float] = attr.field(default=time.monotonic)
    """ Monotonic clock used for reset times """

    buckets: MutableMapping[str, Bucket] = attr.field(factory=dict)

    global_ratelimit: asyncio.Event = attr.field(factory=asyncio.Event, eq=False)
    """ Set while no global ratelimit is active """

    global_reset_at: Optional[float] = attr.field(default=None)
    """ Clock time at which the current global ratelimit ends """

    _global_timer: Optional[asyncio.TimerHandle] = attr.field(
        default=None, init=False, repr=False, eq=False
    )

    def __attrs_post_init__(self):
        self.global_ratelimit.set()

    def get_bucket(self, key: str) -> Bucket:
        """Return the bucket for `key`, creating it on first use"""

        try:
            return self.buckets[key]
        except KeyError:
            self.clear_expired()
            self.buckets[key] = bucket = Bucket(key)
            return bucket

    def clear_expired(self) -> None:
        """Forget the idle buckets once there are more than
        `MAX_BUCKETS` of them.
        """

        if len(self.buckets) < MAX_BUCKETS:
            return

        now = self.clock()
        keys = [key for key, bucket in self.buckets.items() if bucket.is_expired(now)]
        for key in keys:
            del self.buckets[key]

        _log.debug("cleared %s expired buckets", len(keys))

    @contextlib.asynccontextmanager
    async def acquire(self, key: str) -> AsyncIterator[Bucket]:
        """Hold the bucket for the duration of one request, waiting
        out an exhausted window or a global ratelimit first.
        """

        bucket = self.get_bucket(key)

        async with bucket.lock:
            while True:
                await self.global_ratelimit.wait()

                delay = bucket.delay(self.clock())
                if delay <= 0:
                    break

                _log.debug("bucket %s is exhausted, waiting %.2fs", key, delay)
                await asyncio.sleep(delay)

            yield bucket

    def set_global(self, retry_after: float) -> None:
        """Block every bucket for `retry_after` seconds, a shorter
        ratelimit never ends a longer one early.
        """

        reset_at = self.clock() + retry_after
        if self.global_reset_at is not None and reset_at <= self.global_reset_at:
            return

        _log.warning("global ratelimit hit, retrying in %.2fs", retry_after)

        if self._global_timer is not None:
            self._global_timer.cancel()

        self.global_reset_at = reset_at
        self.global_ratelimit.clear()
        self._global_timer = asyncio.get_running_loop().call_later(
            retry_after, self._end_global
        )

    def _end_global(self) -> None:
        self.global_reset_at = None
        self._global_timer = None
        self.global_ratelimit.set()
