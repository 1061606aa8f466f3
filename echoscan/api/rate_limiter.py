"""Module with the per-client rate limiter guarding the analysis endpoints."""

from collections import deque
from datetime import UTC, datetime, timedelta

from fastapi import HTTPException, Request
from loguru import logger

from echoscan.api.utils import get_ip_address_or_raise
from echoscan.configuration import config


class RateLimiter:
    """
    In-memory sliding-window limiter keyed by client identifier.

    Clients whose requests have all expired are forgotten, so the storage only
    holds the clients active within the last interval.
    """

    def __init__(
        self,
        max_requests_per_interval: int = config.api_max_requests_per_interval,
        interval: timedelta = config.api_rate_limiter_interval,
    ) -> None:
        """
        Set up the limit and an empty storage.

        Args:
            max_requests_per_interval (int, optional): Requests accepted from one
                client within `interval`. Defaults to the value from the configuration.
            interval (timedelta, optional): Length of the sliding window.
                Defaults to the value from the configuration.

        Raises:
            ValueError: Raised if `max_requests_per_interval` is lower than 1.
        """
        if max_requests_per_interval < 1:
            raise ValueError("`max_requests_per_interval` must be >= 1.")
        if interval < timedelta(seconds=1):
            logger.warning(
                f"{RateLimiter.__name__} works best with an `interval` of at least "
                "one second."
            )

        self._limit = max_requests_per_interval
        self._interval = interval
        self._requests: dict[str, deque[datetime]] = {}
        self._last_sweep = datetime.now(tz=UTC)

    @property
    def tracked_clients(self) -> int:
        """Number of clients with requests inside the current window."""
        return len(self._requests)

    def _expire(self, timestamps: deque[datetime], now: datetime) -> None:
        while timestamps and timestamps[0] + self._interval <= now:
            timestamps.popleft()

    def _sweep(self, now: datetime) -> None:
        for identifier in list(self._requests):
            self._expire(self._requests[identifier], now)
            if not self._requests[identifier]:
                del self._requests[identifier]
        self._last_sweep = now

    def __call__(self, identifier: str) -> None:
        """
        Record a request and reject it when the client is over the limit.

        Args:
            identifier (str): Value telling clients apart, such as an IP address.

        Raises:
            HTTPException: Raised if the client exceeded the limit.
        """
        now = datetime.now(tz=UTC)
        if now - self._last_sweep >= self._interval:
            self._sweep(now)

        timestamps = self._requests.setdefault(identifier, deque())
        self._expire(timestamps, now)
        if len(timestamps) >= self._limit:
            logger.debug(f"Rate limit exceeded by {identifier}.")
            raise HTTPException(
                status_code=429,
                detail=(
                    f"You are allowed to send {self._limit} request(s) every "
                    f"{self._interval}. Please, try again later!"
                ),
            )
        timestamps.append(now)


rate_limiter = RateLimiter()


async def enforce_rate_limit(request: Request) -> None:
    """
    Apply the shared rate limiter to the client sending the request.

    Raises:
        HTTPException: Raised if the client exceeded the limit or cannot be
            identified.
    """
    rate_limiter(get_ip_address_or_raise(request))
