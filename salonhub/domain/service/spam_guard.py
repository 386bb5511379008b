"""Spam protection and rate limiting for forum writes.

The guard keeps its state in process memory and never awaits, so one
evaluation runs start to finish without another request observing a
half-updated counter.
"""

import hashlib
import time
from dataclasses import dataclass
from datetime import datetime

import logfire

from salonhub.config import RateLimitSettings
from salonhub.domain.model.common import utcnow
from salonhub.domain.value import GuardDecision
from salonhub.util.cache import Clock, TTLCache

from .base import Service

SPAM_KEYWORDS = (
    "viagra",
    "cialis",
    "casino",
    "poker",
    "lottery",
    "click here",
    "buy now",
    "limited time",
    "act now",
    "free money",
    "make money fast",
    "work from home",
    "weight loss",
    "miracle cure",
    "enlargement",
)


@dataclass(frozen=True)
class RateLimitInfo:
    """Posts accepted from one client in the current window."""

    posts: int
    last_post: datetime


def content_fingerprint(text: str) -> str:
    """SHA-256 hex digest of trimmed, lowercased text."""
    return hashlib.sha256(text.strip().lower().encode("utf-8")).hexdigest()


class SpamGuard(Service):
    """Gate evaluated before every topic or reply is written.

    Checks run in a fixed order and stop at the first failure: length,
    spam keywords, per-client rate limit, duplicate content. The rate
    window opens with a client's first counted post and is not extended
    by later posts.
    """

    def __init__(self, settings: RateLimitSettings, clock: Clock = time.monotonic) -> None:
        """Initialize spam guard.

        Args:
            settings: Rate limit configuration
            clock: Monotonic time source, injectable for tests
        """
        self.settings = settings
        self._rates: TTLCache[str, RateLimitInfo] = TTLCache(
            settings.window_seconds, name="rate_limit", clock=clock
        )
        self._fingerprints: TTLCache[str, bool] = TTLCache(
            settings.duplicate_window_hours * 3600, name="duplicates", clock=clock
        )

    def evaluate(
        self, content: str, client_key: str, title: str | None = None
    ) -> GuardDecision:
        """Decide whether a post may be written.

        Args:
            content: Post body
            client_key: Requesting client (IP address)
            title: Topic title, for topics only

        Returns:
            Decision with a client-facing reason when rejected
        """
        combined = f"{title} {content}" if title else content

        if len(combined) < self.settings.min_length:
            return self._reject(
                client_key,
                f"Content too short (minimum {self.settings.min_length} characters)",
            )
        if len(combined) > self.settings.max_length:
            return self._reject(
                client_key,
                f"Content too long (maximum {self.settings.max_length} characters)",
            )

        lowered = combined.lower()
        if any(keyword in lowered for keyword in SPAM_KEYWORDS):
            return self._reject(client_key, "Content contains spam keywords")

        rate_key = f"rate:{client_key}"
        info = self._rates.get(rate_key)
        if info is not None:
            if info.posts >= self.settings.posts_per_hour:
                return self._reject(
                    client_key,
                    f"Rate limit exceeded ({self.settings.posts_per_hour} posts per hour)",
                )
            self._rates.replace(
                rate_key, RateLimitInfo(posts=info.posts + 1, last_post=utcnow())
            )
        else:
            self._rates.set(rate_key, RateLimitInfo(posts=1, last_post=utcnow()))

        duplicate_key = f"dup:{content_fingerprint(combined)}"
        if duplicate_key in self._fingerprints:
            return self._reject(
                client_key,
                "Duplicate content detected (same content posted in last "
                f"{self.settings.duplicate_window_hours} hours)",
            )
        self._fingerprints.set(duplicate_key, True)

        return GuardDecision.allow()

    def get_rate_limit_info(self, client_key: str) -> RateLimitInfo | None:
        """Current window for a client, or None if no window is open."""
        rate_key = f"rate:{client_key}"
        if rate_key not in self._rates:
            return None
        return self._rates.get(rate_key)

    def clear_rate_limit(self, client_key: str) -> None:
        """Close a client's rate window."""
        self._rates.delete(f"rate:{client_key}")
        logfire.info("Rate limit cleared", client_key=client_key)

    def _reject(self, client_key: str, reason: str) -> GuardDecision:
        logfire.warn("Post rejected by spam guard", client_key=client_key, reason=reason)
        return GuardDecision.reject(reason)
