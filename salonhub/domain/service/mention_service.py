"""Stylist mention detection for forum posts."""

import re
import time

import logfire

from salonhub.domain.repository import DirectoryRepository
from salonhub.domain.value import StylistId
from salonhub.util.cache import Clock

from .base import Service

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lowercase, collapse whitespace runs to one space, and trim."""
    return _WHITESPACE.sub(" ", text.lower()).strip()


def name_similarity(text: str, name: str) -> float:
    """Score how strongly text refers to a stylist name.

    1.0 for an exact match, 0.8 when the text contains the name, 0.7 when
    every word of the name appears somewhere in the text, 0 otherwise.
    A text that is only part of a name ("jane" for "jane doe") is not a
    mention.

    Word presence is a plain substring test, so a short name such as "Al"
    also matches inside "salon". This trades precision for recall.
    """
    s1 = normalize_text(text)
    s2 = normalize_text(name)

    if s1 == s2:
        return 1.0
    if s2 in s1:
        return 0.8
    if all(word in s1 for word in s2.split(" ")):
        return 0.7
    return 0.0


class StylistRoster:
    """Process-wide snapshot of stylist ids and names.

    The snapshot is replaced wholesale from the directory repository once
    it is older than the configured lifetime.
    """

    def __init__(self, ttl_seconds: float, clock: Clock = time.monotonic) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._names: dict[StylistId, str] | None = None
        self._loaded_at = 0.0

    async def names(self, directory_repository: DirectoryRepository) -> dict[StylistId, str]:
        """Current roster, reloading it when stale."""
        now = self._clock()
        if self._names is None or now - self._loaded_at > self.ttl_seconds:
            rows = await directory_repository.list_stylist_names()
            # Only swap once the load has completed
            self._names = {stylist_id: name for stylist_id, name in rows}
            self._loaded_at = now
            logfire.info("Stylist roster loaded", stylists=len(self._names))
        return self._names

    def clear(self) -> None:
        """Force a reload on next use."""
        self._names = None
        self._loaded_at = 0.0


class MentionService(Service):
    """Domain service linking forum text to known stylists."""

    def __init__(
        self,
        roster: StylistRoster,
        directory_repository: DirectoryRepository,
        threshold: float = 0.7,
    ) -> None:
        """Initialize mention service.

        Args:
            roster: Shared stylist roster
            directory_repository: Source for roster reloads
            threshold: Minimum similarity score for a mention
        """
        self.roster = roster
        self.directory_repository = directory_repository
        self.threshold = threshold

    async def detect(self, content: str, title: str | None = None) -> set[StylistId]:
        """Find stylists mentioned in a post.

        Args:
            content: Post body
            title: Topic title, scanned together with the body

        Returns:
            Ids of every stylist scoring at or above the threshold
        """
        with logfire.span("mention_service.detect"):
            combined = f"{title} {content}" if title else content
            normalized = normalize_text(combined)

            names = await self.roster.names(self.directory_repository)
            mentioned = {
                stylist_id
                for stylist_id, name in names.items()
                if normalize_text(name)
                and name_similarity(normalized, name) >= self.threshold
            }

            if mentioned:
                logfire.info("Stylist mentions detected", count=len(mentioned))
            return mentioned
