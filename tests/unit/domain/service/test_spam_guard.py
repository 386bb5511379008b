"""Unit tests for SpamGuard."""

from salonhub.config import RateLimitSettings
from salonhub.domain.service import SpamGuard
from salonhub.domain.service.spam_guard import content_fingerprint
from tests.conftest import FakeClock


def make_guard(clock: FakeClock | None = None, **overrides) -> SpamGuard:
    return SpamGuard(RateLimitSettings(**overrides), clock=clock or FakeClock())


class TestLength:
    """Tests for the length bounds."""

    def test_rejects_nineteen_characters(self):
        """Combined text one character under the minimum is rejected."""
        guard = make_guard()

        decision = guard.evaluate("a" * 19, "1.2.3.4")

        assert not decision.allowed
        assert decision.reason == "Content too short (minimum 20 characters)"

    def test_accepts_twenty_characters(self):
        """Combined text at the minimum is accepted."""
        guard = make_guard()

        decision = guard.evaluate("a" * 20, "1.2.3.4")

        assert decision.allowed
        assert decision.reason is None

    def test_title_counts_towards_length(self):
        """Title and content are joined with a space before measuring."""
        guard = make_guard()

        # 9 + 1 + 10 = 20
        decision = guard.evaluate("b" * 10, "1.2.3.4", title="a" * 9)

        assert decision.allowed

    def test_rejects_too_long(self):
        guard = make_guard()

        decision = guard.evaluate("a" * 5001, "1.2.3.4")

        assert not decision.allowed
        assert decision.reason == "Content too long (maximum 5000 characters)"

    def test_length_rejection_does_not_touch_rate_window(self):
        """Posts failing early checks are not counted."""
        guard = make_guard()

        guard.evaluate("short", "1.2.3.4")

        assert guard.get_rate_limit_info("1.2.3.4") is None


class TestKeywords:
    """Tests for the spam keyword list."""

    def test_rejects_keyword_case_insensitively(self):
        guard = make_guard()

        decision = guard.evaluate("Cheap VIAGRA for everyone, today only", "1.2.3.4")

        assert not decision.allowed
        assert decision.reason == "Content contains spam keywords"

    def test_keyword_in_title(self):
        guard = make_guard()

        decision = guard.evaluate(
            "A perfectly normal question about curls", "1.2.3.4", title="Click here"
        )

        assert not decision.allowed
        assert decision.reason == "Content contains spam keywords"

    def test_keyword_rejection_not_counted(self):
        guard = make_guard()

        guard.evaluate("Visit our casino for curly hair tips", "1.2.3.4")

        assert guard.get_rate_limit_info("1.2.3.4") is None


class TestRateLimit:
    """Tests for the per-client rate window."""

    def test_sixth_post_in_window_rejected(self):
        """Five distinct posts pass; the sixth is rejected."""
        guard = make_guard()

        for i in range(5):
            decision = guard.evaluate(f"Distinct post number {i} about curls", "1.2.3.4")
            assert decision.allowed

        decision = guard.evaluate("Distinct post number 5 about curls", "1.2.3.4")

        assert not decision.allowed
        assert decision.reason == "Rate limit exceeded (5 posts per hour)"

    def test_other_client_unaffected(self):
        guard = make_guard()
        for i in range(5):
            guard.evaluate(f"Distinct post number {i} about curls", "1.2.3.4")

        decision = guard.evaluate("A different client asks about curls", "5.6.7.8")

        assert decision.allowed

    def test_window_is_fixed_from_first_post(self):
        """Later posts do not extend the window."""
        clock = FakeClock()
        guard = make_guard(clock, posts_per_hour=2)

        assert guard.evaluate("First post about wash day routines", "c").allowed
        clock.advance(1800)
        assert guard.evaluate("Second post about wash day routines", "c").allowed
        assert not guard.evaluate("Third post about wash day routines", "c").allowed

        # One hour after the first post the window closes
        clock.advance(1801)

        assert guard.evaluate("Fourth post about wash day routines", "c").allowed
        info = guard.get_rate_limit_info("c")
        assert info is not None
        assert info.posts == 1

    def test_clear_rate_limit(self):
        guard = make_guard(posts_per_hour=1)
        guard.evaluate("First post about wash day routines", "c")

        guard.clear_rate_limit("c")

        assert guard.get_rate_limit_info("c") is None
        assert guard.evaluate("Second post about wash day routines", "c").allowed


class TestDuplicates:
    """Tests for duplicate content detection."""

    def test_duplicate_from_any_client_rejected(self):
        guard = make_guard()
        assert guard.evaluate("Which diffuser do you all recommend?", "a").allowed

        decision = guard.evaluate("  which DIFFUSER do you all recommend?  ", "b")

        assert not decision.allowed
        assert decision.reason == (
            "Duplicate content detected (same content posted in last 24 hours)"
        )

    def test_duplicate_counts_against_rate(self):
        """A duplicate passes the rate check first, so it uses up a slot."""
        guard = make_guard()
        guard.evaluate("Which diffuser do you all recommend?", "a")

        guard.evaluate("Which diffuser do you all recommend?", "a")

        info = guard.get_rate_limit_info("a")
        assert info is not None
        assert info.posts == 2

    def test_duplicate_allowed_after_expiry(self):
        clock = FakeClock()
        guard = make_guard(clock)
        guard.evaluate("Which diffuser do you all recommend?", "a")

        clock.advance(24 * 3600 + 1)

        assert guard.evaluate("Which diffuser do you all recommend?", "b").allowed


def test_content_fingerprint_normalizes_case_and_whitespace():
    assert content_fingerprint("  Hello World ") == content_fingerprint("hello world")
    assert content_fingerprint("hello world") != content_fingerprint("hello  world")
