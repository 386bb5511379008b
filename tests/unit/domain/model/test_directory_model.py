"""Unit tests for directory model helpers."""

from salonhub.domain.model.directory import normalize_instagram


class TestNormalizeInstagram:
    """Tests for normalize_instagram."""

    def test_adds_at_sign(self):
        assert normalize_instagram("janecurls") == "@janecurls"

    def test_keeps_existing_at_sign(self):
        assert normalize_instagram("@janecurls") == "@janecurls"

    def test_first_of_several_handles(self):
        assert normalize_instagram(" janecurls | janebackup ") == "@janecurls"

    def test_blank(self):
        assert normalize_instagram(None) is None
        assert normalize_instagram("   ") is None
        assert normalize_instagram("|other") is None
