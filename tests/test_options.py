# Area: Session Tests
"""Tests for the option registry."""

from kgp_client._session.options import OptionRegistry


class TestOptionRegistry:
    """Tests for OptionRegistry."""

    def test_unknown_key_is_none(self):
        assert OptionRegistry().get("custom:missing") is None

    def test_last_write_wins(self):
        options = OptionRegistry()
        options.set("time:clock", "30")
        options.set("time:clock", "20")
        assert options.get("time:clock") == "20"

    def test_values_stored_as_strings(self):
        options = OptionRegistry()
        options.set("time:clock", 30)
        assert options.get("time:clock") == "30"

