"""
Tests for settings validation.
"""
import pytest
from pydantic import ValidationError

from socialdash.config import Settings


class TestSettings:
    """Test Settings field checks."""

    def test_default_timezone(self):
        assert Settings().display_timezone == "UTC"

    def test_valid_timezone(self):
        assert Settings(display_timezone="Europe/Berlin").display_timezone == "Europe/Berlin"

    @pytest.mark.parametrize("name", ["Mars/Olympus_Mons", "Europe/Berln"])
    def test_unknown_timezone_fails_at_load(self, name):
        with pytest.raises(ValidationError, match="display timezone"):
            Settings(display_timezone=name)
