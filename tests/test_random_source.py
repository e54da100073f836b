"""
Unit tests for the system random source.
"""

from unittest.mock import patch

import pytest

from securepass.utils.random_source import SystemRandomSource, get_random_source


class TestSystemRandomSource:
    """Test availability check and draws."""

    def test_available(self):
        assert get_random_source().is_available() is True

    @patch("secrets.token_bytes")
    @patch("os.urandom")
    def test_availability_check_draws_nothing(self, mock_urandom, mock_token_bytes):
        """Checking availability must not consume randomness."""
        assert SystemRandomSource().is_available() is True

        mock_urandom.assert_not_called()
        mock_token_bytes.assert_not_called()

    def test_unavailable_without_urandom(self):
        with patch("securepass.utils.random_source.os") as mock_os:
            del mock_os.urandom
            assert SystemRandomSource().is_available() is False

    def test_draws_are_unsigned_32_bit(self):
        source = SystemRandomSource()

        for _ in range(1000):
            value = source.next_uint32()
            assert 0 <= value < 2 ** 32


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
