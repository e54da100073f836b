"""
Unit tests for clipboard integration.
"""

from unittest.mock import MagicMock, patch

import pyperclip
import pytest

from securepass.clipboard import ClipboardManager, get_clipboard_manager
from securepass.exceptions import ClipboardError
from securepass import generate_password


class TestClipboardIntegration:
    """Test clipboard functionality."""

    @patch('pyperclip.copy')
    @patch('threading.Thread')
    def test_clipboard_copy_success(self, mock_thread, mock_copy):
        """Test successful clipboard copying."""
        password = generate_password({"length": 16})

        manager = ClipboardManager()
        clear_thread = manager.copy(password)

        mock_copy.assert_called_once_with(password)
        assert clear_thread is mock_thread.return_value

    @patch('pyperclip.copy')
    @patch('threading.Thread')
    def test_clipboard_auto_clear_scheduled(self, mock_thread, mock_copy):
        """Copying starts a daemon thread that clears the clipboard later."""
        mock_thread_instance = MagicMock()
        mock_thread.return_value = mock_thread_instance

        manager = ClipboardManager(clear_after=30)
        manager.copy("secret")

        _, kwargs = mock_thread.call_args
        assert kwargs["daemon"] is True
        assert kwargs["args"] == ("secret",)
        mock_thread_instance.start.assert_called_once()

    @patch('pyperclip.copy')
    @patch('threading.Thread')
    def test_clear_disabled(self, mock_thread, mock_copy):
        """A delay of 0 keeps the clipboard contents."""
        manager = ClipboardManager(clear_after=0)

        assert manager.copy("secret") is None
        mock_thread.assert_not_called()

    @patch('pyperclip.copy', side_effect=pyperclip.PyperclipException("no clipboard"))
    def test_clipboard_unavailable(self, mock_copy):
        """Missing clipboard support raises ClipboardError."""
        manager = ClipboardManager()

        with pytest.raises(ClipboardError, match="no clipboard"):
            manager.copy("secret")

    @patch('pyperclip.paste', return_value="secret")
    @patch('pyperclip.copy')
    def test_clear_if_unchanged(self, mock_copy, mock_paste):
        """The clipboard is cleared when it still holds the password."""
        manager = ClipboardManager()

        assert manager.clear_if_unchanged("secret") is True
        mock_copy.assert_called_once_with("")

    @patch('pyperclip.paste', return_value="something else")
    @patch('pyperclip.copy')
    def test_clear_skipped_when_changed(self, mock_copy, mock_paste):
        """Newer clipboard contents are left alone."""
        manager = ClipboardManager()

        assert manager.clear_if_unchanged("secret") is False
        mock_copy.assert_not_called()

    @patch('pyperclip.paste', side_effect=pyperclip.PyperclipException("gone"))
    def test_clear_failure_is_reported(self, mock_paste):
        manager = ClipboardManager()
        assert manager.clear_if_unchanged("secret") is False

    @patch('pyperclip.paste', return_value="secret")
    @patch('pyperclip.copy')
    @patch('time.sleep')
    def test_clear_later_waits_for_delay(self, mock_sleep, mock_copy, mock_paste):
        manager = ClipboardManager(clear_after=5)
        manager._clear_later("secret")

        mock_sleep.assert_called_once_with(5)
        mock_copy.assert_called_once_with("")

    def test_get_clipboard_manager(self):
        assert get_clipboard_manager().clear_after == ClipboardManager.CLEAR_AFTER
        assert get_clipboard_manager(10).clear_after == 10


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
