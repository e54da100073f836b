"""
Clipboard integration for generated passwords.

Copies a password with pyperclip and clears the clipboard again after a
delay, unless something else has been copied in the meantime.
"""

import logging
import threading
import time
from typing import Optional

import pyperclip

from .exceptions import ClipboardError

logger = logging.getLogger(__name__)


class ClipboardManager:
    """Copy passwords to the system clipboard with auto-clear."""

    CLEAR_AFTER = 60  # seconds

    def __init__(self, clear_after: Optional[int] = None):
        """
        Initialize clipboard manager.

        Args:
            clear_after: Seconds before the clipboard is cleared, 0 to keep it
        """
        self.clear_after = self.CLEAR_AFTER if clear_after is None else clear_after

    def copy(self, value: str) -> Optional[threading.Thread]:
        """
        Copy a value to the clipboard and schedule clearing it.

        Returns:
            The thread that will clear the clipboard, or None if clearing is off

        Raises:
            ClipboardError: no clipboard mechanism is available
        """
        try:
            pyperclip.copy(value)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Could not copy to clipboard: {e}") from e

        logger.debug("Password copied to clipboard")

        if self.clear_after > 0:
            return self.schedule_clear(value)
        return None

    def schedule_clear(self, value: str) -> threading.Thread:
        """Start a daemon thread that clears the clipboard after the delay."""
        clear_thread = threading.Thread(
            target=self._clear_later, args=(value,), daemon=True
        )
        clear_thread.start()
        return clear_thread

    def _clear_later(self, value: str) -> None:
        time.sleep(self.clear_after)
        self.clear_if_unchanged(value)

    def clear_if_unchanged(self, value: str) -> bool:
        """
        Clear the clipboard if it still holds the copied value.

        Returns:
            True if the clipboard was cleared
        """
        try:
            if pyperclip.paste() != value:
                logger.debug("Clipboard changed since copy, leaving it alone")
                return False
            pyperclip.copy("")
        except pyperclip.PyperclipException as e:
            logger.warning(f"Failed to clear clipboard: {e}")
            return False

        logger.debug("Clipboard cleared")
        return True


def get_clipboard_manager(clear_after: Optional[int] = None) -> ClipboardManager:
    """
    Get a configured clipboard manager instance.

    Args:
        clear_after: Seconds before the clipboard is cleared

    Returns:
        ClipboardManager instance
    """
    return ClipboardManager(clear_after=clear_after)
