"""Global logging and error handling utilities"""
import logging
import sys

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('view2d')
_main_window = None


def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Shows popup with user message or exception string
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    message = user_message if user_message else str(e)
    _logger.error("%s: %s", title, message, exc_info=e)

    if _main_window is not None:
        from PyQt5.QtWidgets import QMessageBox
        QMessageBox.critical(_main_window, title, message)

    raise e
