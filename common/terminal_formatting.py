# common/terminal_formatting.py
"""
Terminal Formatting Utilities
==============================

Status prefixes for runner output, with ASCII fallback for terminals that
cannot show emoji.
"""

import os
import sys


class TerminalFormatter:
    """
    Formats status messages with an emoji or ASCII prefix.

    TERM_EMOJI=0/1 in the environment forces the choice.
    """

    SYMBOLS = {
        'success': ('✅', '[OK]'),
        'error': ('❌', '[ERROR]'),
        'warning': ('⚠️', '[WARNING]'),
        'info': ('ℹ️', '[INFO]'),
        'save': ('💾', '[SAVED]'),
    }

    def __init__(self, use_emoji: bool = None):
        """
        Parameters:
        -----------
        use_emoji : bool, optional
            Force emoji on/off. If None, detect from the environment.
        """
        self.use_emoji = self._detect_emoji_support() if use_emoji is None else use_emoji

    @staticmethod
    def _detect_emoji_support() -> bool:
        env_emoji = os.environ.get('TERM_EMOJI', '').lower()
        if env_emoji in ('0', 'false', 'no', 'off'):
            return False
        if env_emoji in ('1', 'true', 'yes', 'on'):
            return True

        # CI logs and plain Windows consoles
        if any(os.environ.get(var) for var in ('CI', 'GITHUB_ACTIONS', 'GITLAB_CI', 'JENKINS_HOME')):
            return False
        if sys.platform == 'win32':
            return bool(os.environ.get('WT_SESSION')) or \
                os.environ.get('TERM_PROGRAM', '').lower() in ('vscode', 'pycharm')

        return True

    def get_symbol(self, name: str) -> str:
        if name not in self.SYMBOLS:
            return name
        emoji, ascii_fallback = self.SYMBOLS[name]
        return emoji if self.use_emoji else ascii_fallback

    def format_message(self, message_type: str, message: str) -> str:
        return f"{self.get_symbol(message_type)} {message}"


_formatter = None


def get_formatter() -> TerminalFormatter:
    """Get global terminal formatter instance."""
    global _formatter
    if _formatter is None:
        _formatter = TerminalFormatter()
    return _formatter


def set_emoji_enabled(enabled: bool):
    """Globally enable/disable emoji."""
    global _formatter
    _formatter = TerminalFormatter(use_emoji=enabled)


def success(msg: str) -> str:
    return get_formatter().format_message('success', msg)


def error(msg: str) -> str:
    return get_formatter().format_message('error', msg)


def warning(msg: str) -> str:
    return get_formatter().format_message('warning', msg)


def info(msg: str) -> str:
    return get_formatter().format_message('info', msg)


def saved(msg: str) -> str:
    return get_formatter().format_message('save', msg)
