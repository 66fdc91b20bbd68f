"""Presentation layer — localized text and JSON output."""

from npm_watchdog.presentation.locale import Locale, Messages, messages_for, resolve_locale
from npm_watchdog.presentation.render import (
    TextRenderer,
    format_error,
    format_read_warning,
    render_json,
    status_message,
)

__all__ = [
    "Locale",
    "Messages",
    "TextRenderer",
    "format_error",
    "format_read_warning",
    "messages_for",
    "render_json",
    "resolve_locale",
    "status_message",
]
