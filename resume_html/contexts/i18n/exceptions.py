"""Custom exceptions for the i18n context."""

from enum import Enum
from typing import Optional, Sequence


class ErrorKind(Enum):
    """Distinguishes message lookup failures without inspecting error text."""

    INVALID_STATE = "invalid_state"
    UNKNOWN_KEY = "unknown_key"
    MALFORMED_RESOURCE = "malformed_resource"


class MessagesError(Exception):
    """Base class for message catalog and lookup errors."""

    kind: ErrorKind


class InvalidStateError(MessagesError):
    """
    Exception raised when Messages is used outside its valid lifecycle.

    Raised by t()/has() before load() has completed, and by a second load().

    Attributes:
        message: Error description
        state: MessagesState at the time of the call
    """

    kind = ErrorKind.INVALID_STATE

    def __init__(self, message: str, state=None):
        self.message = message
        self.state = state

        parts = [message]
        if state is not None:
            parts.append(f"(state: {state.value})")

        super().__init__(" ".join(parts))


class UnknownKeyError(MessagesError, KeyError):
    """
    Exception raised when a message key is absent from every negotiated bundle.

    Attributes:
        key: The message key that was requested
        locales: Locales that were searched, in order
    """

    kind = ErrorKind.UNKNOWN_KEY

    def __init__(self, key: str, locales: Optional[Sequence[str]] = None):
        self.key = key
        self.locales = tuple(locales or ())

        message = f"Unknown or unsupported message key specified: {key}"
        if self.locales:
            message += f" (searched: {', '.join(self.locales)})"
        else:
            message += " (no locales negotiated)"
        self.message = message

        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class MalformedResourceError(MessagesError):
    """
    Exception raised when a locale's FTL source fails to parse.

    Attributes:
        message: Error description
        locale: Locale whose resource was rejected
        snippet: The FTL content that failed to parse
    """

    kind = ErrorKind.MALFORMED_RESOURCE

    def __init__(self, message: str, locale: str, snippet: Optional[str] = None):
        self.message = message
        self.locale = locale
        self.snippet = snippet

        parts = [f"{message} (locale: {locale})"]

        if snippet:
            # Truncate snippet if too long
            shown = snippet[:200] + "..." if len(snippet) > 200 else snippet
            parts.append(f"\nRejected FTL:\n{shown}")

        super().__init__("\n".join(parts))
