"""
Messages

Interface for getting messages from the Fluent translation files.

Usage:
    messages = Messages("fr-CA", "en").load()
    messages.t("present")                              # "Présent"
    messages.t("awarded-by", {"awarder": "ACM"})       # "Décerné par ACM"
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from fluent.runtime import FluentBundle, FluentResource
from fluent.syntax.ast import Junk

from resume_html.contexts.i18n.catalog import MessageCatalog, default_catalog
from resume_html.contexts.i18n.exceptions import (
    InvalidStateError,
    MalformedResourceError,
    UnknownKeyError,
)
from resume_html.contexts.i18n.logger import _log_debug, _log_warning
from resume_html.contexts.i18n.negotiation import negotiate_locales


class MessagesState(Enum):
    """Lifecycle of a Messages instance."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def build_bundle(locale: str, source: str) -> FluentBundle:
    """
    Parse one locale's FTL source into a bundle.

    Args:
        locale: Locale code the source belongs to
        source: Raw FTL text

    Returns:
        FluentBundle with the resource added

    Raises:
        MalformedResourceError: If the source contains unparseable entries
    """
    resource = FluentResource(source)

    junk = [entry for entry in resource.body if isinstance(entry, Junk)]
    if junk:
        annotations = "; ".join(
            annotation.message for entry in junk for annotation in entry.annotations
        )
        raise MalformedResourceError(
            f"Could not parse {len(junk)} entr{'y' if len(junk) == 1 else 'ies'}: {annotations}",
            locale=locale,
            snippet=junk[0].content,
        )

    # Isolation marks would leak U+2068/U+2069 into the rendered HTML
    bundle = FluentBundle([locale], use_isolating=False)
    bundle.add_resource(resource)
    return bundle


class Messages:
    """
    Localized message lookup over a negotiated chain of Fluent bundles.

    Lookups walk the bundles in negotiated order; the first bundle holding a
    message with a value for the key wins.
    """

    def __init__(
        self,
        locale: str,
        default_locale: Optional[str] = None,
        catalog: Optional[MessageCatalog] = None,
    ):
        """
        Args:
            locale: Requested locale (e.g., resume.meta.language)
            default_locale: Fallback locale tried after all matches of locale
            catalog: Locale code -> FTL text. Defaults to the bundled catalog.
        """
        self._locale = locale
        self._default_locale = default_locale
        self._catalog = catalog if catalog is not None else default_catalog()
        self._state = MessagesState.UNINITIALIZED
        self._locales: Tuple[str, ...] = ()
        self._bundles: Tuple[FluentBundle, ...] = ()

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def default_locale(self) -> Optional[str]:
        return self._default_locale

    @property
    def state(self) -> MessagesState:
        return self._state

    @property
    def locales(self) -> Tuple[str, ...]:
        """Negotiated locales backing the bundles, most preferred first."""
        return self._locales

    def load(self) -> "Messages":
        """
        Finds the most suited language files and loads the message bundles to
        memory.

        Returns:
            The same Messages instance this was invoked on

        Raises:
            InvalidStateError: If load() was already called
            MalformedResourceError: If a negotiated locale's FTL fails to parse
        """
        if self._state is not MessagesState.UNINITIALIZED:
            raise InvalidStateError("Messages#load may only be invoked once", self._state)

        self._state = MessagesState.LOADING
        try:
            selected = negotiate_locales(self._locale, self._catalog.keys(), self._default_locale)
            bundles: List[FluentBundle] = [
                build_bundle(locale, self._catalog[locale]) for locale in selected
            ]
        except Exception:
            self._state = MessagesState.FAILED
            raise

        self._locales = tuple(selected)
        self._bundles = tuple(bundles)
        self._state = MessagesState.READY
        _log_debug(f"Loaded {len(self._bundles)} bundle(s) for {self._locale!r}: {selected}")
        return self

    def _ensure_ready(self) -> None:
        if self._state is not MessagesState.READY:
            raise InvalidStateError(
                "Messages#load has not been invoked or resolved yet", self._state
            )

    def _find(self, key: str):
        for bundle in self._bundles:
            if not bundle.has_message(key):
                continue
            message = bundle.get_message(key)
            if message.value:
                return bundle, message
        return None, None

    def has(self, key: str) -> bool:
        """Whether t(key) would resolve."""
        self._ensure_ready()
        bundle, _ = self._find(key)
        return bundle is not None

    def t(self, key: str, attributes: Optional[Dict[str, Any]] = None) -> str:
        """
        Format the message for key in the most preferred locale that has it.

        Args:
            key: Message identifier
            attributes: Variables referenced by the message ({ $name })

        Returns:
            Formatted message

        Raises:
            InvalidStateError: If load() has not completed
            UnknownKeyError: If no negotiated bundle defines key
        """
        self._ensure_ready()

        bundle, message = self._find(key)
        if bundle is None:
            raise UnknownKeyError(key, self._locales)

        value, errors = bundle.format_pattern(message.value, dict(attributes or {}))
        for error in errors:
            _log_warning(f"Formatting {key!r}: {error}")
        return value
