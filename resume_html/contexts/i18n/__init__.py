"""
i18n Context

Responsibilities:
- Discovers bundled Fluent locale files (catalog)
- Negotiates the locale chain for a requested locale
- Resolves and formats localized messages with fallback across the chain

Owns: Locale resources, negotiation order, message formatting
Never: Renders HTML
"""

from resume_html.contexts.i18n.catalog import (
    MessageCatalog,
    catalog_from_files,
    default_catalog,
    load_catalog,
)
from resume_html.contexts.i18n.exceptions import (
    ErrorKind,
    InvalidStateError,
    MalformedResourceError,
    MessagesError,
    UnknownKeyError,
)
from resume_html.contexts.i18n.messages import Messages, MessagesState
from resume_html.contexts.i18n.negotiation import canonicalize_locale, negotiate_locales

__all__ = [
    # Catalog
    "MessageCatalog",
    "catalog_from_files",
    "default_catalog",
    "load_catalog",
    # Negotiation
    "canonicalize_locale",
    "negotiate_locales",
    # Resolver
    "Messages",
    "MessagesState",
    # Errors
    "ErrorKind",
    "MessagesError",
    "InvalidStateError",
    "UnknownKeyError",
    "MalformedResourceError",
]
