"""
Template Helpers

Filters and functions available inside the resume template.

Locale-independent helpers (markdown, link, format_location) are registered as
Jinja2 filters once. Locale-dependent helpers (i18n, date) are built per render
around a loaded Messages instance and passed in the template context.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
from urllib.parse import urlparse

import markdown as markdown_lib
from babel import Locale, UnknownLocaleError
from babel.dates import format_skeleton
from markupsafe import Markup

from resume_html.contexts.i18n import Messages
from resume_html.contexts.i18n.negotiation import canonicalize_locale
from resume_html.contexts.rendering.logger import _log_warning
from resume_html.utils.timestamp import parse_partial_date, to_iso_utc

# CLDR skeletons: month + year for full dates, year alone for "YYYY"
LONG_DATE_SKELETON = "yMMM"
SHORT_DATE_SKELETON = "y"

LOCATION_FIELDS = ["address", "postalCode", "city", "region", "countryCode"]


def markdown_filter(body: Optional[str]) -> Markup:
    """Render markdown to HTML."""
    if not body:
        return Markup("")
    return Markup(markdown_lib.markdown(body))


def link_filter(body: str) -> Markup:
    """
    Render a URL as an anchor whose text is the host without a leading "www.".

    Raises:
        ValueError: If body is not an absolute URL
    """
    parsed = urlparse(body)
    if not parsed.scheme or not parsed.hostname:
        raise ValueError(f"Invalid URL: {body!r}")

    # Host only: userinfo ("user:pass@") never reaches the link text
    host = parsed.hostname[4:] if parsed.hostname.startswith("www.") else parsed.hostname
    if parsed.port is not None:
        host = f"{host}:{parsed.port}"
    return Markup('<a href="{0}">{1}</a>').format(body, host)


def format_location(location: Optional[Dict[str, Any]]) -> str:
    """Join the non-empty location parts with ", "."""
    if not location:
        return ""

    parts = [str(location[field]) for field in LOCATION_FIELDS if location.get(field)]
    return ", ".join(parts)


def babel_locale(locale: str, fallback: str = "en") -> Locale:
    """
    Resolve a locale code to a Babel Locale, falling back when CLDR lacks it.
    """
    for candidate in (locale, fallback):
        try:
            return Locale.parse(canonicalize_locale(candidate).replace("-", "_"))
        except (UnknownLocaleError, ValueError):
            _log_warning(f"No CLDR data for locale {candidate!r}")
    return Locale("en")


def make_i18n_helper(messages: Messages) -> Callable[..., str]:
    """
    Build the i18n template function.

    Template usage:
        {{ i18n('work') }}
        {{ i18n('awarded-by', 'awarder', award.awarder) }}
    """

    def i18n(key: str, name: Optional[str] = None, value: Any = None) -> str:
        return messages.t(key, {name: value} if name else {})

    return i18n


def make_date_helper(messages: Messages, locale: str, fallback_locale: str = "en"):
    """
    Build the date template function.

    Dates with a month ("2020-03", "2020-03-15") render as abbreviated month and
    year; bare years render as the year. An empty value renders the "present"
    message. Output is wrapped in <time> with an ISO 8601 UTC datetime.

    Template usage:
        {{ date(job.startDate) }}
    """
    cldr_locale = babel_locale(locale, fallback_locale)

    def date(body: Optional[str]) -> Markup:
        if not body:
            return Markup.escape(messages.t("present"))

        body = str(body)
        value = parse_partial_date(body)
        moment = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
        skeleton = LONG_DATE_SKELETON if len(body.split("-")) != 1 else SHORT_DATE_SKELETON
        text = format_skeleton(skeleton, moment, tzinfo=timezone.utc, locale=cldr_locale)
        text = text[:1].upper() + text[1:]
        return Markup('<time datetime="{0}">{1}</time>').format(to_iso_utc(value), text)

    return date
