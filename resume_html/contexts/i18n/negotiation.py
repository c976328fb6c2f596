"""
Locale Negotiation

Selects and orders the supported locales to try for a requested locale.

Matching is tiered; each tier only adds locales not already selected:

1. exact match (case and separator insensitive)
2. available locale is a broader range of the request ("en" for "en-US")
3. likely-subtags match ("en" maximizes to "en-Latn-US", matching "en-US")
4. same primary language, any other region/script ("en-GB" for "en-US")
5. the default locale, when it is available

Within a tier, candidates are ordered by their canonical code.
"""

import re
from typing import Iterable, List, Optional, Tuple

from babel.core import get_global

from resume_html.contexts.i18n.logger import log_negotiation

SUBTAG_SEPARATOR = re.compile(r"[-_]")


def _is_script(subtag: str) -> bool:
    return len(subtag) == 4 and subtag.isalpha()


def _is_region(subtag: str) -> bool:
    return (len(subtag) == 2 and subtag.isalpha()) or (len(subtag) == 3 and subtag.isdigit())


def locale_subtags(code: str) -> Tuple[str, ...]:
    """
    Split a locale code into canonically-cased subtags.

    Examples:
        locale_subtags("en_us")        # ("en", "US")
        locale_subtags("ZH-hant-tw")   # ("zh", "Hant", "TW")
    """
    parts = [part for part in SUBTAG_SEPARATOR.split(code.strip()) if part]
    if not parts:
        return ()

    subtags = [parts[0].lower()]
    for part in parts[1:]:
        if _is_script(part):
            subtags.append(part.title())
        elif _is_region(part):
            subtags.append(part.upper())
        else:
            subtags.append(part.lower())
    return tuple(subtags)


def canonicalize_locale(code: str) -> str:
    """Normalize a locale code to BCP-47 casing with hyphens ("en_us" -> "en-US")."""
    return "-".join(locale_subtags(code))


def _maximize(subtags: Tuple[str, ...]) -> Tuple[str, Optional[str], Optional[str]]:
    """
    Fill in script and region from CLDR likely-subtags data.

    Returns:
        (language, script, region) with None for parts that remain unknown
    """
    language = subtags[0]
    script = next((s for s in subtags[1:] if _is_script(s)), None)
    region = next((s for s in subtags[1:] if _is_region(s)), None)

    # Most specific key first: "zh_TW" maximizes to zh_Hant_TW, "zh" to zh_Hans_CN
    keys = [
        "_".join(key)
        for key in (
            (language, script, region),
            (language, region),
            (language, script),
            (language,),
        )
        if all(key)
    ]
    likely_subtags = get_global("likely_subtags")
    likely = next((likely_subtags[key] for key in keys if key in likely_subtags), None)
    if likely:
        likely_parts = locale_subtags(likely)
        if script is None:
            script = next((s for s in likely_parts[1:] if _is_script(s)), None)
        if region is None:
            region = next((s for s in likely_parts[1:] if _is_region(s)), None)

    return language, script, region


def _matches_range(
    range_subtags: Tuple[str, ...], maximized: Tuple[str, Optional[str], Optional[str]]
) -> bool:
    """
    Whether an available locale, used as a range, covers a maximized request.

    Subtags the range leaves out match anything ("zh-Hant" covers zh-Hant-TW).
    Variants never match a maximized request.
    """
    language, script, region = maximized
    if range_subtags[0] != language:
        return False

    for subtag in range_subtags[1:]:
        if _is_script(subtag):
            if subtag != script:
                return False
        elif _is_region(subtag):
            if subtag != region:
                return False
        else:
            return False
    return True


def negotiate_locales(
    requested_locale: str,
    available_locales: Iterable[str],
    default_locale: Optional[str] = None,
) -> List[str]:
    """
    Compute the ordered list of available locales to use for a request.

    Args:
        requested_locale: Locale asked for (e.g., "fr-CA")
        available_locales: Locale codes present in the catalog
        default_locale: Final fallback, appended only if available

    Returns:
        Available locale codes (original spelling), most preferred first.
        Empty when nothing matches and no usable default was given.

    Examples:
        negotiate_locales("fr-CA", ["en", "fr"], "en")   # ["fr", "en"]
        negotiate_locales("de", ["en"], "en")            # ["en"]
        negotiate_locales("de", ["en"])                  # []
    """
    available = sorted(set(available_locales), key=canonicalize_locale)
    requested = locale_subtags(requested_locale)
    selected: List[str] = []

    def add(candidates: Iterable[str]) -> None:
        for candidate in candidates:
            if candidate not in selected:
                selected.append(candidate)

    if requested:
        by_subtags = [(code, locale_subtags(code)) for code in available]
        by_subtags = [(code, subtags) for code, subtags in by_subtags if subtags]

        # 1. Exact
        add(code for code, subtags in by_subtags if subtags == requested)

        # 2. Available locale is a prefix range of the request, longest first
        ranges = [
            (code, subtags)
            for code, subtags in by_subtags
            if len(subtags) < len(requested) and requested[: len(subtags)] == subtags
        ]
        add(code for code, _ in sorted(ranges, key=lambda item: -len(item[1])))

        # 3. Likely subtags
        maximized = _maximize(requested)
        add(code for code, subtags in by_subtags if _matches_range(subtags, maximized))

        # 4. Same language
        add(code for code, subtags in by_subtags if subtags[0] == requested[0])

    # 5. Default
    if default_locale:
        default_canonical = canonicalize_locale(default_locale)
        add(code for code in available if canonicalize_locale(code) == default_canonical)

    log_negotiation(requested_locale, default_locale, available, selected)
    return selected
