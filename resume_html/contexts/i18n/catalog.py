"""
Message Catalog

Discovers the Fluent (.ftl) locale files shipped with the package and indexes
their raw text by locale code. The catalog is read once per process and passed
explicitly to every Messages instance.
"""

import os
from functools import lru_cache
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Mapping

from dotenv import load_dotenv

from resume_html.contexts.i18n.logger import _log_debug

load_dotenv()
LOCALES_PATH = Path(os.getenv("RESUME_HTML_LOCALES_PATH", Path(__file__).parent / "locales"))
LOCALE_FILE_SUFFIX = ".ftl"

# Locale code -> raw FTL source
MessageCatalog = Mapping[str, str]


def locale_code_from_path(path: str) -> str:
    """
    Derive a locale code from a resource file path.

    Strips the directory and everything after the first dot of the file name.

    Examples:
        locale_code_from_path("./locales/en.ftl")      # "en"
        locale_code_from_path("locales/pt-BR.ftl")     # "pt-BR"
    """
    filename = PurePosixPath(str(path).replace("\\", "/")).name
    return filename.split(".")[0]


def catalog_from_files(files: Mapping[str, str]) -> MessageCatalog:
    """
    Build a catalog from a mapping of file path to raw FTL text.

    Args:
        files: Mapping such as {"./locales/en.ftl": "greeting = Hi"}

    Returns:
        Read-only mapping of locale code to FTL text
    """
    catalog = {}
    for path in sorted(files):
        code = locale_code_from_path(path)
        if code:
            catalog[code] = files[path]
    return MappingProxyType(catalog)


def load_catalog(locales_dir: Path = LOCALES_PATH) -> MessageCatalog:
    """
    Read every *.ftl file in a directory into a catalog.

    A missing directory yields an empty catalog; lookups against it fail later
    with UnknownKeyError.

    Args:
        locales_dir: Directory containing <localeCode>.ftl files

    Returns:
        Read-only mapping of locale code to FTL text
    """
    locales_dir = Path(locales_dir)
    files = {}
    if locales_dir.is_dir():
        for path in sorted(locales_dir.glob(f"*{LOCALE_FILE_SUFFIX}")):
            files[str(path)] = path.read_text(encoding="utf-8")

    catalog = catalog_from_files(files)
    _log_debug(f"Loaded {len(catalog)} locale(s) from {locales_dir}: {list(catalog)}")
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> MessageCatalog:
    """Process-wide catalog of the bundled locales, built on first use."""
    return load_catalog(LOCALES_PATH)
