"""
HTML Renderer

Renders a JSON Resume document to a single self-contained, minified HTML page.
"""

import copy
import os
import time
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import minify_html
from dotenv import load_dotenv
from jinja2 import ChainableUndefined, Environment, FileSystemLoader, TemplateError

from resume_html.contexts.i18n import MessageCatalog, Messages, MessagesError
from resume_html.contexts.rendering.exceptions import InvalidResumeError, ResumeRenderError
from resume_html.contexts.rendering.helpers import (
    format_location,
    link_filter,
    make_date_helper,
    make_i18n_helper,
    markdown_filter,
)
from resume_html.contexts.rendering.images import FileSystemImageSource, ImageResolver, is_remote
from resume_html.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    log_render_result,
    log_render_start,
)
from resume_html.contexts.rendering.resume_file import load_resume

load_dotenv()
REQUESTED_LOCALE = os.getenv("RESUME_HTML_REQUESTED_LOCALE", "en-US")
DEFAULT_LOCALE = os.getenv("RESUME_HTML_DEFAULT_LOCALE", "en")

TEMPLATE_PATH = Path(__file__).parent / "template"
TEMPLATE_NAME = "resume.html.jinja"
STYLESHEET_NAME = "style.css"

# Options passed to minify_html.minify for the final page
MINIFY_OPTIONS = {
    "minify_css": True,
    "keep_comments": False,
    "keep_closing_tags": True,
    "keep_html_and_head_opening_tags": True,
}


@dataclass
class RenderResult:
    """
    Result of rendering a resume file.

    Attributes:
        success: Whether rendering succeeded
        output_path: Path to written HTML (None if failed)
        locale: Locale requested by the resume (meta.language or override)
        size_bytes: Size of the written HTML
        error: Error message if rendering failed
    """

    success: bool
    output_path: Optional[Path] = None
    locale: Optional[str] = None
    size_bytes: int = 0
    error: Optional[str] = None


@lru_cache(maxsize=4)
def create_environment(template_dir: Path = TEMPLATE_PATH) -> Environment:
    """
    Create the Jinja2 environment with the locale-independent filters registered.

    Environments are cached per template directory.
    """
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=True,
        undefined=ChainableUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["markdown"] = markdown_filter
    env.filters["link"] = link_filter
    env.filters["format_location"] = format_location
    return env


def _prepare_images(resume: Dict[str, Any], image_resolver: ImageResolver) -> None:
    """Inline basics.image and meta.logo in place; remember remote photos for og:image."""
    meta = resume.get("meta") or {}
    self_contained = bool(meta.get("selfContainedImages"))

    basics = resume.get("basics") or {}
    if basics.get("image"):
        if is_remote(basics["image"]):
            if not resume.get("custom"):
                resume["custom"] = {}
            resume["custom"]["ogImage"] = basics["image"]
        basics["image"] = image_resolver.resolve(basics["image"], self_contained)

    if meta.get("logo"):
        meta["logo"] = image_resolver.resolve(meta["logo"], self_contained)


def _mark_reference_footers(resume: Dict[str, Any]) -> None:
    for reference in resume.get("references") or []:
        reference["hasFooter"] = bool(
            reference.get("email") or reference.get("phone") or reference.get("url")
        )


def render(
    resume: Dict[str, Any],
    image_resolver: Optional[ImageResolver] = None,
    catalog: Optional[MessageCatalog] = None,
    locale: Optional[str] = None,
    template_dir: Path = TEMPLATE_PATH,
) -> str:
    """
    Render a resume to minified HTML.

    The input is not modified; helpers work on a deep copy.

    Args:
        resume: JSON Resume document
        image_resolver: Image strategy (default: ImageResolver() reading from cwd)
        catalog: Locale catalog (default: bundled locales)
        locale: Override for meta.language
        template_dir: Directory holding resume.html.jinja and style.css

    Returns:
        Minified HTML page

    Raises:
        MessagesError: If a locale resource is malformed or a template key is unknown
        ResumeRenderError: If the template fails to render
    """
    resume = copy.deepcopy(resume)
    meta = resume.get("meta") or {}

    locale = locale or meta.get("language") or REQUESTED_LOCALE
    messages = Messages(locale, DEFAULT_LOCALE, catalog).load()
    _log_info(f"Rendering with locale {locale!r} (bundles: {list(messages.locales)})")

    _prepare_images(resume, image_resolver or ImageResolver())
    _mark_reference_footers(resume)

    env = create_environment(template_dir)
    css = (template_dir / STYLESHEET_NAME).read_text(encoding="utf-8")

    try:
        template = env.get_template(TEMPLATE_NAME)
        html = template.render(
            css=css,
            resume=resume,
            lang=locale,
            i18n=make_i18n_helper(messages),
            date=make_date_helper(messages, locale, DEFAULT_LOCALE),
        )
    except TemplateError as e:
        raise ResumeRenderError(
            "Failed to render resume template", template_name=TEMPLATE_NAME, original_error=e
        ) from e

    minified = minify_html.minify(html, **MINIFY_OPTIONS)
    _log_debug(f"Minified HTML from {len(html)} to {len(minified)} characters")
    return minified


def render_resume(
    resume_path: Path,
    output_path: Optional[Path] = None,
    image_resolver: Optional[ImageResolver] = None,
    locale: Optional[str] = None,
    self_contained: Optional[bool] = None,
) -> RenderResult:
    """
    Render a resume file and write the HTML next to it (or to output_path).

    Local image paths are resolved relative to the resume file unless an
    image_resolver is supplied.

    Args:
        resume_path: Path to .json/.yaml resume
        output_path: Destination (default: resume path with .html suffix)
        image_resolver: Image strategy
        locale: Override for meta.language
        self_contained: Override for meta.selfContainedImages

    Returns:
        RenderResult with success status; errors are captured in result.error
    """
    resume_path = Path(resume_path).resolve()
    output_path = Path(output_path) if output_path else resume_path.with_suffix(".html")
    resume_name = resume_path.stem

    log_render_start(resume_name, resume_path, output_path)
    start_time = time.time()

    if image_resolver is None:
        image_resolver = ImageResolver(FileSystemImageSource(resume_path.parent))

    requested = locale or REQUESTED_LOCALE
    try:
        resume = load_resume(resume_path)
        if self_contained is not None:
            resume["meta"] = {**(resume.get("meta") or {}), "selfContainedImages": self_contained}
        requested = locale or (resume.get("meta") or {}).get("language") or REQUESTED_LOCALE
        html = render(resume, image_resolver=image_resolver, locale=locale)
    except (MessagesError, ResumeRenderError, InvalidResumeError, ValueError, OSError) as e:
        result = RenderResult(success=False, locale=requested, error=str(e))
        log_render_result(resume_name, result, time.time() - start_time)
        return result

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")

    result = RenderResult(
        success=True,
        output_path=output_path,
        locale=requested,
        size_bytes=len(html.encode("utf-8")),
    )
    log_render_result(resume_name, result, time.time() - start_time)
    return result
