"""
Rendering Context

Responsibilities:
- Renders JSON Resume documents through the HTML template
- Provides date, markdown, link, location and i18n template helpers
- Inlines images as base64 data URIs
- Minifies the final page

Owns: HTML template, stylesheet, image inlining, output files
Never: Decides locale fallback order (delegates to the i18n context)
"""

from resume_html.contexts.rendering.exceptions import InvalidResumeError, ResumeRenderError
from resume_html.contexts.rendering.images import (
    FileSystemImageSource,
    ImageResolver,
    LocalImageSource,
    NoFileSystemImageSource,
)
from resume_html.contexts.rendering.renderer import RenderResult, render, render_resume
from resume_html.contexts.rendering.resume_file import load_resume

__all__ = [
    # Orchestration
    "render",
    "render_resume",
    "RenderResult",
    "load_resume",
    # Image strategies
    "ImageResolver",
    "LocalImageSource",
    "FileSystemImageSource",
    "NoFileSystemImageSource",
    # Errors
    "ResumeRenderError",
    "InvalidResumeError",
]
