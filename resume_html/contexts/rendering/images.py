"""
Image Resolution

Turns image references in a resume into base64 data URIs where possible.

- data: URIs are returned unchanged
- http(s) URLs are downloaded and inlined only for self-contained builds
- anything else is treated as a local path and read through a LocalImageSource

Failures never abort a render: they are logged and the original reference is kept.

Whether local files can be read is decided once, by choosing the LocalImageSource
implementation at startup:
    FileSystemImageSource(base_dir)   # read files relative to base_dir
    NoFileSystemImageSource()          # environment without filesystem access
"""

import base64
import os
import re
from pathlib import Path
from typing import Optional, Protocol

import httpx
from dotenv import load_dotenv

from resume_html.contexts.rendering.logger import _log_debug, _log_warning

load_dotenv()
IMAGE_TIMEOUT = float(os.getenv("RESUME_HTML_IMAGE_TIMEOUT", "10"))

REMOTE_URL = re.compile(r"^https?://")

DEFAULT_REMOTE_CONTENT_TYPE = "image/jpeg"
DEFAULT_LOCAL_CONTENT_TYPE = "application/octet-stream"

MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
}


def to_data_uri(content: bytes, content_type: str) -> str:
    """Encode bytes as a base64 data URI."""
    return f"data:{content_type};base64,{base64.b64encode(content).decode('ascii')}"


def is_remote(image: str) -> bool:
    return bool(REMOTE_URL.match(image))


class LocalImageSource(Protocol):
    """Reads local image references into data URIs."""

    def read(self, reference: str) -> Optional[str]:
        """Return a data URI for reference, or None if it cannot be read."""
        ...


class FileSystemImageSource:
    """Reads images from disk, resolving relative paths against base_dir."""

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    def read(self, reference: str) -> Optional[str]:
        file_path = (self.base_dir / reference).resolve()

        if not file_path.is_file():
            _log_warning(f"Local image not found: {file_path}")
            return None

        try:
            content = file_path.read_bytes()
        except OSError as e:
            _log_warning(f"Could not read local image {file_path}: {e}")
            return None

        content_type = MIME_TYPES.get(file_path.suffix.lower(), DEFAULT_LOCAL_CONTENT_TYPE)
        return to_data_uri(content, content_type)


class NoFileSystemImageSource:
    """Local source for environments that cannot read files; never inlines."""

    def read(self, reference: str) -> Optional[str]:
        _log_debug(f"Filesystem access disabled, keeping image reference: {reference}")
        return None


class ImageResolver:
    """
    Resolves image references for a render.

    Args:
        local_source: Strategy for local paths (default: FileSystemImageSource())
        client: httpx client for downloads. A short-lived client is created per
                download when omitted.
        timeout: Download timeout in seconds when no client is given
    """

    def __init__(
        self,
        local_source: Optional[LocalImageSource] = None,
        client: Optional[httpx.Client] = None,
        timeout: float = IMAGE_TIMEOUT,
    ):
        self.local_source = local_source if local_source is not None else FileSystemImageSource()
        self.client = client
        self.timeout = timeout

    def resolve(self, image: str, self_contained: bool = False) -> str:
        """
        Resolve an image path or URL to a data URI, or return it as is.

        Args:
            image: data URI, http(s) URL or local path
            self_contained: Download remote images and inline them

        Returns:
            data URI on success, otherwise the original reference
        """
        if image.startswith("data:"):
            return image

        if is_remote(image):
            if self_contained:
                inlined = self._download(image)
                if inlined is not None:
                    return inlined
            return image

        inlined = self.local_source.read(image)
        return inlined if inlined is not None else image

    def _download(self, url: str) -> Optional[str]:
        try:
            if self.client is not None:
                response = self.client.get(url)
            else:
                with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
                    response = client.get(url)
        except httpx.HTTPError as e:
            _log_warning(f"Failed to download image for self-contained build: {url} ({e})")
            return None

        if not response.is_success:
            _log_warning(
                f"Failed to download image for self-contained build: {url} "
                f"(HTTP {response.status_code})"
            )
            return None

        content_type = response.headers.get("content-type") or DEFAULT_REMOTE_CONTENT_TYPE
        content_type = content_type.split(";")[0].strip()
        _log_debug(f"Inlined remote image {url} ({len(response.content)} bytes, {content_type})")
        return to_data_uri(response.content, content_type)
