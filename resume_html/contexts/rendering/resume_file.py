"""
Resume File Loading

Reads JSON Resume documents from .json or .yaml/.yml files into plain dicts.
"""

import json
from pathlib import Path
from typing import Any, Dict

import yaml
from omegaconf import OmegaConf

from resume_html.contexts.rendering.exceptions import InvalidResumeError

SUPPORTED_SUFFIXES = {".json", ".yaml", ".yml"}


def load_resume(path: Path) -> Dict[str, Any]:
    """
    Load a resume document.

    Args:
        path: Path to a .json, .yaml or .yml file

    Returns:
        Resume as a plain dict

    Raises:
        InvalidResumeError: If the file is missing, has an unsupported extension,
                            is not valid YAML, or does not contain a mapping
        json.JSONDecodeError: If a .json file is not valid JSON
    """
    path = Path(path)
    if not path.is_file():
        raise InvalidResumeError("Resume file not found", path)

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise InvalidResumeError(
            f"Unsupported resume file type '{suffix}' (expected one of {sorted(SUPPORTED_SUFFIXES)})",
            path,
        )

    if suffix == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
    else:
        try:
            data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        except yaml.YAMLError as e:
            raise InvalidResumeError("Resume file is not valid YAML", path) from e

    if not isinstance(data, dict):
        raise InvalidResumeError("Resume document must be a mapping at the top level", path)

    return data
