"""Discovery settings sourced from the environment."""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from TemplateScout.Utility.auth import get_github_token

logger = logging.getLogger(__name__)

DEFAULT_MAX_TEMPLATES = 20
DEFAULT_MIN_STARS = 100
DEFAULT_OUTPUT_PATH = "template-analysis.json"


def _read_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", key, raw, default)
        return default


@dataclass
class DiscoveryConfig:
    """
    max_templates: cap on distinct records collected in one run (MAX_TEMPLATES)
    min_stars: star threshold for the keyword queries (MIN_STARS)
    github_token: bearer credential (GITHUB_TOKEN, then GH_TOKEN)
    output_path: snapshot file, overwritten on every run
    """
    max_templates: int = DEFAULT_MAX_TEMPLATES
    min_stars: int = DEFAULT_MIN_STARS
    github_token: Optional[str] = None
    output_path: str = DEFAULT_OUTPUT_PATH

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DiscoveryConfig":
        environ = os.environ if environ is None else environ
        return cls(
            max_templates=_read_int(environ, "MAX_TEMPLATES", DEFAULT_MAX_TEMPLATES),
            min_stars=_read_int(environ, "MIN_STARS", DEFAULT_MIN_STARS),
            github_token=get_github_token(environ),
        )
