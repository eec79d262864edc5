"""Authentication helpers"""
import os
from typing import Mapping, Optional


def get_github_token(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    environ = os.environ if environ is None else environ
    return environ.get("GITHUB_TOKEN") or environ.get("GH_TOKEN")
