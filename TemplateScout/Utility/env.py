"""Environment helpers (.env loading)"""
import os
import logging

logger = logging.getLogger(__name__)


def load_env_file(filepath: str = ".env") -> None:
    """Copy KEY=VALUE lines into os.environ without overriding variables already set."""
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("export "):
                    line = line[len("export "):]
                if "=" not in line:
                    continue
                key, val = line.split("=", 1)
                key = key.strip()
                val = val.strip()
                if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
                    val = val[1:-1]
                os.environ.setdefault(key, val)
    except OSError as e:
        logger.warning("Could not read %s: %s", filepath, e)
