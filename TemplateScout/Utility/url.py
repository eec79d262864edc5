"""URL utilities for repository parsing."""
from urllib.parse import urlparse


def parse_repo_url(url: str) -> str:
    url = url.strip()
    if "://" in url or url.startswith("git@"):
        if url.startswith("git@"):
            _, path = url.split(":", 1)
        else:
            path = urlparse(url).path
        path = path.strip("/")
        if path.endswith(".git"):
            path = path[:-4]
        return path
    return url.strip("/")


def split_full_name(full_name: str):
    """Split `owner/repo` into its two parts."""
    parts = full_name.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Expected 'owner/repo', got: {full_name!r}")
    return parts[0], parts[1]
