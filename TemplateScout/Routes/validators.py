from typing import Dict, Any, Optional, Tuple

from TemplateScout.Utility.url import parse_repo_url, split_full_name


def _optional_int(data: Dict[str, Any], key: str, low: int, high: int) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < low or value > high:
        raise ValueError(f"{key} must be integer between {low} and {high}")
    return value


def validate_discover_payload(data: Dict[str, Any]) -> Tuple[Optional[int], Optional[int], Optional[str]]:
    max_templates = _optional_int(data, "max_templates", 1, 500)
    min_stars = _optional_int(data, "min_stars", 0, 10_000_000)
    github_token = data.get("github_token")
    return max_templates, min_stars, github_token


def validate_analyze_payload(data: Dict[str, Any]) -> Tuple[str, Optional[str]]:
    target = data.get("target")
    if not target or not isinstance(target, str):
        raise ValueError("Field 'target' is required")
    full_name = parse_repo_url(target)
    split_full_name(full_name)
    return full_name, data.get("github_token")
