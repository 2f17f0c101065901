# site_splitter/processors/converters/site_entry.py
"""
Site entry helpers shared by the splitter and the combiner.

A site entry in the aggregate export looks like::

    {"compiledCss": "...", "css": "...", "id": "http://a.com/*", "js": "...",
     "libs": ["jquery"], "name": "A", "options": {"altCSS": false, ...}}

In the split form the ``css``/``js`` bodies live in sibling files and the
``.json`` file only keeps the stripped entry.
"""
import re
from typing import Any, Dict, Tuple
from site_splitter.config import Config

REQUIRED_SITE_FIELDS = ("id", "libs", "compiledCss", "options")
REQUIRED_USER_DATA_FIELDS = ("libs", "settings", "sites")

_UNSAFE_PATTERN = re.compile(Config.UNSAFE_FILE_CHARS)


def _check_fields(obj: Any, required: Tuple[str, ...]) -> Tuple[bool, str]:
    if not isinstance(obj, dict):
        return False, f"expected an object, got {type(obj).__name__}"

    missing = [key for key in required if key not in obj]
    if missing:
        return False, f"missing keys: {', '.join(missing)}"
    return True, ""


def check_site_entry(obj: Any) -> Tuple[bool, str]:
    """Structural check of a stripped site entry: (is_valid, reason)."""
    return _check_fields(obj, REQUIRED_SITE_FIELDS)


def check_user_data(obj: Any) -> Tuple[bool, str]:
    """Minimal shape check of the aggregate export: (is_valid, reason)."""
    is_valid, reason = _check_fields(obj, REQUIRED_USER_DATA_FIELDS)
    if not is_valid:
        return is_valid, reason

    if not isinstance(obj["sites"], list):
        return False, "'sites' must be a list"
    for idx, site in enumerate(obj["sites"]):
        site_ok, site_reason = check_site_entry(site)
        if not site_ok:
            return False, f"site #{idx}: {site_reason}"
        # id는 파일 이름의 원천이므로 문자열이어야 함
        if not isinstance(site["id"], str):
            return False, f"site #{idx}: 'id' must be a string"
    return True, ""


def url_to_file_name(url: str) -> str:
    return _UNSAFE_PATTERN.sub(Config.SAFE_CHAR, url)


def prefix_width(count: int) -> int:
    # 1000개까지는 3자리(000~999), 그 이상은 전체 자릿수를 함께 늘림
    return max(Config.MIN_PREFIX_WIDTH, len(str(max(count - 1, 0))))


def strip_site_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    stripped = {
        "compiledCss": entry["compiledCss"],
        "id": entry["id"],
        "libs": entry["libs"],
        "options": entry["options"],
    }
    if entry.get("name"):
        stripped["name"] = entry["name"]
    return stripped


def assemble_site_entry(stripped: Dict[str, Any], js: str = "", css: str = "") -> Dict[str, Any]:
    return {
        "compiledCss": stripped["compiledCss"],
        "css": css,
        "id": stripped["id"],
        "js": js,
        "libs": stripped["libs"],
        "name": stripped.get("name") or "",
        "options": stripped["options"],
    }
