"""
Validators and small text helpers
"""
from typing import Iterable, List, Optional

from pydantic import HttpUrl, TypeAdapter, ValidationError


_http_url = TypeAdapter(HttpUrl)


def normalize_tags(tags: Optional[Iterable[str]]) -> List[str]:
    """Trim tags, drop blanks and repeats, keep first-seen order"""
    result: List[str] = []
    for tag in tags or []:
        tag = (tag or "").strip()
        if tag and tag not in result:
            result.append(tag)
    return result


def contains_text(query: str, *fields: Optional[str]) -> bool:
    """Case-insensitive substring match against any non-empty field"""
    needle = query.lower()
    return any(field and needle in field.lower() for field in fields)


def is_http_url(value: str) -> bool:
    """True for an absolute http(s) URL"""
    try:
        _http_url.validate_python(value)
    except ValidationError:
        return False
    return True
