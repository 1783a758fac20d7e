"""
Text Utilities - Normalizes scraped free text for display and scoring.

Scraped bios, LinkedIn snippets and website blurbs arrive with stray markup,
&nbsp; entities and ragged whitespace. Everything downstream (value prop
scoring, outreach drafts) reads text through clean_text() first.

Usage:
    from attendee_intel.insights.text_utils import clean_text, shorten

    clean_text("<p>We help&nbsp;coaches</p>")   # "We help coaches"
    shorten("x" * 200, 170)                     # 169 chars + "…"
"""

import re
from urllib.parse import urlparse

ELLIPSIS = "…"

_TAG_RE = re.compile(r"<[^>]+>")
_NBSP_RE = re.compile(r"&nbsp;", re.IGNORECASE)
_WS_RE = re.compile(r"\s+")
_HTTPS_RE = re.compile(r"^https://", re.IGNORECASE)


def as_text(value) -> str:
    """Stringify and trim. None becomes an empty string."""
    if value is None:
        return ""
    return str(value).strip()


def clean_text(value) -> str:
    """Strip tags and &nbsp; entities, collapse whitespace, trim.

    Accepts any value; never raises. None and empty input give "".
    """
    if value is None:
        return ""
    text = str(value)
    if not text:
        return ""
    text = _TAG_RE.sub(" ", text)
    text = _NBSP_RE.sub(" ", text)
    return _WS_RE.sub(" ", text).strip()


def shorten(value, max_chars: int = 170) -> str:
    """Hard-cut text to at most max_chars, ending with a single ellipsis.

    The cut is character based, not word aware: keep max_chars - 1 chars,
    drop trailing whitespace, then append "…".
    """
    text = _WS_RE.sub(" ", as_text(value)).strip()
    if not text:
        return ""
    if len(text) <= max_chars:
        return text
    return text[:max_chars - 1].rstrip() + ELLIPSIS


def first_name(name) -> str:
    """First whitespace-delimited token of a full name, or ""."""
    parts = as_text(name).split()
    return parts[0] if parts else ""


def initials(name) -> str:
    """Up to two uppercase initials for an avatar placeholder."""
    parts = as_text(name).split()
    if not parts:
        return "??"
    second = parts[1][0] if len(parts) > 1 else ""
    return (parts[0][0] + second).upper()


def safe_https_url(value) -> str:
    """Return the URL only if it is https; anything else gives ""."""
    url = as_text(value)
    if not url or not _HTTPS_RE.match(url):
        return ""
    return url


def display_host(url) -> str:
    """Hostname without a leading "www." for link chips; the raw text if unparseable."""
    text = as_text(url)
    if not text:
        return ""
    try:
        host = urlparse(text).hostname
    except ValueError:
        host = None
    if not host:
        return text
    return host[4:] if host.startswith("www.") else host
