"""
Centralized Configuration - Single source of truth for all settings.

All environment variables are read here, validated, and exposed as module-level
constants. Other modules import from here instead of reading os.environ directly.

Usage:
    from attendee_intel.config import VALUE_PROP_MIN_SCORE, LOG_LEVEL
"""

import os
import sys


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    if not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        _errors.append(f"{name} must be an integer, got '{raw}'")
        return default


_errors = []

# ─── PATHS ───────────────────────────────────────────────────

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# ─── VALUE PROPOSITION ───────────────────────────────────────

# Lowest candidate score that still beats the structured fallback sentence.
# Low on purpose: the length bonus alone clears it.
VALUE_PROP_MIN_SCORE = _int_env("AI_VALUE_PROP_MIN_SCORE", 2)
SNIPPET_MAX_CHARS = _int_env("AI_SNIPPET_MAX_CHARS", 170)

# ─── OUTREACH ────────────────────────────────────────────────

OUTREACH_SENDER = os.environ.get("OUTREACH_SENDER", "Joe")
OUTREACH_EVENT_LABEL = os.environ.get("OUTREACH_EVENT_LABEL", "Feb 2026")

# ─── API ─────────────────────────────────────────────────────

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = _int_env("API_PORT", 8000)
CORS_ORIGINS = os.environ.get(
    "AI_CORS_ORIGINS", "http://localhost:3000,http://localhost:8000"
).split(",")

# ─── LOGGING ─────────────────────────────────────────────────

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.environ.get("LOG_FORMAT", "text")  # "text" or "json"
LOG_FILE = os.environ.get("LOG_FILE", "")  # empty = stdout only

# ─── VALIDATION ──────────────────────────────────────────────

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_VALID_LOG_FORMATS = {"text", "json"}

if LOG_LEVEL not in _VALID_LOG_LEVELS:
    _errors.append(f"LOG_LEVEL must be one of {_VALID_LOG_LEVELS}, got '{LOG_LEVEL}'")

if LOG_FORMAT not in _VALID_LOG_FORMATS:
    _errors.append(f"LOG_FORMAT must be one of {_VALID_LOG_FORMATS}, got '{LOG_FORMAT}'")

if SNIPPET_MAX_CHARS < 2:
    _errors.append(f"AI_SNIPPET_MAX_CHARS must be at least 2, got {SNIPPET_MAX_CHARS}")

if not OUTREACH_SENDER.strip():
    _errors.append("OUTREACH_SENDER must not be blank")

if _errors:
    for e in _errors:
        print(f"[config] ERROR: {e}", file=sys.stderr)
    # Don't crash during import - callers may only need part of the config


def validate(strict: bool = False) -> list:
    """Validate all configuration settings.

    Args:
        strict: If True, raise ValueError on any errors.

    Returns:
        List of error messages (empty if all valid).
    """
    if strict and _errors:
        raise ValueError(f"Configuration errors: {'; '.join(_errors)}")
    return list(_errors)


def print_config():
    """Print current configuration (safe - no secrets)."""
    print("=" * 50)
    print("Attendee Intel Configuration")
    print("=" * 50)
    print(f"  VALUE_PROP_MIN_SCORE: {VALUE_PROP_MIN_SCORE}")
    print(f"  SNIPPET_MAX_CHARS:    {SNIPPET_MAX_CHARS}")
    print(f"  OUTREACH_SENDER:      {OUTREACH_SENDER}")
    print(f"  OUTREACH_EVENT_LABEL: {OUTREACH_EVENT_LABEL}")
    print(f"  API_HOST:             {API_HOST}")
    print(f"  API_PORT:             {API_PORT}")
    print(f"  LOG_LEVEL:            {LOG_LEVEL}")
    print(f"  LOG_FORMAT:           {LOG_FORMAT}")
    print(f"  PROJECT_ROOT:         {PROJECT_ROOT}")
    print("=" * 50)
