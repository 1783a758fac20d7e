"""
Value Proposition Engine - Picks one truthful value statement per attendee.

Candidate text comes from several enrichment fields of uneven quality: the
LLM-written value_prop, the targeting niche statement, the LinkedIn snippet,
and website snippets buried in website_candidates_json (sometimes valid JSON,
sometimes a legacy double-escaped string). Each candidate is normalized and
scored with the rules in ValuePropRules; the best one wins if it clears the
acceptance threshold. Otherwise a sentence is assembled from structured
fields only (offer types, industry, organization, role).

Scoring rules, in order:
1. Empty text                    -> empty_score (disqualified)
2. Cookie/privacy/terms boilerplate -> junk_score (disqualified, stops here)
3. Length band bonus/penalty
4. "we help / i help / helping"  -> +3;  "for / so you can / so that / to" -> +1
5. Short text opening with "we help you" / "helping you" -> -4
6. Text ending in "we help you(?)"                        -> -6

Usage:
    from attendee_intel.insights.value_prop_engine import derive_value_prop

    derive_value_prop(record)  # "We help coaches fill their programs ..."
"""

import json
import re
from dataclasses import dataclass, asdict
from typing import List, Optional

from attendee_intel import config
from attendee_intel.insights.fields import as_record, resolve, resolve_text
from attendee_intel.insights.text_utils import clean_text
from attendee_intel.logging_config import get_component_logger

logger = get_component_logger("value_prop")


# ─── SCORING RULES ──────────────────────────────────────────

@dataclass(frozen=True)
class ValuePropRules:
    """Every weight, phrase list and threshold the candidate scorer uses."""
    empty_score: int = -999
    junk_score: int = -50
    # Anything at or below this is categorically unusable
    disqualify_below: int = -40
    junk_phrases: tuple = (
        "cookie", "privacy", "terms", "consent", "captcha",
        "unsubscribe", "all rights reserved",
    )
    # (min_len, max_len or None, points)
    length_bands: tuple = (
        (60, 220, 4),
        (35, 59, 2),
        (221, None, -2),
    )
    help_pattern: str = r"\b(we help|i help|helping)\b"
    help_bonus: int = 3
    purpose_pattern: str = r"\b(for|so you can|so that|to)\b"
    purpose_bonus: int = 1
    generic_opener_pattern: str = r"^(we help you|helping you)\b"
    generic_opener_max_len: int = 55
    generic_opener_penalty: int = -4
    generic_tail_pattern: str = r"we help you\??$"
    generic_tail_penalty: int = -6


DEFAULT_RULES = ValuePropRules()


def _length_points(length: int, rules: ValuePropRules) -> int:
    for low, high, points in rules.length_bands:
        if length >= low and (high is None or length <= high):
            return points
    return 0


def score_value_prop(text, rules: ValuePropRules = DEFAULT_RULES) -> int:
    """Score a candidate's suitability as an outward-facing value statement.

    Higher is better. rules.empty_score and rules.junk_score are sentinels
    for unusable text.
    """
    cleaned = clean_text(text)
    if not cleaned:
        return rules.empty_score
    lower = cleaned.lower()

    if any(phrase in lower for phrase in rules.junk_phrases):
        return rules.junk_score

    length = len(cleaned)
    score = _length_points(length, rules)

    if re.search(rules.help_pattern, cleaned, re.IGNORECASE):
        score += rules.help_bonus
    if re.search(rules.purpose_pattern, cleaned, re.IGNORECASE):
        score += rules.purpose_bonus

    if (re.search(rules.generic_opener_pattern, cleaned, re.IGNORECASE)
            and length < rules.generic_opener_max_len):
        score += rules.generic_opener_penalty
    if re.search(rules.generic_tail_pattern, cleaned, re.IGNORECASE):
        score += rules.generic_tail_penalty

    return score


def is_disqualified(score: int, rules: ValuePropRules = DEFAULT_RULES) -> bool:
    return score <= rules.disqualify_below


# ─── WEBSITE CANDIDATES JSON ────────────────────────────────
# Stage 1 is a strict JSON parse. Stage 2 pulls the first "snippet" value out
# of the raw string with patterns for the encodings seen in older exports.

_SNIPPET_PATTERNS = (
    # {"snippet": "..."}
    re.compile(r'"snippet"\s*:\s*"([^"]+)"'),
    # {\"snippet\": \"...\"} (JSON embedded in a JSON string)
    re.compile(r'\\"snippet\\"\s*:\s*\\"([^"\\]+)\\"'),
    # {""snippet"": ""...""} (CSV-quoted JSON)
    re.compile(r'""snippet""\s*:\s*""([^"\\]+)""'),
)


def parse_json_safe(value):
    """Strict JSON stage. Returns the decoded value, or None if unparseable.

    Non-string values are assumed to be decoded already and pass through.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        return value
    text = value.strip()
    if not text:
        return None
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.debug("website_candidates_json is not valid JSON: %s", e)
        return None


def extract_snippet_from_candidates_json(value) -> str:
    """Tolerant pattern stage. Returns the first snippet found, cleaned, or ""."""
    if not value or not isinstance(value, str):
        return ""
    for pattern in _SNIPPET_PATTERNS:
        match = pattern.search(value)
        if match and match.group(1):
            return clean_text(match.group(1))
    return ""


def first_parsed_snippet(value):
    """Snippet of the first element when the field parses as a JSON array."""
    parsed = parse_json_safe(value)
    if isinstance(parsed, list) and parsed and isinstance(parsed[0], dict):
        return parsed[0].get("snippet")
    return None


def website_snippet_candidates(value) -> list:
    """Both stages' snippets for website_candidates_json, in collection order."""
    snippets = [first_parsed_snippet(value)]
    extracted = extract_snippet_from_candidates_json(value)
    if extracted:
        snippets.append(extracted)
    return snippets


# ─── CANDIDATE COLLECTION AND SELECTION ─────────────────────

CANDIDATE_FIELDS = ("value_prop", "targeting__niche_statement", "linkedin__snippet")


@dataclass
class ValuePropCandidate:
    source: str
    text: str
    score: int

    def to_dict(self):
        return asdict(self)


def collect_candidates(record, rules: ValuePropRules = DEFAULT_RULES) -> List[ValuePropCandidate]:
    """Normalized, scored candidates in collection order. Empty ones are dropped."""
    record = as_record(record)
    raw = [(name, record.get(name)) for name in CANDIDATE_FIELDS]

    website_json = record.get("website_candidates_json")
    parsed_snippet, *extracted = website_snippet_candidates(website_json)
    raw.append(("website_candidates_json", parsed_snippet))
    for snippet in extracted:
        raw.append(("website_candidates_json:pattern", snippet))

    candidates = []
    for source, value in raw:
        text = clean_text(value)
        if not text:
            continue
        candidates.append(ValuePropCandidate(source, text, score_value_prop(text, rules)))
    return candidates


def rank_candidates(record, rules: ValuePropRules = DEFAULT_RULES) -> List[ValuePropCandidate]:
    """Candidates best-first. Equal scores keep collection order."""
    return sorted(collect_candidates(record, rules), key=lambda c: c.score, reverse=True)


def split_offer_types(offer_types) -> list:
    """Split a "coaching | courses | events" field into its parts."""
    text = offer_types if isinstance(offer_types, str) else clean_text(offer_types)
    return [part.strip() for part in text.split("|") if part.strip()]


def summarize_offer_types(offer_types) -> str:
    """First two offer types joined with " + "."""
    return " + ".join(split_offer_types(offer_types)[:2])


def build_fallback_sentence(record) -> str:
    """A sentence built only from structured fields, or "" if none exist."""
    offer = summarize_offer_types(resolve(record, "offer_types") or "")
    industry = resolve_text(record, "industry_inferred")
    org = resolve_text(record, "organization")
    role = resolve_text(record, "role_raw")

    bits = []
    if offer:
        bits.append(f"Offers {offer}")
    if industry:
        bits.append(f"in {industry}")
    if org:
        bits.append(f"via {org}")
    if not bits and role:
        bits.append(role)

    return " ".join(bits) + "." if bits else ""


def derive_value_prop(record, rules: ValuePropRules = DEFAULT_RULES,
                      threshold: Optional[int] = None) -> str:
    """Best candidate text if it clears the threshold, else the fallback sentence.

    Args:
        record: Attendee record (any mapping; missing fields are fine).
        rules: Scoring rules (DEFAULT_RULES unless tuning).
        threshold: Minimum accepted score (default config.VALUE_PROP_MIN_SCORE).
    """
    if threshold is None:
        threshold = config.VALUE_PROP_MIN_SCORE

    usable = [c for c in rank_candidates(record, rules) if not is_disqualified(c.score, rules)]
    if usable and usable[0].score >= threshold:
        return usable[0].text

    fallback = build_fallback_sentence(record)
    logger.debug(
        "No candidate cleared threshold %s (best=%s); using structured fallback",
        threshold, usable[0].score if usable else None,
        extra={"record_name": resolve_text(record, "name")},
    )
    return fallback
