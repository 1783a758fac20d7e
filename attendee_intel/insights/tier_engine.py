"""
Tier Engine - Maps bounded heuristic scores to display tiers.

Scores come from upstream enrichment as loosely-typed values. Each scale is a
TierScale table: levels are checked top-down with >=, so values above the
ceiling land in the top tier (strong signal, exact magnitude unknown) rather
than being clamped. Missing data maps to "Unknown", never to the "None" tier
that a genuine 0 gets.

Scales:
- Buyer intent (0-3):      None / Light / Medium / Strong
- Partner strength (0-4):  None / Light / Medium / Strong / Excellent

Also builds the fit, readiness and certainty badges shown next to them.

Usage:
    from attendee_intel.insights.tier_engine import classify_buyer_tier

    classify_buyer_tier("3").label    # "Strong"
    classify_buyer_tier("NaN").label  # "Unknown"
"""

from dataclasses import dataclass, asdict

from attendee_intel.insights.numeric import to_int_or_none
from attendee_intel.insights.text_utils import as_text


@dataclass(frozen=True)
class Tier:
    """A display tier: label, severity tone, and hover tip."""
    label: str
    tone: str
    tip: str = ""

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class TierLevel:
    minimum: int
    label: str
    tone: str


@dataclass(frozen=True)
class TierScale:
    name: str
    ceiling: int
    levels: tuple  # TierLevel, highest minimum first
    none_tone: str = "slate"
    unknown_tone: str = "slate"


BUYER_SCALE = TierScale(
    name="Buyer intent",
    ceiling=3,
    levels=(
        TierLevel(3, "Strong", "emerald"),
        TierLevel(2, "Medium", "blue"),
        TierLevel(1, "Light", "amber"),
    ),
)

PARTNER_SCALE = TierScale(
    name="Partner strength",
    ceiling=4,
    levels=(
        TierLevel(4, "Excellent", "emerald"),
        TierLevel(3, "Strong", "blue"),
        TierLevel(2, "Medium", "amber"),
        TierLevel(1, "Light", "slate"),
    ),
)


def classify_tier(value, scale: TierScale) -> Tier:
    """Classify a raw score on the given scale."""
    score = to_int_or_none(value)
    if score is None:
        return Tier("Unknown", scale.unknown_tone, f"{scale.name}: unknown (missing data)")
    for level in scale.levels:
        if score >= level.minimum:
            return Tier(
                level.label, level.tone,
                f"{scale.name}: {level.label.lower()} ({level.minimum}/{scale.ceiling})",
            )
    return Tier("None", scale.none_tone, f"{scale.name}: none (0/{scale.ceiling})")


def classify_buyer_tier(value) -> Tier:
    return classify_tier(value, BUYER_SCALE)


def classify_partner_tier(value) -> Tier:
    return classify_tier(value, PARTNER_SCALE)


# ─── FIT / READINESS / CERTAINTY BADGES ─────────────────────

FIT_LABELS = {
    "good_fit": ("Strong ICP match", "emerald"),
    "maybe_fit": ("Possible ICP match", "amber"),
    "not_sure": ("Insufficient signals", "slate"),
}

READINESS_TONES = {"high": "emerald", "medium": "amber"}

CERTAINTY_TONES = {
    "high": "emerald",
    "medium": "blue",
    "low": "amber",
    "unknown": "slate",
}


def classify_fit(fit_label, fit_score=None) -> Tier:
    """ICP fit badge. Unrecognised labels read as "Insufficient signals"."""
    label, tone = FIT_LABELS.get(as_text(fit_label), FIT_LABELS["not_sure"])
    score = to_int_or_none(fit_score)
    shown = "–" if score is None else score
    return Tier(
        label, tone,
        f"ICP match (heuristic): {shown}/9. This is a lightweight signal score, "
        "not a verified fact. Use Priority Rank for ordering.",
    )


def classify_readiness(readiness_label, readiness_score=None) -> Tier:
    """JV readiness badge. A blank label reads as "low"."""
    label = as_text(readiness_label).lower() or "low"
    tip = ("JV readiness (0–3) is a lightweight signal score based on presence of "
           "partner/affiliate/podcast/newsletter/contact pages and other "
           "collaboration signals.")
    score_text = as_text(readiness_score)
    if score_text:
        tip += f" Score: {score_text}/3."
    return Tier(label, READINESS_TONES.get(label, "slate"), tip)


def classify_certainty(level) -> Tier:
    """Certainty pill for a verified field. Unrecognised levels read as "unknown"."""
    text = as_text(level) or "unknown"
    return Tier(text, CERTAINTY_TONES.get(text, "slate"))
