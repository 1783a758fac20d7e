"""
Lead View - Everything a lead card shows for one attendee, in one dict.

Presentation layers render records as cards: identity, contact chips, tier
badges, value proposition and the outreach draft. build_lead_view() runs each
derivation step independently through safe_execute(), so a failure in one
step leaves that field empty instead of losing the card.

Also dataset-level helpers for the dashboard header: summary counts, the
industry filter options, and search/filter over a list of records.
"""

from typing import Iterable, List, Optional

from attendee_intel.insights.error_handler import safe_execute
from attendee_intel.insights.fields import as_record, has_contact, resolve, resolve_text
from attendee_intel.insights.numeric import to_int_or_none
from attendee_intel.insights.outreach_writer import OutreachDraft, build_outreach_draft, encode_mailto
from attendee_intel.insights.priority import priority_percentile
from attendee_intel.insights.text_utils import display_host, initials, safe_https_url
from attendee_intel.insights.tier_engine import (
    Tier,
    classify_buyer_tier,
    classify_certainty,
    classify_fit,
    classify_partner_tier,
    classify_readiness,
)
from attendee_intel.insights.value_prop_engine import derive_value_prop, split_offer_types

CERTAINTY_FIELDS = {
    "website": "certainty__website",
    "email": "certainty__email",
    "phone": "certainty__phone",
    "linkedin": "certainty__linkedin",
    "photo": "certainty__photo",
    "value_prop": "certainty__value_prop",
}

SEARCH_FIELDS = (
    "name", "organization", "role_raw", "targeting__niche_statement",
    "offer_types", "priority_reason",
)

_EMPTY_TIER = Tier("Unknown", "slate")
_EMPTY_DRAFT = OutreachDraft(subject="", body="")


def _contacts(record) -> dict:
    website = resolve_text(record, "website")
    return {
        "email": resolve_text(record, "email"),
        "phone": resolve_text(record, "phone"),
        "website": website,
        "website_host": display_host(website),
        "linkedin_url": resolve_text(record, "linkedin_url"),
    }


def _raw_scores(record) -> dict:
    return {
        "fit_score": to_int_or_none(resolve(record, "fit_score")),
        "buyer_score": to_int_or_none(resolve(record, "buyer_score")),
        "partner_score": to_int_or_none(resolve(record, "partner_score")),
        "readiness_score": to_int_or_none(resolve(record, "jv_readiness_score")),
    }


def build_lead_view(record, total: Optional[int] = None) -> dict:
    """Derive every display field for one record.

    Args:
        record: Attendee record.
        total: Number of records in the dataset, for the "top N%" figure.
    """
    record = as_record(record)
    name = resolve_text(record, "name")

    def step(phase, fn, *args, fallback=None):
        return safe_execute(fn, args=args, phase=phase, record_name=name, fallback=fallback)

    draft = step("outreach", build_outreach_draft, record, fallback=_EMPTY_DRAFT)
    email = resolve_text(record, "email")

    return {
        "name": name,
        "initials": initials(name),
        "organization": resolve_text(record, "organization"),
        "role": resolve_text(record, "role_raw"),
        "industry": resolve_text(record, "industry_inferred"),
        "photo_url": safe_https_url(resolve(record, "photo_url")),
        "has_contact": has_contact(record),
        "contacts": _contacts(record),
        "priority_rank": to_int_or_none(resolve(record, "priority_rank")),
        "priority_reason": resolve_text(record, "priority_reason"),
        "top_percent": step("priority", priority_percentile, resolve(record, "priority_rank"), total),
        "buyer_tier": step("tiers", classify_buyer_tier, resolve(record, "buyer_score"),
                           fallback=_EMPTY_TIER).to_dict(),
        "partner_tier": step("tiers", classify_partner_tier, resolve(record, "partner_score"),
                             fallback=_EMPTY_TIER).to_dict(),
        "fit": step("tiers", classify_fit, resolve(record, "fit_label"), resolve(record, "fit_score"),
                    fallback=_EMPTY_TIER).to_dict(),
        "readiness": step("tiers", classify_readiness, resolve(record, "jv_readiness_label"),
                          resolve(record, "jv_readiness_score"), fallback=_EMPTY_TIER).to_dict(),
        "certainty": {
            key: classify_certainty(record.get(column)).to_dict()
            for key, column in CERTAINTY_FIELDS.items()
        },
        "scores": _raw_scores(record),
        "value_prop": step("value_prop", derive_value_prop, record, fallback=""),
        "offer_types": split_offer_types(resolve_text(record, "offer_types")),
        "outreach": draft.to_dict(),
        "mailto": encode_mailto(email, draft.subject, draft.body) if draft.body else "",
    }


# ─── DATASET HELPERS ────────────────────────────────────────

def summarize_dataset(records: Iterable) -> dict:
    """Header counts: fit labels and contact coverage."""
    rows = [as_record(r) for r in records or []]
    fit_labels = [resolve_text(r, "fit_label") for r in rows]
    return {
        "total": len(rows),
        "good_fit": fit_labels.count("good_fit"),
        "maybe_fit": fit_labels.count("maybe_fit"),
        "not_sure": fit_labels.count("not_sure"),
        "with_email": sum(1 for r in rows if resolve_text(r, "email")),
        "with_linkedin": sum(1 for r in rows if resolve_text(r, "linkedin_url")),
        "with_photo": sum(1 for r in rows if resolve_text(r, "photo_url")),
    }


def list_industries(records: Iterable) -> List[str]:
    """Distinct non-empty industries, sorted case-insensitively."""
    found = {resolve_text(as_record(r), "industry_inferred") for r in records or []}
    return sorted((i for i in found if i), key=str.lower)


def _search_blob(record) -> str:
    return " | ".join(resolve_text(record, f).lower() for f in SEARCH_FIELDS)


def filter_records(records: Iterable, query: str = "", fit: str = "all",
                   industry: str = "all") -> list:
    """Records matching a free-text query plus exact fit/industry filters.

    "all" disables a filter. The query is a case-insensitive substring match
    over name, organization, role, niche statement, offer types and priority
    reason.
    """
    q = (query or "").strip().lower()
    matched = []
    for record in records or []:
        record = as_record(record)
        if fit != "all" and resolve_text(record, "fit_label") != fit:
            continue
        if industry != "all" and resolve_text(record, "industry_inferred") != industry:
            continue
        if q and q not in _search_blob(record):
            continue
        matched.append(record)
    return matched
