"""Single-purpose derivation routes: tiers, percentile, value prop, outreach."""

from typing import Any, Dict, Optional, Union

from fastapi import APIRouter
from pydantic import BaseModel

from attendee_intel.insights.fields import resolve_text
from attendee_intel.insights.outreach_writer import build_outreach_draft, encode_mailto
from attendee_intel.insights.priority import priority_percentile
from attendee_intel.insights.tier_engine import classify_buyer_tier, classify_partner_tier
from attendee_intel.insights.value_prop_engine import derive_value_prop, rank_candidates

router = APIRouter(prefix="/api", tags=["insights"])

Scalar = Union[int, float, str, None]


class TierRequest(BaseModel):
    buyer_score: Optional[Scalar] = None
    partner_score: Optional[Scalar] = None


class RecordRequest(BaseModel):
    record: Dict[str, Any] = {}


@router.post("/tiers")
def tiers(req: TierRequest):
    return {
        "buyer": classify_buyer_tier(req.buyer_score).to_dict(),
        "partner": classify_partner_tier(req.partner_score).to_dict(),
    }


@router.get("/priority/percentile")
def percentile(rank: Optional[str] = None, total: Optional[str] = None):
    return {"top_percent": priority_percentile(rank, total)}


@router.post("/value-prop")
def value_prop(req: RecordRequest):
    """Chosen value prop plus the ranked candidates behind it."""
    return {
        "value_prop": derive_value_prop(req.record),
        "candidates": [c.to_dict() for c in rank_candidates(req.record)],
    }


@router.post("/outreach/draft")
def outreach_draft(req: RecordRequest):
    draft = build_outreach_draft(req.record)
    result = draft.to_dict()
    result["mailto"] = encode_mailto(resolve_text(req.record, "email"), draft.subject, draft.body)
    return result
