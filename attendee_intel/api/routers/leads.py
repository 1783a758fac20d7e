"""Lead card routes: one record, or a whole dataset with filters."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from attendee_intel.insights.lead_view import (
    build_lead_view,
    filter_records,
    list_industries,
    summarize_dataset,
)

logger = logging.getLogger("attendee_intel.api.leads")

router = APIRouter(prefix="/api/leads", tags=["leads"])


class LeadViewRequest(BaseModel):
    record: Dict[str, Any] = {}
    total: Optional[int] = None


class LeadBatchRequest(BaseModel):
    records: List[Dict[str, Any]] = []
    query: str = ""
    fit: str = "all"
    industry: str = "all"


@router.post("/view")
def lead_view(req: LeadViewRequest):
    return build_lead_view(req.record, total=req.total)


@router.post("/batch")
def lead_batch(req: LeadBatchRequest):
    """Views for every record matching the filters, plus dataset stats.

    Percentiles are relative to the full dataset, not the filtered subset.
    """
    total = len(req.records)
    matched = filter_records(req.records, query=req.query, fit=req.fit, industry=req.industry)
    logger.info("Lead batch: %d records, %d after filters", total, len(matched))
    return {
        "stats": summarize_dataset(req.records),
        "industries": list_industries(req.records),
        "showing": len(matched),
        "leads": [build_lead_view(r, total=total) for r in matched],
    }
