# Insights - pure derivation functions over one attendee record.
#
# Key modules:
#   text_utils.py        - Text normalizer, truncation, name/url helpers
#   numeric.py           - Lenient integer coercion (zero or unknown)
#   fields.py            - Field alias precedence for multi-named columns
#   tier_engine.py       - Buyer/partner/fit/readiness tier badges
#   value_prop_engine.py - Candidate scoring and value proposition selection
#   outreach_writer.py   - Outreach email draft and mailto link
#   priority.py          - "Top N%" priority percentile
#   lead_view.py         - Everything a lead card renders, plus dataset stats
#   error_handler.py     - Logged fallbacks for composite steps

from attendee_intel.insights.outreach_writer import OutreachDraft, build_outreach_draft
from attendee_intel.insights.priority import priority_percentile
from attendee_intel.insights.tier_engine import Tier, classify_buyer_tier, classify_partner_tier
from attendee_intel.insights.value_prop_engine import derive_value_prop

__all__ = [
    "OutreachDraft",
    "Tier",
    "build_outreach_draft",
    "classify_buyer_tier",
    "classify_partner_tier",
    "derive_value_prop",
    "priority_percentile",
]
