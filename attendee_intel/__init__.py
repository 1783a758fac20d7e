# Attendee Intel - derivation core for enriched conference-attendee records.
# Turns noisy scraped/LLM-enriched rows into tiers, a value proposition and an
# outreach draft. Presentation layers call into this package per record.
#
# Key modules:
#   config.py          - Environment-derived settings
#   logging_config.py  - One-time logging setup
#   insights/          - Pure derivation functions (tiers, value prop, outreach)
#   api/               - FastAPI surface over the insights functions

__version__ = "1.0.0"
