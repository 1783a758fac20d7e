"""
Attendee Intel - FastAPI Backend
Stateless JSON API over the insights functions: lead views, tiers, value
propositions and outreach drafts for attendee records posted by the caller.

Run: attendee-intel-api  (or uvicorn attendee_intel.api.app:app --reload)
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from attendee_intel import __version__, config
from attendee_intel.api.routers import insights, leads
from attendee_intel.logging_config import setup_logging

setup_logging()
logger = logging.getLogger("attendee_intel.api")

app = FastAPI(
    title="Attendee Intel",
    description="Tiers, value propositions and outreach drafts for enriched attendee records.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ─── ROUTERS ─────────────────────────────────────────────────
app.include_router(leads.router)
app.include_router(insights.router)


@app.get("/api/health")
def health():
    return {
        "status": "healthy",
        "version": __version__,
        "config_errors": config.validate(),
    }


def main():
    import uvicorn
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    main()
