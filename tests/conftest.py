"""
Shared pytest fixtures for the attendee-intel test suite.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


@pytest.fixture
def sample_record():
    """A fully enriched attendee row, as exported by the enrichment pipeline."""
    return {
        "name": "Jane Doe",
        "organization": "Acme Coaching",
        "role_raw": "Founder",
        "industry_inferred": "coaching",
        "targeting__buyer_score": "3",
        "buyer_score": 1,
        "targeting__partner_score": None,
        "partner_score": "2",
        "priority_rank": 10,
        "priority_reason": "Runs group programs and a partner page",
        "fit_label": "good_fit",
        "fit_score": 7,
        "jv_readiness_label": "high",
        "jv_readiness_score": 2,
        "value_prop": "We help you",
        "targeting__niche_statement": (
            "We help busy coaches fill their group programs "
            "so they can stop chasing one-off clients."
        ),
        "linkedin__snippet": "Founder at Acme",
        "targeting__offer_types": "coaching | courses | events",
        "website_candidates_json": "not json at all",
        "email": "jane@acme.com",
        "phone": "",
        "website": "https://www.acmecoaching.com",
        "linkedin_url": "https://linkedin.com/in/janedoe",
        "photo_url": "http://insecure.example/jane.jpg",
    }


@pytest.fixture
def sample_dataset(sample_record):
    """Three rows with uneven coverage."""
    return [
        sample_record,
        {
            "name": "Raj Patel",
            "organization": "Stagecraft Media",
            "industry_inferred": "Media",
            "fit_label": "maybe_fit",
            "priority_rank": 2,
            "offer_types": "podcast | newsletter",
            "linkedin_url": "https://linkedin.com/in/rajpatel",
            "photo_url": "https://cdn.example/raj.jpg",
        },
        {
            "name": "Lee",
            "fit_label": "not_sure",
            "priority_rank": "NaN",
            "email": "   ",
        },
    ]
