"""
Unit tests for the outreach draft builder.

Sections:
  1. Subject lines
  2. Body assembly (only fields we have)
  3. Value prop truncation
  4. mailto links
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from attendee_intel.insights.outreach_writer import (
    ASK,
    CTA,
    OutreachDraft,
    build_identity_line,
    build_outreach_draft,
    encode_mailto,
)

JANE_MIN = {"name": "Jane Doe", "organization": "Acme", "email": "jane@acme.com"}

JANE_FULL = {
    "name": "Jane Doe",
    "organization": "Acme",
    "role_raw": "Founder",
    "targeting__offer_types": "coaching | courses",
    "website": "https://acme.com",
    "linkedin_url": "https://linkedin.com/in/jane",
    "value_prop": "We help wellness brands land podcast interviews every month.",
}


# ═══════════════════════════════════════════════════════════════
# 1. SUBJECT
# ═══════════════════════════════════════════════════════════════

def test_subject_with_first_name():
    draft = build_outreach_draft(JANE_MIN)
    assert draft.subject == "Quick question, Jane — partnerships"


def test_subject_without_name():
    assert build_outreach_draft({}).subject == "Quick question — partnerships"
    assert build_outreach_draft({"name": "   "}).subject == "Quick question — partnerships"


# ═══════════════════════════════════════════════════════════════
# 2. BODY
# ═══════════════════════════════════════════════════════════════

def test_full_body_layout():
    draft = build_outreach_draft(JANE_FULL, sender="Joe", event_label="Feb 2026")
    expected = (
        "Hi Jane,\n\n"
        "I saw you on the Feb 2026 attendee list and came across Acme — Founder "
        "(looks like you offer coaching + courses).\n"
        "From your site: “We help wellness brands land podcast interviews every month.”.\n\n"
        f"{ASK}\n\n"
        f"{CTA}\n\n"
        "Site: https://acme.com\n"
        "LinkedIn: https://linkedin.com/in/jane\n\n"
        "Best,\nJoe"
    )
    assert draft.body == expected


def test_empty_record_has_only_fixed_fragments():
    draft = build_outreach_draft({}, sender="Joe", event_label="Feb 2026")
    assert draft.body.startswith("Hi there,\n\n")
    assert ASK in draft.body
    assert CTA in draft.body
    assert "I saw you on the Feb 2026 attendee list." in draft.body
    assert "came across" not in draft.body
    assert "From your site" not in draft.body
    assert "Site:" not in draft.body
    assert "LinkedIn:" not in draft.body
    assert draft.body.endswith("Best,\nJoe")


def test_no_placeholders_for_missing_fields():
    body = build_outreach_draft(JANE_MIN).body
    for token in ("None", "undefined", "[", "{"):
        assert token not in body


def test_identity_line_variants():
    assert build_identity_line({}, "Feb 2026") == "I saw you on the Feb 2026 attendee list."
    assert build_identity_line({"role_raw": "Author"}, "Spring Summit") == (
        "I saw you on the Spring Summit attendee list — Author."
    )
    assert build_identity_line({"offer_types": "books|courses"}, "X") == (
        "I saw you on the X attendee list (looks like you offer books + courses)."
    )


def test_only_present_links_are_listed():
    body = build_outreach_draft({"linkedin_url": "https://linkedin.com/in/x"}).body
    assert "LinkedIn: https://linkedin.com/in/x" in body
    assert "Site:" not in body


def test_fallback_sentence_is_quoted():
    body = build_outreach_draft({"organization": "Acme", "industry_inferred": "wellness"}).body
    assert "From your site: “in wellness via Acme.”." in body


def test_sender_and_event_from_config(monkeypatch):
    from attendee_intel import config
    monkeypatch.setattr(config, "OUTREACH_SENDER", "Priya")
    monkeypatch.setattr(config, "OUTREACH_EVENT_LABEL", "Mar 2026")
    body = build_outreach_draft({}).body
    assert body.endswith("Best,\nPriya")
    assert "Mar 2026 attendee list" in body


# ═══════════════════════════════════════════════════════════════
# 3. TRUNCATION
# ═══════════════════════════════════════════════════════════════

def test_long_value_prop_is_cut_to_170():
    value_prop = "We help " + "a" * 192  # 200 chars
    body = build_outreach_draft({"value_prop": value_prop}).body
    snippet = "We help " + "a" * 161 + "…"
    assert len(snippet) == 170
    assert f"“{snippet}”." in body


def test_draft_to_dict():
    assert OutreachDraft("s", "b").to_dict() == {"subject": "s", "body": "b"}


# ═══════════════════════════════════════════════════════════════
# 4. MAILTO
# ═══════════════════════════════════════════════════════════════

def test_mailto_encoding():
    link = encode_mailto("jane@acme.com", "Hi there", "a&b\nc")
    assert link == "mailto:jane@acme.com?subject=Hi%20there&body=a%26b%0Ac"


def test_mailto_keeps_uri_component_safe_chars():
    link = encode_mailto("x@y.com", "it's (fine)!", "")
    assert link == "mailto:x@y.com?subject=it's%20(fine)!&body="


def test_mailto_encodes_unicode():
    link = encode_mailto("x@y.com", "Quick question — partnerships", "")
    assert "%E2%80%94" in link


def test_mailto_requires_email():
    assert encode_mailto("", "s", "b") == ""
    assert encode_mailto(None, "s", "b") == ""
    assert encode_mailto("   ", "s", "b") == ""
