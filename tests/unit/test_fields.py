"""
Unit tests for field alias resolution.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from attendee_intel.insights.fields import FIELD_ALIASES, has_contact, resolve, resolve_text


def test_prefixed_field_wins():
    record = {"targeting__buyer_score": 3, "buyer_score": 1}
    assert resolve(record, "buyer_score") == 3


def test_null_prefixed_field_falls_through():
    record = {"targeting__partner_score": None, "partner_score": "2"}
    assert resolve(record, "partner_score") == "2"


def test_empty_string_shadows_later_alias():
    """Only None falls through; an empty string is a present value."""
    record = {"targeting__offer_types": "", "offer_types": "books"}
    assert resolve(record, "offer_types") == ""


def test_unaliased_field_reads_key():
    assert resolve({"name": "Jane"}, "name") == "Jane"
    assert resolve({}, "name") is None
    assert "name" not in FIELD_ALIASES


def test_non_mapping_record_is_empty():
    assert resolve(None, "name") is None
    assert resolve(["not", "a", "dict"], "name") is None
    assert resolve_text(None, "name") == ""


def test_has_contact():
    assert has_contact({"email": "jane@acme.com"})
    assert has_contact({"phone": " 555-0100 "})
    assert not has_contact({"email": "   ", "phone": None})
    assert not has_contact({})
