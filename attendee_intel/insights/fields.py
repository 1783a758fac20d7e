"""
Field Resolution - One place for columns that exist under several names.

Enrichment runs wrote the same signal under prefixed and unprefixed keys
(targeting__buyer_score vs buyer_score). FIELD_ALIASES lists each logical
field's keys in precedence order. The first key whose value is not None wins;
an empty string counts as present, so "" under the preferred key shadows a
value under a later key.
"""

from collections.abc import Mapping

from attendee_intel.insights.text_utils import as_text

FIELD_ALIASES = {
    "buyer_score": ("targeting__buyer_score", "buyer_score"),
    "partner_score": ("targeting__partner_score", "partner_score"),
    "offer_types": ("targeting__offer_types", "offer_types"),
}


def as_record(record) -> Mapping:
    """Treat anything that is not a mapping as an empty record."""
    return record if isinstance(record, Mapping) else {}


def resolve(record, field: str):
    """Return the value for a logical field, honouring FIELD_ALIASES order."""
    record = as_record(record)
    for key in FIELD_ALIASES.get(field, (field,)):
        value = record.get(key)
        if value is not None:
            return value
    return None


def resolve_text(record, field: str) -> str:
    return as_text(resolve(record, field))


def has_contact(record) -> bool:
    """True if the record carries an email address or phone number."""
    return bool(resolve_text(record, "email") or resolve_text(record, "phone"))
