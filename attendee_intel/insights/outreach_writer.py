"""
Outreach Writer - Deterministic first-touch email draft per attendee.

Every data-bearing clause comes straight from the record and is dropped when
its field is empty; nothing is guessed or replaced with a placeholder. The
only fixed text is the ask, the CTA and the sign-off, whose sender name and
event label are operator settings from config.

Message structure:
1. Greeting (first name or "there")
2. Identity line: event list, organization, role, offer types
3. Value prop quote (hard-cut to SNIPPET_MAX_CHARS)
4. Ask
5. CTA
6. Proof links (site, LinkedIn) if known
7. Sign-off

Usage:
    from attendee_intel.insights.outreach_writer import build_outreach_draft

    draft = build_outreach_draft({"name": "Jane Doe", "organization": "Acme"})
    draft.subject  # "Quick question, Jane — partnerships"
"""

from dataclasses import dataclass, asdict
from urllib.parse import quote

from attendee_intel import config
from attendee_intel.insights.fields import resolve_text
from attendee_intel.insights.text_utils import as_text, first_name, shorten
from attendee_intel.insights.value_prop_engine import derive_value_prop, split_offer_types

ASK = (
    "I run a JV matchmaking workflow for creators/consultants who grow via "
    "partnerships instead of paid ads, and I’m reaching out to a few "
    "speakers/attendees to see who’s open to collaborations in 2026."
)

CTA = (
    "If you’re open, would you be up for a 10–15 min chat to see whether "
    "there’s a good-fit JV partner match (or if it’s a “not now”)?"
)

# encodeURIComponent leaves these unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class OutreachDraft:
    subject: str
    body: str

    def to_dict(self):
        return asdict(self)


def build_subject(first: str) -> str:
    if first:
        return f"Quick question, {first} — partnerships"
    return "Quick question — partnerships"


def build_identity_line(record, event_label: str) -> str:
    """Where we saw them, plus org, role and offer types when known."""
    org = resolve_text(record, "organization")
    role = resolve_text(record, "role_raw")
    offers = split_offer_types(resolve_text(record, "offer_types"))

    line = f"I saw you on the {event_label} attendee list"
    if org:
        line += f" and came across {org}"
    if role:
        line += f" — {role}"
    if offers:
        line += f" (looks like you offer {' + '.join(offers)})"
    return line + "."


def build_proof_links(record) -> list:
    links = []
    website = resolve_text(record, "website")
    linkedin = resolve_text(record, "linkedin_url")
    if website:
        links.append(f"Site: {website}")
    if linkedin:
        links.append(f"LinkedIn: {linkedin}")
    return links


def build_outreach_draft(record, sender: str = None, event_label: str = None) -> OutreachDraft:
    """Compose subject and body strictly from fields present in the record.

    Args:
        record: Attendee record.
        sender: Sign-off name (default config.OUTREACH_SENDER).
        event_label: Event the attendee list came from (default config.OUTREACH_EVENT_LABEL).
    """
    sender = sender or config.OUTREACH_SENDER
    event_label = event_label or config.OUTREACH_EVENT_LABEL
    first = first_name(resolve_text(record, "name"))

    intro = [build_identity_line(record, event_label)]
    snippet = shorten(derive_value_prop(record), config.SNIPPET_MAX_CHARS)
    if snippet:
        intro.append(f"From your site: “{snippet}”.")

    paragraphs = [
        f"Hi {first}," if first else "Hi there,",
        "\n".join(intro),
        ASK,
        CTA,
    ]
    links = build_proof_links(record)
    if links:
        paragraphs.append("\n".join(links))
    paragraphs.append(f"Best,\n{sender}")

    return OutreachDraft(subject=build_subject(first), body="\n\n".join(paragraphs))


def encode_mailto(email, subject: str, body: str) -> str:
    """mailto: link with subject and body prefilled, or "" without an email."""
    address = as_text(email)
    if not address:
        return ""
    s = quote(subject or "", safe=_URI_COMPONENT_SAFE)
    b = quote(body or "", safe=_URI_COMPONENT_SAFE)
    return f"mailto:{address}?subject={s}&body={b}"
