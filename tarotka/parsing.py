# -*- coding: utf-8 -*-
"""
parsing.py — Turn the reading service's answer into one meaning per position.

The upstream model does not reliably follow the requested layout, so the
answer is interpreted through a fixed order of layers:

1. a pre-segmented list with exactly one section per position is mapped by index;
2. a list of any other size (except one) degrades to placeholders;
3. a single combined block for a single position is used whole;
4. a combined block is scanned for position labels (bold labels first, then
   plain text) and sliced between consecutive labels;
5. a combined block without any label is split on "---" delimiter lines.

Anything that cannot be resolved becomes MEANING_UNAVAILABLE. Inline
**bold** markup is kept in the returned strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import structlog

logger = structlog.get_logger(__name__)

MEANING_UNAVAILABLE = "Význam nedostupný"

_BOLD_RE = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)
_DELIMITER_RE = re.compile(r"^\s*-{3,}\s*$", re.MULTILINE)
_TRAILER_RE = re.compile(r"\*\*\s*(CO TO ZNAMENÁ|Celkově|Můj tip|Realita)", re.IGNORECASE)
_LEADING_PUNCT = " \t\r\n:–—-"


@dataclass(frozen=True)
class LabelRule:
    """
    Upper-case substrings that mark the start of one position's section.

    Variants are ordered from the exact label to the loosest phrase; a later
    variant is only tried when no earlier one occurs in the text.
    """
    key: str
    variants: Tuple[str, ...]


SELF_RULE = LabelRule("self", ("TY –", "TY:", "TVOJE ENERGIE", "TVÁ ENERGIE"))
PARTNER_RULE = LabelRule("partner", (
    "PARTNER –", "PARTNER:", "ON/ONA –", "ON/ONA:", "JEHO ENERGIE", "ONO ENERGIE",
))
RELATIONSHIP_RULE = LabelRule("relationship", (
    "VAŠE POUTO –", "VAŠE POUTO:", "VÁŠ VZTAH –", "VÁŠ VZTAH:",
    "TVŮJ VZTAH –", "TVŮJ VZTAH:", "CO JE MEZI VÁMI", "MEZI VÁMI",
))

# Position labels of the relationship spread and the rule that locates each.
KNOWN_POSITION_RULES = {
    "TY": SELF_RULE,
    "PARTNER": PARTNER_RULE,
    "ON/ONA": PARTNER_RULE,
    "VAŠE POUTO": RELATIONSHIP_RULE,
    "VÁŠ VZTAH": RELATIONSHIP_RULE,
    "TVŮJ VZTAH": RELATIONSHIP_RULE,
    "VZTAH": RELATIONSHIP_RULE,
}


def rule_for(label: str) -> LabelRule:
    """Known variants for the self/partner/relationship positions, derived ones otherwise."""
    key = label.strip().upper()
    if key in KNOWN_POSITION_RULES:
        return KNOWN_POSITION_RULES[key]
    return LabelRule(key.lower(), (f"{key}:", f"{key} –", f"{key} -"))


Section = Union[str, Mapping[str, Any]]
Response = Union[str, Sequence[Section]]


# =========================
# Public API
# =========================

def parse(response: Response, expected_positions: Sequence[str]) -> List[str]:
    """
    Return one meaning per expected position, in the same order.

    Args:
        response: the combined answer text, or a list of sections (strings or
                  mappings with a "text" key).
        expected_positions: position labels of the spread, e.g. ["Ty", "Partner", "Vaše pouto"].
    """
    n = len(expected_positions)
    if n == 0:
        return []

    if isinstance(response, str):
        return parse_combined(response, expected_positions)

    sections = list(response)
    if len(sections) == n:
        return [_section_text(s) or MEANING_UNAVAILABLE for s in sections]
    if len(sections) == 1:
        return parse_combined(_section_text(sections[0]), expected_positions)

    logger.warning("reading_sections_mismatch", expected=n, received=len(sections))
    return [MEANING_UNAVAILABLE] * n


def parse_combined(text: str, expected_positions: Sequence[str]) -> List[str]:
    """Interpret a single combined block of text."""
    n = len(expected_positions)
    text = (text or "").strip()
    if not text:
        return [MEANING_UNAVAILABLE] * n
    if n == 1:
        return [text]

    rules = [rule_for(p) for p in expected_positions]
    hits = locate_labels(text, rules)
    if any(h is not None for h in hits):
        meanings = _slice_by_labels(text, hits)
    else:
        meanings = _split_on_delimiters(text, n)

    if MEANING_UNAVAILABLE in meanings:
        logger.info(
            "reading_positions_unresolved",
            positions=[p for p, m in zip(expected_positions, meanings) if m == MEANING_UNAVAILABLE],
        )
    return meanings


def split_bold(text: str) -> List[Tuple[str, bool]]:
    """Split text into (segment, is_bold) pairs for rendering; markers are removed."""
    parts: List[Tuple[str, bool]] = []
    for part in re.split(r"(\*\*.*?\*\*)", text):
        if not part:
            continue
        if len(part) >= 4 and part.startswith("**") and part.endswith("**"):
            parts.append((part[2:-2], True))
        else:
            parts.append((part, False))
    return parts


# =========================
# Label scanning
# =========================

def locate_labels(text: str, rules: Iterable[LabelRule]) -> List[Optional[Tuple[int, int]]]:
    """
    Find the (start, end) character span of each position's label.

    Labels are searched in position order, each one only after the previous
    label that was found. Within a position the variants are tried in their
    listed order; for each variant a bold fragment containing it wins over a
    plain-text occurrence.
    """
    upper = text.upper()
    # Plain-text offsets are only valid while upper-casing keeps the length.
    plain_ok = len(upper) == len(text)
    bold_spans = [(m.start(), m.end(), m.group(1).upper()) for m in _BOLD_RE.finditer(text)]

    hits: List[Optional[Tuple[int, int]]] = []
    pos = 0
    for rule in rules:
        hit = None
        for variant in rule.variants:
            hit = _find_variant(variant, upper, bold_spans, pos, plain_ok)
            if hit is not None:
                break
        hits.append(hit)
        if hit is not None:
            pos = hit[1]
    return hits


def _find_variant(
    variant: str,
    upper: str,
    bold_spans: Sequence[Tuple[int, int, str]],
    pos: int,
    plain_ok: bool,
) -> Optional[Tuple[int, int]]:
    for start, end, content in bold_spans:
        if start >= pos and variant in content:
            return start, end
    if plain_ok:
        i = upper.find(variant, pos)
        if i >= 0:
            return i, i + len(variant)
    return None


def _slice_by_labels(text: str, hits: Sequence[Optional[Tuple[int, int]]]) -> List[str]:
    """
    Cut each position's span from its label to the next label found.

    A position resolves only when its own label and every earlier one were
    found; a gap makes the rest of the order unreliable.
    """
    meanings: List[str] = []
    chain_intact = True
    for i, hit in enumerate(hits):
        if hit is None:
            chain_intact = False
        if not chain_intact or hit is None:
            meanings.append(MEANING_UNAVAILABLE)
            continue

        next_start = next((h[0] for h in hits[i + 1:] if h is not None), None)
        if next_start is None:
            span = _TRAILER_RE.split(text[hit[1]:], maxsplit=1)[0]
        else:
            span = text[hit[1]:next_start]
        meanings.append(_clean_span(span) or MEANING_UNAVAILABLE)
    return meanings


def _split_on_delimiters(text: str, n: int) -> List[str]:
    parts = [p.strip() for p in _DELIMITER_RE.split(text)]
    parts = [p for p in parts if p]
    if len(parts) == n:
        return parts
    return [MEANING_UNAVAILABLE] * n


def _clean_span(span: str) -> str:
    span = span.lstrip(_LEADING_PUNCT).rstrip()
    while span.endswith("---"):
        span = span[:-3].rstrip()
    # A lone closing marker left over from the label that follows.
    if span.endswith("**") and span.count("**") % 2 == 1:
        span = span[:-2].rstrip()
    if span.startswith("**") and span.count("**") % 2 == 1:
        span = span[2:].lstrip(_LEADING_PUNCT)
    return span


def _section_text(section: Section) -> str:
    if isinstance(section, str):
        return section.strip()
    if isinstance(section, Mapping):
        return str(section.get("text") or "").strip()
    return ""
