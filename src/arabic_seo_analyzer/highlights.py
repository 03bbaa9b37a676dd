"""
Highlight spans for the editor surface.

The analysis report only carries positions. This module turns those
positions into flat span lists an editor can apply as marks, and answers
"which checks flag the text under the cursor". Applying the marks stays
with the caller.
"""

import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Union

from .document import flatten_document
from .models import CheckResult, FullAnalysis, StructureAnalysis, ViolatingItem
from .text_normalizer import find_term_spans

PRIMARY = "primary"
SECTION = "section"


@dataclass(frozen=True)
class HighlightSpan:
    from_pos: int
    to_pos: int
    message: str
    kind: str = PRIMARY

    def to_dict(self) -> dict:
        return {"from": self.from_pos, "to": self.to_pos, "message": self.message, "kind": self.kind}


def spans_for_check(check: CheckResult) -> list[HighlightSpan]:
    """
    Primary spans for every violating item, followed by its section span.

    Items with an empty span are skipped.
    """
    spans: list[HighlightSpan] = []
    for item in check.violating_items or []:
        if item.to_pos > item.from_pos:
            spans.append(HighlightSpan(item.from_pos, item.to_pos, item.message))
        if item.has_section and item.section_to > item.section_from:
            spans.append(HighlightSpan(item.section_from, item.section_to, item.message, SECTION))
    return spans


def grouped_spans(check: CheckResult, pattern: Union[str, re.Pattern]) -> dict[str, list[HighlightSpan]]:
    """
    Group a check's primary spans by a value captured from each message.

    The first capture group of ``pattern`` (or the whole match when it has
    none) keys the group; items whose message does not match are grouped
    under their full message. Used to give each inconsistent spelling set
    or repeated phrase its own colour.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    groups: dict[str, list[HighlightSpan]] = defaultdict(list)
    for span in spans_for_check(check):
        if span.kind != PRIMARY:
            continue
        match = regex.search(span.message)
        if match is None:
            key = span.message
        else:
            key = match.group(1) if regex.groups else match.group(0)
        groups[key.strip()].append(span)
    return dict(groups)


def violations_at(analysis: Union[FullAnalysis, StructureAnalysis], pos: int) -> list[tuple[str, ViolatingItem]]:
    """
    Checks whose primary span covers an editor position.

    Returns:
        ``(check title, item)`` pairs in catalogue order, one per
        distinct (title, span start).
    """
    structure = analysis.structure_analysis if isinstance(analysis, FullAnalysis) else analysis
    seen: set[tuple[str, int]] = set()
    found: list[tuple[str, ViolatingItem]] = []
    for check in structure:
        for item in check.violating_items or []:
            if not item.from_pos <= pos < item.to_pos:
                continue
            key = (check.title, item.from_pos)
            if key in seen:
                continue
            seen.add(key)
            found.append((check.title, item))
    return found


def term_spans(document: Any, term: str) -> list[HighlightSpan]:
    """Every whole-word occurrence of ``term`` in the document's paragraphs and headings."""
    spans: list[HighlightSpan] = []
    if not term or not term.strip():
        return spans
    for block in flatten_document(document).text_blocks:
        for start, end in find_term_spans(block.inline.text, term):
            from_pos, to_pos = block.absolute_span(start, end)
            spans.append(HighlightSpan(from_pos, to_pos, term))
    return spans
