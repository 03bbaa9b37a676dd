"""
Editor document parsing and flattening.

The editor hands over its document as a JSON tree of typed nodes
(``{"type": "doc", "content": [...]}``). This module:
- Validates that tree into typed ``DocNode`` values, skipping malformed nodes
- Computes each node's size in the editor's position addressing
- Flattens the top-level blocks into ``Block`` records with absolute positions
- Derives FAQ section ranges and hard-break-aware inline offset maps

Position addressing is a fixed convention shared with the editor surface:
a text node is as long as its text (UTF-16 code units), a hard break or
horizontal rule is 1, and every other node is 2 plus its children. The
first top-level block starts at position 1.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any, Iterator, Optional

from .text_normalizer import count_occurrences
from .word_lists import FAQ_KEYWORDS

logger = logging.getLogger(__name__)

DOCUMENT_START_POSITION = 1


class NodeKind(Enum):
    """Node variants the analyzer understands."""
    DOC = "doc"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    BLOCKQUOTE = "blockquote"
    TEXT = "text"
    HARD_BREAK = "hardBreak"
    HORIZONTAL_RULE = "horizontalRule"
    OPAQUE = "opaque"  # any other typed node: sized, but carries no text

    @classmethod
    def from_type_name(cls, type_name: str) -> "NodeKind":
        for kind in cls:
            if kind.value == type_name and kind is not cls.OPAQUE:
                return kind
        return cls.OPAQUE


LEAF_KINDS = (NodeKind.HARD_BREAK, NodeKind.HORIZONTAL_RULE)
LIST_KINDS = (NodeKind.BULLET_LIST, NodeKind.ORDERED_LIST)


def utf16_length(text: str) -> int:
    """Length of a string in UTF-16 code units, as the editor measures it."""
    return len(text.encode("utf-16-le")) // 2


@dataclass(frozen=True)
class DocNode:
    """A validated node of the editor document tree."""
    kind: NodeKind
    type_name: str
    text: str = ""
    level: Optional[int] = None
    children: tuple["DocNode", ...] = ()

    @cached_property
    def size(self) -> int:
        if self.kind is NodeKind.TEXT:
            return utf16_length(self.text)
        if self.kind in LEAF_KINDS:
            return 1
        return 2 + sum(child.size for child in self.children)

    @cached_property
    def plain_text(self) -> str:
        """Concatenated text of all descendant text runs; line breaks add nothing."""
        if self.kind is NodeKind.TEXT:
            return self.text
        if self.kind is NodeKind.OPAQUE:
            return ""
        return "".join(child.plain_text for child in self.children)


def parse_node(raw: Any) -> Optional[DocNode]:
    """
    Validate a raw JSON node into a ``DocNode``.

    Args:
        raw: Decoded JSON value for one node.

    Returns:
        The parsed node, or None if the value is not a node at all
        (not a mapping, or without a string ``type``).
    """
    if not isinstance(raw, dict):
        logger.debug(f"Skipping non-object node: {type(raw).__name__}")
        return None

    type_name = raw.get("type")
    if not isinstance(type_name, str):
        logger.debug("Skipping node without a type")
        return None

    kind = NodeKind.from_type_name(type_name)

    if kind is NodeKind.TEXT:
        text = raw.get("text")
        return DocNode(kind=kind, type_name=type_name, text=text if isinstance(text, str) else "")

    level = None
    attrs = raw.get("attrs")
    if kind is NodeKind.HEADING and isinstance(attrs, dict):
        raw_level = attrs.get("level")
        if isinstance(raw_level, int) and not isinstance(raw_level, bool):
            level = raw_level

    children: list[DocNode] = []
    content = raw.get("content")
    if isinstance(content, list):
        for child in content:
            parsed = parse_node(child)
            if parsed is not None:
                children.append(parsed)

    return DocNode(kind=kind, type_name=type_name, level=level, children=tuple(children))


@dataclass(frozen=True)
class InlineText:
    """
    Text of a textblock together with the editor address of every character.

    ``addresses[i]`` is the offset of character ``i`` relative to the start of
    the block's content. Hard breaks and other inline leaves occupy addresses
    but contribute no characters.
    """
    text: str
    addresses: tuple[int, ...]
    length: int

    def span(self, start: int, end: int) -> tuple[int, int]:
        """Map a character span of ``text`` to a relative address span."""
        if start >= len(self.addresses):
            return self.length, self.length
        relative_start = self.addresses[start]
        if end <= start:
            return relative_start, relative_start
        last = min(end, len(self.addresses)) - 1
        return relative_start, self.addresses[last] + utf16_length(self.text[last])


def inline_text(node: DocNode) -> InlineText:
    """Build the text and address map of a paragraph or heading's direct children."""
    chars: list[str] = []
    addresses: list[int] = []
    offset = 0
    for child in node.children:
        if child.kind is NodeKind.TEXT:
            for ch in child.text:
                chars.append(ch)
                addresses.append(offset)
                offset += utf16_length(ch)
        else:
            offset += child.size
    return InlineText(text="".join(chars), addresses=tuple(addresses), length=offset)


@dataclass(frozen=True)
class Block:
    """A top-level block of the document with its absolute position."""
    index: int
    node: DocNode
    position: int

    @property
    def kind(self) -> NodeKind:
        return self.node.kind

    @property
    def type_name(self) -> str:
        return self.node.type_name

    @property
    def level(self) -> Optional[int]:
        return self.node.level

    @property
    def text(self) -> str:
        return self.node.plain_text

    @property
    def size(self) -> int:
        return self.node.size

    @property
    def end(self) -> int:
        return self.position + self.node.size

    @property
    def is_heading(self) -> bool:
        return self.kind is NodeKind.HEADING

    @property
    def is_paragraph(self) -> bool:
        return self.kind is NodeKind.PARAGRAPH

    @property
    def is_list(self) -> bool:
        return self.kind in LIST_KINDS

    @property
    def has_text(self) -> bool:
        return bool(self.text.strip())

    def is_heading_level(self, level: int) -> bool:
        return self.is_heading and self.level == level

    @cached_property
    def inline(self) -> InlineText:
        return inline_text(self.node)

    def absolute_span(self, start: int, end: int) -> tuple[int, int]:
        """Absolute editor span for a character span of this block's inline text."""
        relative_from, relative_to = self.inline.span(start, end)
        return self.position + 1 + relative_from, self.position + 1 + relative_to


@dataclass(frozen=True)
class FaqRange:
    start: int
    end: int

    def contains(self, position: int) -> bool:
        return self.start <= position < self.end


@dataclass
class FlatDocument:
    """The flattened block sequence every check operates on."""
    blocks: list[Block] = field(default_factory=list)
    total_size: int = DOCUMENT_START_POSITION
    root: Optional[DocNode] = None
    faq_ranges: list[FaqRange] = field(default_factory=list)

    @cached_property
    def paragraphs(self) -> list[Block]:
        return [b for b in self.blocks if b.is_paragraph]

    @cached_property
    def non_empty_paragraphs(self) -> list[Block]:
        return [b for b in self.paragraphs if b.has_text]

    @cached_property
    def headings(self) -> list[Block]:
        return [b for b in self.blocks if b.is_heading]

    @cached_property
    def lists(self) -> list[Block]:
        return [b for b in self.blocks if b.is_list]

    @cached_property
    def text_blocks(self) -> list[Block]:
        """Paragraphs and headings: the blocks whose inline text is inspected."""
        return [b for b in self.blocks if b.is_paragraph or b.is_heading]

    def headings_at(self, level: int) -> list[Block]:
        return [b for b in self.headings if b.level == level]

    def is_in_faq(self, position: int) -> bool:
        return any(r.contains(position) for r in self.faq_ranges)

    def faq_range_of(self, position: int) -> Optional[FaqRange]:
        for faq_range in self.faq_ranges:
            if faq_range.contains(position):
                return faq_range
        return None

    def position_at(self, index: int) -> int:
        """Position of the block at ``index``, or the document end past the last block."""
        if index < len(self.blocks):
            return self.blocks[index].position
        return self.total_size

    def next_heading_index(self, after: int, level: Optional[int] = None) -> int:
        """
        Index of the first heading after ``after``, optionally of an exact level.

        Returns ``len(blocks)`` when there is none.
        """
        for index in range(after + 1, len(self.blocks)):
            block = self.blocks[index]
            if block.is_heading and (level is None or block.level == level):
                return index
        return len(self.blocks)

    def first_heading_index(self) -> int:
        return self.next_heading_index(-1)

    def section(self, heading_index: int, level: Optional[int] = None) -> tuple[list[Block], int]:
        """
        Blocks following a heading up to the next heading (of ``level`` if given).

        Returns:
            Tuple of (section blocks, end index exclusive).
        """
        end = self.next_heading_index(heading_index, level)
        return self.blocks[heading_index + 1:end], end

    def introduction(self) -> list[Block]:
        """Blocks before the first heading (the whole document if it has none)."""
        return self.blocks[:self.first_heading_index()]


def _coerce_root(document: Any) -> Optional[DocNode]:
    if isinstance(document, DocNode):
        return document
    if document is None:
        return None
    return parse_node(document)


def flatten_document(document: Any) -> FlatDocument:
    """
    Flatten an editor document into positioned top-level blocks.

    Args:
        document: Editor JSON tree (``dict``), an already parsed ``DocNode``,
            or None for an empty document.

    Returns:
        FlatDocument with blocks, total size and FAQ ranges.
    """
    root = _coerce_root(document)
    flat = FlatDocument(root=root)
    if root is None:
        return flat

    position = DOCUMENT_START_POSITION
    for index, node in enumerate(root.children):
        flat.blocks.append(Block(index=index, node=node, position=position))
        position += node.size
    flat.total_size = position
    flat.faq_ranges = _find_faq_ranges(flat)

    logger.debug(
        f"Flattened document: {len(flat.blocks)} blocks, size {flat.total_size}, "
        f"{len(flat.faq_ranges)} FAQ sections"
    )
    return flat


def is_faq_heading(text: str) -> bool:
    return any(count_occurrences(text, keyword) > 0 for keyword in FAQ_KEYWORDS)


def _find_faq_ranges(flat: FlatDocument) -> list[FaqRange]:
    ranges: list[FaqRange] = []
    for index, block in enumerate(flat.blocks):
        if block.is_heading_level(2) and is_faq_heading(block.text):
            end_index = flat.next_heading_index(index, level=2)
            ranges.append(FaqRange(start=block.position, end=flat.position_at(end_index)))
    return ranges


def iter_nested_paragraphs(flat: FlatDocument) -> Iterator[tuple[DocNode, int]]:
    """
    Yield every non-empty paragraph at any depth with its absolute position.

    Paragraphs inside list items are included, in document order.
    """
    if flat.root is None:
        return

    def walk(node: DocNode, position: int) -> Iterator[tuple[DocNode, int]]:
        if node.kind is NodeKind.PARAGRAPH and node.plain_text.strip():
            yield node, position
        if node.kind is NodeKind.TEXT or node.kind in LEAF_KINDS:
            return
        child_position = position + 1
        for child in node.children:
            yield from walk(child, child_position)
            child_position += child.size

    position = DOCUMENT_START_POSITION
    for block_node in flat.root.children:
        yield from walk(block_node, position)
        position += block_node.size


def _render_textblock(node: DocNode) -> str:
    parts: list[str] = []
    for child in node.children:
        if child.kind is NodeKind.TEXT:
            parts.append(child.text)
        elif child.kind is NodeKind.HARD_BREAK:
            parts.append("\n")
    return "".join(parts)


def _collect_textblocks(node: DocNode, out: list[str]) -> None:
    if node.kind in (NodeKind.PARAGRAPH, NodeKind.HEADING):
        out.append(_render_textblock(node))
        return
    if node.kind is NodeKind.OPAQUE:
        return
    for child in node.children:
        _collect_textblocks(child, out)


def document_to_plain_text(document: Any) -> str:
    """
    Render a document as plain text the way the editor does.

    Textblocks at any depth are joined by a blank line and hard breaks
    become newlines.
    """
    root = _coerce_root(document)
    if root is None:
        return ""
    parts: list[str] = []
    for child in root.children:
        _collect_textblocks(child, parts)
    return "\n\n".join(parts)
