"""
Document loading from files.

This module turns article sources into the editor's JSON document tree:
- Editor JSON exports (.json)
- Word documents (.docx files using python-docx)
- Plain text and Markdown (.txt, .md)
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from docx import Document

logger = logging.getLogger(__name__)

MAX_HEADING_LEVEL = 4

# Mapping of Word heading styles to editor heading levels
HEADING_STYLE_MAP = {
    "Title": 1,
    "Heading 1": 1,
    "Heading 2": 2,
    "Heading 3": 3,
    "Heading 4": 4,
}

_MARKDOWN_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*)$")
_BULLET_RE = re.compile(r"^[-*•]\s+(.*)$")
_ORDERED_RE = re.compile(r"^\d+[.)]\s+(.*)$")


class DocumentLoadError(Exception):
    """Raised when a document cannot be loaded."""
    pass


def _text_nodes(text: str) -> list[dict]:
    """Inline content for a line-broken text: text runs joined by hard breaks."""
    content: list[dict] = []
    for i, line in enumerate(text.split("\n")):
        if i:
            content.append({"type": "hardBreak"})
        if line:
            content.append({"type": "text", "text": line})
    return content


def paragraph_node(text: str) -> dict:
    node: dict[str, Any] = {"type": "paragraph"}
    content = _text_nodes(text)
    if content:
        node["content"] = content
    return node


def heading_node(text: str, level: int) -> dict:
    level = min(max(level, 1), MAX_HEADING_LEVEL)
    node: dict[str, Any] = {"type": "heading", "attrs": {"level": level}}
    content = _text_nodes(text)
    if content:
        node["content"] = content
    return node


def list_node(items: Iterable[str], ordered: bool = False) -> dict:
    return {
        "type": "orderedList" if ordered else "bulletList",
        "content": [{"type": "listItem", "content": [paragraph_node(item)]} for item in items],
    }


def doc_node(blocks: list[dict]) -> dict:
    return {"type": "doc", "content": blocks}


def _heading_level(style_name: Optional[str]) -> Optional[int]:
    """
    Map a Word style name to a heading level.

    Args:
        style_name: Word style name.

    Returns:
        Heading level (1-4), or None for non-heading styles.
    """
    if not style_name:
        return None
    if style_name in HEADING_STYLE_MAP:
        return HEADING_STYLE_MAP[style_name]
    if style_name.lower().startswith("heading"):
        try:
            level = int(style_name.lower().replace("heading", "").strip())
        except ValueError:
            return 2  # Default for unrecognized heading
        return min(level, MAX_HEADING_LEVEL)
    return None


def _list_kind(style_name: Optional[str]) -> Optional[str]:
    if not style_name:
        return None
    style_lower = style_name.lower()
    if "list number" in style_lower:
        return "orderedList"
    if "list" in style_lower or "bullet" in style_lower:
        return "bulletList"
    return None


def load_docx_document(file_path: Union[str, Path]) -> dict:
    """
    Load a Word document as an editor document tree.

    Preserves:
    - Heading hierarchy (Title and Heading 1-4; deeper headings become H4)
    - Paragraphs, with line breaks as hard breaks
    - Consecutive list-style paragraphs grouped into bullet or ordered lists

    Args:
        file_path: Path to the .docx file.

    Returns:
        Editor JSON document.

    Raises:
        DocumentLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise DocumentLoadError(f"File not found: {file_path}")

    if not path.suffix.lower() == ".docx":
        raise DocumentLoadError(f"File must be a .docx file: {file_path}")

    try:
        doc = Document(str(path))
    except Exception as e:
        raise DocumentLoadError(f"Failed to open Word document: {e}") from e

    blocks: list[dict] = []
    pending_items: list[str] = []
    pending_kind: Optional[str] = None

    def flush_list() -> None:
        nonlocal pending_kind
        if pending_items:
            blocks.append(list_node(pending_items, ordered=pending_kind == "orderedList"))
            pending_items.clear()
        pending_kind = None

    for para in doc.paragraphs:
        text = para.text.strip()
        if not text:
            continue

        style_name = para.style.name if para.style else None
        kind = _list_kind(style_name)
        if kind:
            if kind != pending_kind:
                flush_list()
                pending_kind = kind
            pending_items.append(text)
            continue

        flush_list()
        level = _heading_level(style_name)
        if level is not None:
            blocks.append(heading_node(text, level))
        else:
            blocks.append(paragraph_node(text))

    flush_list()
    logger.debug(f"Loaded {len(blocks)} blocks from {path.name}")
    return doc_node(blocks)


def document_from_text(text: str) -> dict:
    """
    Build an editor document from plain text or light Markdown.

    Blank lines separate blocks. Within a block, ``#`` lines become
    headings, ``-``/``*`` lines bullet lists, ``1.`` lines ordered lists,
    and remaining consecutive lines one paragraph joined by hard breaks.
    """
    blocks: list[dict] = []
    for chunk in re.split(r"\n\s*\n", (text or "").replace("\r\n", "\n")):
        lines: list[str] = []
        items: list[str] = []
        ordered = False

        def flush() -> None:
            if lines:
                blocks.append(paragraph_node("\n".join(lines)))
                lines.clear()
            if items:
                blocks.append(list_node(items, ordered=ordered))
                items.clear()

        for raw in chunk.split("\n"):
            line = raw.strip()
            if not line:
                continue
            heading = _MARKDOWN_HEADING_RE.match(line)
            bullet = _BULLET_RE.match(line)
            number = _ORDERED_RE.match(line)
            if heading:
                flush()
                blocks.append(heading_node(heading.group(2).strip(), len(heading.group(1))))
            elif bullet or number:
                is_ordered = number is not None
                if lines or (items and is_ordered != ordered):
                    flush()
                ordered = is_ordered
                items.append((number or bullet).group(1).strip())
            else:
                if items:
                    flush()
                lines.append(line)
        flush()
    return doc_node(blocks)


def load_text_document(file_path: Union[str, Path]) -> dict:
    path = Path(file_path)

    if not path.exists():
        raise DocumentLoadError(f"File not found: {file_path}")

    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Failed to read text file: {e}") from e

    return document_from_text(text)


def load_json_document(file_path: Union[str, Path]) -> dict:
    """
    Load an editor JSON export.

    Raises:
        DocumentLoadError: If the file is missing, not valid JSON, or not a
            ``doc`` node.
    """
    path = Path(file_path)

    if not path.exists():
        raise DocumentLoadError(f"File not found: {file_path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8-sig"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DocumentLoadError(f"Failed to read JSON document: {e}") from e

    if not isinstance(data, dict) or data.get("type") != "doc":
        raise DocumentLoadError(f'Expected an editor document with "type": "doc" in {path.name}')
    return data


def load_document(file_path: Union[str, Path]) -> dict:
    """
    Load a document from a JSON, Word, text or Markdown file.

    Automatically detects file type based on extension.

    Args:
        file_path: Path to the document.

    Returns:
        Editor JSON document.

    Raises:
        DocumentLoadError: If the file cannot be read or is invalid.
    """
    path = Path(file_path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return load_json_document(path)
    elif suffix == ".docx":
        return load_docx_document(path)
    elif suffix in (".txt", ".md"):
        return load_text_document(path)
    else:
        raise DocumentLoadError(
            f"Unsupported file format: {suffix}. Supported formats: .json, .docx, .txt, .md"
        )
