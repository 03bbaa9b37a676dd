"""
Keyword configuration loading from files and pasted text.

This module handles ingestion of the keyword configuration from:
- CSV files
- Excel files (.xlsx, .xls)
- Plain-text keyword blocks (.txt files or pasted text)
"""

import re
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .models import Keywords


class KeywordLoadError(Exception):
    """Raised when keyword loading fails."""
    pass


# Common column name variations for keyword data
KEYWORD_COLUMN_VARIANTS = ["keyword", "keywords", "term", "phrase", "الكلمة", "الكلمة_المفتاحية"]
ROLE_COLUMN_VARIANTS = ["role", "type", "kind", "النوع", "الدور"]

ROLE_ALIASES = {
    "primary": "primary",
    "main": "primary",
    "رئيسية": "primary",
    "الرئيسية": "primary",
    "secondary": "secondary",
    "synonym": "secondary",
    "مرادف": "secondary",
    "مرادفات": "secondary",
    "ثانوية": "secondary",
    "lsi": "lsi",
    "company": "company",
    "brand": "company",
    "الشركة": "company",
    "اسم الشركة": "company",
}

# Lines made only of these characters split a pasted block into sections
_SECTION_SEPARATOR_RE = re.compile(r"^\s*[-/\\=.+*]+\s*$", re.MULTILINE)


def _normalize_column_name(name: str) -> str:
    """Normalize column name for matching."""
    return str(name).lower().strip().replace(" ", "_").replace("-", "_")


def _find_column(df: pd.DataFrame, variants: list[str]) -> Optional[str]:
    """
    Find a column in the DataFrame matching one of the variant names.

    Args:
        df: The DataFrame to search.
        variants: List of possible column name variants.

    Returns:
        The actual column name if found, None otherwise.
    """
    normalized_columns = {_normalize_column_name(col): col for col in df.columns}

    for variant in variants:
        normalized = _normalize_column_name(variant)
        if normalized in normalized_columns:
            return normalized_columns[normalized]

    return None


def _lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def parse_keyword_block(text: str) -> Keywords:
    """
    Distribute a pasted block of keywords into a configuration.

    The block is split into sections by separator lines (a line made only
    of ``- / \\ = . + *``):
    - Section 1: the first line is the primary keyword, the rest are secondaries
    - Section 2: one LSI term per line
    - Section 3: the first line is the company name

    Args:
        text: Pasted keyword block.

    Returns:
        Keywords parsed from the block. Empty text yields empty keywords.
    """
    if not text or not text.strip():
        return Keywords()

    parts = _SECTION_SEPARATOR_RE.split(text)
    head = _lines(parts[0]) if parts else []
    lsi = _lines(parts[1]) if len(parts) > 1 else []
    company = _lines(parts[2]) if len(parts) > 2 else []

    return Keywords(
        primary=head[0] if head else "",
        secondaries=tuple(head[1:]),
        company=company[0] if company else "",
        lsi=tuple(lsi),
    )


def _resolve_role(value) -> Optional[str]:
    if pd.isna(value):
        return None
    return ROLE_ALIASES.get(str(value).strip().lower())


def _parse_keyword_dataframe(df: pd.DataFrame) -> Keywords:
    """
    Parse a DataFrame with role and keyword columns into a configuration.

    Rows without a recognised role are treated as LSI terms. The first
    primary and the first company row win; secondaries and LSI keep file
    order.

    Raises:
        KeywordLoadError: If the frame is empty or has no keyword column.
    """
    if df.empty:
        raise KeywordLoadError("Keyword file is empty")

    keyword_col = _find_column(df, KEYWORD_COLUMN_VARIANTS)
    if keyword_col is None:
        raise KeywordLoadError(
            f"No keyword column found. Expected one of: {', '.join(KEYWORD_COLUMN_VARIANTS)}. "
            f"Found columns: {', '.join(str(c) for c in df.columns)}"
        )
    role_col = _find_column(df, ROLE_COLUMN_VARIANTS)

    primary = ""
    company = ""
    secondaries: list[str] = []
    lsi: list[str] = []

    for _, row in df.iterrows():
        phrase = row[keyword_col]
        if pd.isna(phrase) or not str(phrase).strip():
            continue
        phrase = str(phrase).strip()

        role = _resolve_role(row[role_col]) if role_col else None
        if role == "primary" and not primary:
            primary = phrase
        elif role == "company" and not company:
            company = phrase
        elif role == "secondary":
            secondaries.append(phrase)
        elif role in (None, "lsi"):
            lsi.append(phrase)

    keywords = Keywords(primary=primary, secondaries=tuple(secondaries), company=company, lsi=tuple(lsi))
    if keywords.is_empty:
        raise KeywordLoadError("No valid keywords found in file")
    return keywords


def load_keywords_from_csv(file_path: Union[str, Path]) -> Keywords:
    """
    Load a keyword configuration from a CSV file.

    Raises:
        KeywordLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise KeywordLoadError(f"File not found: {file_path}")

    try:
        df = pd.read_csv(path, encoding="utf-8-sig")
    except Exception as e:
        raise KeywordLoadError(f"Failed to read CSV file: {e}") from e

    return _parse_keyword_dataframe(df)


def load_keywords_from_excel(file_path: Union[str, Path], sheet_name: Optional[str] = None) -> Keywords:
    """
    Load a keyword configuration from an Excel file.

    Args:
        file_path: Path to the Excel file (.xlsx or .xls).
        sheet_name: Optional sheet name to read from. Defaults to first sheet.

    Raises:
        KeywordLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise KeywordLoadError(f"File not found: {file_path}")

    try:
        if sheet_name:
            df = pd.read_excel(path, sheet_name=sheet_name)
        else:
            df = pd.read_excel(path)
    except Exception as e:
        raise KeywordLoadError(f"Failed to read Excel file: {e}") from e

    return _parse_keyword_dataframe(df)


def load_keywords_from_text(file_path: Union[str, Path]) -> Keywords:
    path = Path(file_path)

    if not path.exists():
        raise KeywordLoadError(f"File not found: {file_path}")

    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise KeywordLoadError(f"Failed to read keyword file: {e}") from e

    keywords = parse_keyword_block(text)
    if keywords.is_empty:
        raise KeywordLoadError("Keyword file is empty")
    return keywords


def load_keywords(file_path: Union[str, Path], sheet_name: Optional[str] = None) -> Keywords:
    """
    Load a keyword configuration from a CSV, Excel or text file.

    Automatically detects file type based on extension.

    Args:
        file_path: Path to the keyword file.
        sheet_name: Optional sheet name for Excel files.

    Returns:
        Keywords configuration.

    Raises:
        KeywordLoadError: If the file cannot be read or is invalid.
    """
    path = Path(file_path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        return load_keywords_from_csv(path)
    elif suffix in (".xlsx", ".xls"):
        return load_keywords_from_excel(path, sheet_name)
    elif suffix == ".txt":
        return load_keywords_from_text(path)
    else:
        raise KeywordLoadError(
            f"Unsupported file format: {suffix}. Supported formats: .csv, .xlsx, .xls, .txt"
        )
