"""
Conclusion section checks.

The conclusion is the section under the last H2, provided that heading
names itself a conclusion. Its paragraphs are also excluded from the
generic body paragraph length rule.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from .checks import get_status, make_result, presence_result
from .document import Block, FlatDocument
from .models import AnalysisStatus, CheckResult
from .text_normalizer import LETTER, contains_term, normalize_term, term_pattern, word_count
from .word_lists import CONCLUSION_INDICATOR_WORDS, CONCLUSION_KEYWORDS

NO_CONCLUSION = "لا يوجد قسم خاتمة"

_DIGIT_RE = re.compile(r"\d")
_FIRST_LETTER_RE = re.compile(LETTER)


@dataclass
class ConclusionSection:
    heading: Block
    blocks: list[Block] = field(default_factory=list)

    @property
    def text(self) -> str:
        return " ".join(b.text for b in self.blocks)

    @property
    def paragraphs(self) -> list[Block]:
        return [b for b in self.blocks if b.is_paragraph and b.has_text]

    @property
    def word_count(self) -> int:
        return word_count(self.text)

    @property
    def has_list(self) -> bool:
        return any(b.is_list for b in self.blocks)

    @property
    def has_number(self) -> bool:
        return bool(_DIGIT_RE.search(self.text))


def is_conclusion_heading(text: str) -> bool:
    return any(contains_term(text, keyword) for keyword in CONCLUSION_KEYWORDS)


def find_conclusion_section(flat: FlatDocument) -> Optional[ConclusionSection]:
    """The section under the last H2 when that H2 is a conclusion heading."""
    h2s = flat.headings_at(2)
    if not h2s or not is_conclusion_heading(h2s[-1].text):
        return None
    heading = h2s[-1]
    return ConclusionSection(heading=heading, blocks=flat.blocks[heading.index + 1:])


def leading_indicator(text: str) -> Optional[str]:
    """The conclusion indicator word the text opens with, ignoring leading punctuation."""
    normalized = normalize_term(text)
    first = _FIRST_LETTER_RE.search(normalized)
    if first is None:
        return None
    lead = normalized[first.start():]
    for word in CONCLUSION_INDICATOR_WORDS:
        if term_pattern(normalize_term(word)).match(lead):
            return word
    return None


def check_last_h2_is_conclusion(flat: FlatDocument) -> CheckResult:
    h2s = flat.headings_at(2)
    found = bool(h2s) and is_conclusion_heading(h2s[-1].text)
    return presence_result(
        "عنوان الخاتمة",
        found,
        "يجب أن يكون",
        "آخر عنوان مستوى ثاني في المقال يجب أن يكون الخاتمة باستخدام إحدى الكلمات التالية.",
        ", ".join(CONCLUSION_KEYWORDS),
        present="نعم",
        absent="لا",
    )


def check_conclusion_paragraph(conclusion: Optional[ConclusionSection]) -> CheckResult:
    title = "فقرة الخاتمة"
    description = "الفقرة الأولى بعد عنوان الخاتمة يجب أن تبدأ بكلمة دالة على الخاتمة. الكلمات المتاحة:"
    required = "وجود كلمة دالة على الخاتمة"
    details = ", ".join(CONCLUSION_INDICATOR_WORDS)

    if conclusion is None:
        return make_result(title, AnalysisStatus.FAIL, NO_CONCLUSION, required, 0, description, details)
    if not conclusion.paragraphs:
        return make_result(title, AnalysisStatus.FAIL, "لا توجد فقرة بعد العنوان", required, 0, description, details)

    found = leading_indicator(conclusion.paragraphs[0].text)
    if found:
        return make_result(title, AnalysisStatus.PASS, found, required, 1, description, details)
    return make_result(title, AnalysisStatus.FAIL, "0", required, 0, description, details)


def check_conclusion_word_count(conclusion: Optional[ConclusionSection]) -> CheckResult:
    title = "طول الخاتمة"
    description = "يجب أن يتراوح طول قسم الخاتمة بين 50 و 100 كلمة."
    required = "50-100 كلمة"
    if conclusion is None:
        return make_result(title, AnalysisStatus.FAIL, NO_CONCLUSION, required, 0, description)

    words = conclusion.word_count
    status = get_status(words, 50, 100, 45, 105)
    progress = {AnalysisStatus.PASS: 1, AnalysisStatus.WARN: 0.5}.get(status, 0)
    return make_result(title, status, f"{words} كلمة", required, progress, description)


def check_conclusion_has_number(conclusion: Optional[ConclusionSection]) -> CheckResult:
    title = "أرقام بالخاتمة"
    description = "يجب أن يحتوي قسم الخاتمة على رقم واحد على الأقل."
    required = "وجود رقم واحد على الأقل"
    if conclusion is None:
        return make_result(title, AnalysisStatus.FAIL, NO_CONCLUSION, required, 0, description)
    return presence_result(title, conclusion.has_number, required, description)


def check_conclusion_has_list(conclusion: Optional[ConclusionSection]) -> CheckResult:
    title = "قائمة الخاتمة"
    description = "يجب أن يحتوي قسم الخاتمة على قائمة نقطية أو رقمية واحدة على الأقل."
    required = "وجود قائمة واحدة على الأقل"
    if conclusion is None:
        return make_result(title, AnalysisStatus.FAIL, NO_CONCLUSION, required, 0, description)
    return presence_result(title, conclusion.has_list, required, description)
