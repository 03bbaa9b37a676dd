"""
Paragraph and sentence level checks.

Covers article length, introduction paragraphs, body paragraph and sentence
length, list lead-ins, punctuation and spacing, and word repetition inside
and across paragraphs. Spans are always reported against the original
(un-normalized) block text.
"""

import re
from typing import Iterable, Optional

from .checks import (
    GOOD,
    ViolationCollector,
    block_item,
    get_status,
    in_warn_margin,
    make_result,
    presence_result,
    text_item,
)
from .config import AnalysisConfig
from .document import Block, FlatDocument, iter_nested_paragraphs
from .models import AnalysisStatus, CheckResult, ViolatingItem
from .text_normalizer import (
    iter_sentence_matches,
    iter_words,
    normalize,
    normalize_term,
    sentence_count,
    word_count,
)
from .word_lists import DAY_ORDINALS, DUPLICATE_WORDS_EXCLUSION_LIST

WORD_COUNT_TITLE = "عدد الكلمات"
MIN_ARTICLE_WORDS = 800
MIN_TOUR_WORDS = 1100
WORDS_PER_TOUR_DAY = 200
TOUR_BASE_WORDS = 900

_DURATION_RE = re.compile(r"(\d+)\s+(?:يوم|أيام)")
_DAY_HEADING_RE = re.compile(
    r"اليوم\s+(?:\d+|" + "|".join(re.escape(o) for o in DAY_ORDINALS) + r")",
    re.IGNORECASE,
)


def count_tour_days(plain_text: str, headings: Iterable[Block]) -> int:
    """
    Number of days of a tour program.

    An explicit "N days" mention wins; otherwise distinct "Day N" headings
    are counted.
    """
    match = _DURATION_RE.search(plain_text or "")
    if match:
        return int(match.group(1))
    days = set()
    for heading in headings:
        day = _DAY_HEADING_RE.search(heading.text)
        if day:
            days.add(normalize(day.group(0).strip()))
    return len(days)


def check_word_count(
    flat: FlatDocument, plain_text: str, total_words: int, config: AnalysisConfig
) -> CheckResult:
    if not config.is_tour_program:
        return make_result(
            WORD_COUNT_TITLE,
            get_status(total_words, MIN_ARTICLE_WORDS, float("inf"), 600, MIN_ARTICLE_WORDS - 1),
            total_words,
            f"> {MIN_ARTICLE_WORDS}",
            min(total_words / MIN_ARTICLE_WORDS, 1),
            "المقال يجب أن يحتوي على 800 كلمة على الأقل للتقييم الأمثل.",
        )

    days = count_tour_days(plain_text, flat.headings)
    minimum = max(MIN_TOUR_WORDS, days * WORDS_PER_TOUR_DAY + TOUR_BASE_WORDS) if days else MIN_TOUR_WORDS
    basis = f"{days} يوم/أيام تم اكتشافها" if days else "قاعدة عامة"
    return make_result(
        WORD_COUNT_TITLE,
        get_status(total_words, minimum, float("inf"), minimum * 0.8, minimum - 1),
        total_words,
        f"> {minimum}",
        min(total_words / minimum, 1),
        f"لبرنامج سياحي، عدد الكلمات الأدنى هو {minimum} بناءً على {basis}. المعادلة: عدد الأيام * 200 + 900.",
    )


def _intro_paragraph_result(
    title: str,
    paragraph: Block,
    max_sentences: int,
    required: str,
    description: str,
) -> CheckResult:
    words = word_count(paragraph.text)
    sentences = sentence_count(paragraph.text)
    current = f"{words} كلمة, {sentences} جمل"

    if 2 <= sentences <= max_sentences:
        status = get_status(words, 30, 60, 25, 65)
    else:
        status = AnalysisStatus.FAIL

    if status is AnalysisStatus.PASS:
        return make_result(title, status, current, required, 1, description)
    progress = 0.5 if status is AnalysisStatus.WARN else 0
    return make_result(
        title, status, current, required, progress, description,
        violating_items=[block_item(paragraph, f"الحالي: {current}")],
    )


def check_summary_paragraph(flat: FlatDocument) -> CheckResult:
    """The first paragraph: 30-60 words and 2-4 sentences."""
    title = "الفقرة التلخيصية"
    description = "الفقرة الأولى يجب أن تكون موجزة وتعطي نظرة عامة، بطول 30-60 كلمة وجملتين إلى أربع جمل."
    if not flat.non_empty_paragraphs:
        return make_result(title, AnalysisStatus.FAIL, "لا يوجد", "30-60 كلمة", 0, description)
    return _intro_paragraph_result(
        title, flat.non_empty_paragraphs[0], 4, "30-60 كلمة, 2-4 جمل", description,
    )


def check_second_paragraph(flat: FlatDocument) -> CheckResult:
    """The second introduction paragraph: 30-60 words and 2-3 sentences."""
    title = "الفقرة الثانية"
    description = "الفقرة الثانية في المقدمة يجب أن تكون قصيرة ومباشرة، بطول 30-60 كلمة وجملتين إلى ثلاث جمل."
    required = "30-60 كلمة, 2-3 جمل"
    intro = [b for b in flat.introduction() if b.is_paragraph and b.has_text]
    if len(intro) < 2:
        return make_result(title, AnalysisStatus.FAIL, "لا يوجد فقرة ثانية في المقدمة", required, 0, description)
    return _intro_paragraph_result(title, intro[1], 3, required, description)


def check_paragraph_length(flat: FlatDocument, conclusion_paragraphs: Iterable[Block] = ()) -> CheckResult:
    """
    Body paragraphs: 40-80 words and 2-4 sentences.

    Introduction paragraphs and conclusion paragraphs are not body
    paragraphs. A five-word miss is a warning when the sentence rule holds.
    """
    required = "2-4 جمل (40-80 كلمة)"
    excluded = {b.position for b in flat.introduction() if b.is_paragraph}
    excluded.update(b.position for b in conclusion_paragraphs)
    body = [p for p in flat.non_empty_paragraphs if p.position not in excluded]

    collector = ViolationCollector()
    for paragraph in body:
        words = word_count(paragraph.text)
        sentences = sentence_count(paragraph.text)
        sentences_met = 2 <= sentences <= 4
        if sentences_met and 40 <= words <= 80:
            continue
        collector.add(
            block_item(paragraph, f"الحالي: {words} كلمة, {sentences} جمل"),
            warn=sentences_met and in_warn_margin(words, 40, 80),
        )

    return collector.result(
        "طول الفقرات",
        required,
        len(body),
        "معظم فقرات المحتوى يجب أن تتكون من 2-4 جمل (40-80 كلمة) لتكون سهلة القراءة.",
        passed_required=f"كل الفقرات تلتزم بـ: {required}",
    )


MAX_SENTENCE_WORDS = 25


def check_sentence_length(flat: FlatDocument) -> CheckResult:
    title = "طول الجمل"
    description = "يجب أن تكون الجمل قصيرة وسهلة الفهم، وألا تتجاوز 25 كلمة."
    required = f"< {MAX_SENTENCE_WORDS} كلمة"

    items = []
    total = 0
    for paragraph in flat.non_empty_paragraphs:
        text = paragraph.inline.text
        for match in iter_sentence_matches(text):
            total += 1
            sentence = match.group(0)
            stripped = sentence.lstrip()
            words = word_count(stripped)
            if words > MAX_SENTENCE_WORDS:
                start = match.start() + len(sentence) - len(stripped)
                items.append(text_item(paragraph, start, match.end(), f"الحالي: {words} كلمة"))

    current = f"{len(items)} جمل طويلة"
    if not items:
        return make_result(title, AnalysisStatus.PASS, current, required, 1, description)
    return make_result(
        title, AnalysisStatus.FAIL, current, required, (total - len(items)) / total, description,
        violating_items=items,
    )


def check_steps_introduction(flat: FlatDocument) -> CheckResult:
    """Every list needs a lead-in paragraph of 25-60 words and 1-3 sentences right before it."""
    title = "تمهيد خطوات"
    description = "قبل كل قائمة (تعداد نقطي أو رقمي)، يجب أن تكون هناك فقرة تمهيدية تتكون من 25-60 كلمة و 1-3 جمل."
    required = "25-60 كلمة | 1-3 جمل"

    lists = flat.lists
    if not lists:
        return make_result(title, AnalysisStatus.PASS, "لا يوجد تعداد", required, 1, description)

    collector = ViolationCollector()
    for block in lists:
        if block.index == 0:
            collector.add(block_item(block, "لا توجد فقرة تمهيدية قبل القائمة."))
            continue
        previous = flat.blocks[block.index - 1]
        if not previous.is_paragraph:
            collector.add(block_item(block, f"العنصر السابق للقائمة ليس فقرة (بل {previous.type_name})."))
            continue

        words = word_count(previous.text)
        sentences = sentence_count(previous.text)
        sentences_met = 1 <= sentences <= 3
        if sentences_met and 25 <= words <= 60:
            continue
        collector.add(
            block_item(previous, f"التمهيد غير صحيح: {words} كلمة, {sentences} جمل."),
            warn=sentences_met and in_warn_margin(words, 25, 60),
        )

    first = collector.items[0].message if collector.items else None
    return collector.result(title, required, len(lists), description, passed_required=required, current=first)


def check_automatic_lists(flat: FlatDocument) -> CheckResult:
    return presence_result(
        "التعداد الآلي",
        bool(flat.lists),
        "وجود قوائم",
        "يجب استخدام قوائم نقطية أو رقمية لتنظيم المعلومات وتسهيل قراءتها.",
    )


VALID_PARAGRAPH_ENDINGS = (".", "?", "!", "؟", "،", ":")


def check_punctuation(flat: FlatDocument) -> CheckResult:
    title = "علامات الترقيم"
    description = (
        "يجب أن تنتهي كل فقرة بعلامة ترقيم مناسبة مثل النقطة (.), علامة الاستفهام (؟), "
        "علامة التعجب (!), الفاصلة (،) أو النقطتين (:)."
    )
    required = "يجب الانتهاء ب (. ؟ ! ، :)"

    paragraphs = flat.non_empty_paragraphs
    items = []
    for paragraph in paragraphs:
        last = paragraph.text.strip()[-1]
        if last not in VALID_PARAGRAPH_ENDINGS:
            items.append(block_item(paragraph, f"الفقرة تنتهي ب '{last}'"))

    if not items:
        return make_result(title, AnalysisStatus.PASS, GOOD, required, 1, description)
    return make_result(
        title, AnalysisStatus.FAIL, "إنتهاء خاطئ", required,
        (len(paragraphs) - len(items)) / len(paragraphs), description,
        violating_items=items,
    )


SPACING_RULES = [
    (re.compile(r"\s{2,}"), "يوجد مسافات مزدوجة"),
    (re.compile(r"\s+[.,!؟،:]"), "يوجد مسافة قبل علامة الترقيم"),
    # A run of marks such as an ellipsis is one mark
    (re.compile(r"(?<![.,!؟،:])[.,!؟،:]+(?![.,!؟،:]|\s|\Z|\d|['\"])"), "لا يوجد مسافة بعد علامة الترقيم"),
    (re.compile(r"\s+\Z"), "يوجد مسافة في نهاية السطر"),
]


def check_spacing(flat: FlatDocument) -> CheckResult:
    title = "الفراغات"
    description = (
        "يجب الالتزام بقواعد المسافات الصحيحة: لا مسافات مزدوجة، لا مسافة قبل علامات الترقيم، "
        "ومسافة بعدها (إلا في نهاية النص)، ولا مسافات في نهاية الأسطر."
    )
    required = "مسافات صحيحة"

    blocks = flat.text_blocks
    items = []
    flagged = 0
    for block in blocks:
        text = block.inline.text
        found = False
        for pattern, message in SPACING_RULES:
            for match in pattern.finditer(text):
                items.append(text_item(block, match.start(), match.end(), message))
                found = True
        flagged += found

    if not items:
        return make_result(title, AnalysisStatus.PASS, GOOD, required, 1, description)
    return make_result(
        title, AnalysisStatus.FAIL, f"{len(items)} خطأ", required,
        (len(blocks) - flagged) / len(blocks), description,
        violating_items=items,
    )


# --- Repetition ---

def _significant_word(match: Optional[re.Match]) -> Optional[str]:
    """Normalized form of a matched word, or None when it is two letters or fewer."""
    if match is None:
        return None
    normalized = normalize_term(match.group(0))
    return normalized if len(normalized) > 2 else None


def _pair_items(
    previous: tuple[Block, re.Match],
    current: tuple[Block, re.Match],
    offsets: tuple[int, int],
    label: str,
) -> list[ViolatingItem]:
    items = []
    for (block, match), offset in zip((previous, current), offsets):
        start = offset + match.start()
        items.append(text_item(block, start, offset + match.end(), f"{label}: {match.group(0)}"))
    return items


def check_paragraph_endings(flat: FlatDocument) -> CheckResult:
    """Two consecutive paragraphs must not end with the same word."""
    title = "نهايات الفقرات"
    description = "يجب تجنب إنهاء فقرتين متتاليتين بنفس الكلمة للحفاظ على التنوع اللغوي."
    required = "تجنب إنهاء فقرتين متتاليتين بنفس الكلمة"

    paragraphs = flat.non_empty_paragraphs
    if len(paragraphs) < 2:
        return make_result(title, AnalysisStatus.PASS, "N/A", required, 1, description)

    last_words = []
    for paragraph in paragraphs:
        words = list(iter_words(paragraph.inline.text))
        last_words.append(words[-1] if words else None)

    items = []
    pairs = 0
    for i in range(1, len(paragraphs)):
        previous, current = last_words[i - 1], last_words[i]
        word = _significant_word(previous)
        if word is None or word != _significant_word(current):
            continue
        pairs += 1
        items.extend(_pair_items(
            (paragraphs[i - 1], previous), (paragraphs[i], current), (0, 0), "الكلمة الأخيرة المكررة",
        ))

    if not pairs:
        return make_result(title, AnalysisStatus.PASS, GOOD, required, 1, description)
    boundaries = len(paragraphs) - 1
    return make_result(
        title, AnalysisStatus.FAIL, f"{pairs} زوج مخالف", required,
        (boundaries - pairs) / boundaries, description,
        violating_items=items,
    )


def check_sentence_beginnings(flat: FlatDocument) -> CheckResult:
    """
    Two consecutive sentences must not start with the same word.

    Sentences are taken from every paragraph in document order, including
    paragraphs nested inside list items.
    """
    title = "بدايات الجمل"
    description = "يجب تجنب بدء جملتين متتاليتين بنفس الكلمة (أطول من حرفين)."
    required = "تجنب بدء جملتين متتاليتين بنفس الكلمة"

    # (block, sentence start offset, first word match within the sentence)
    sentences: list[tuple[Block, int, Optional[re.Match]]] = []
    for node, position in iter_nested_paragraphs(flat):
        block = Block(index=-1, node=node, position=position)
        text = block.inline.text
        for match in iter_sentence_matches(text):
            sentence = match.group(0)
            if len(sentence.strip()) <= 2:
                continue
            sentences.append((block, match.start(), next(iter_words(sentence), None)))

    if len(sentences) < 2:
        return make_result(title, AnalysisStatus.PASS, "N/A", required, 1, description)

    items = []
    pairs = 0
    for i in range(1, len(sentences)):
        prev_block, prev_offset, prev_word = sentences[i - 1]
        cur_block, cur_offset, cur_word = sentences[i]
        word = _significant_word(prev_word)
        if word is None or word != _significant_word(cur_word):
            continue
        pairs += 1
        items.extend(_pair_items(
            (prev_block, prev_word), (cur_block, cur_word), (prev_offset, cur_offset),
            "الكلمة الأولى المكررة",
        ))

    if not pairs:
        return make_result(title, AnalysisStatus.PASS, GOOD, required, 1, description)
    boundaries = len(sentences) - 1
    return make_result(
        title, AnalysisStatus.FAIL, f"{pairs} زوج مخالف", required,
        (boundaries - pairs) / boundaries, description,
        violating_items=items,
    )


_EXCLUDED_WORDS = frozenset(normalize(w) for w in DUPLICATE_WORDS_EXCLUSION_LIST)


def check_duplicate_words(flat: FlatDocument, in_headings: bool = False) -> CheckResult:
    """
    A word of three letters or more must not repeat inside one block.

    Paragraphs ignore a stoplist of function words; headings do not. Every
    occurrence of a repeated word is reported.
    """
    if in_headings:
        title = "تكرار بالعنوان"
        description = "تجنب تكرار الكلمات في نفس العنوان."
        details = None
        blocks = [b for b in flat.headings if b.has_text]
    else:
        title = "تكرار بالفقرة"
        description = "يجب تجنب تكرار الكلمات (أطول من حرفين) في نفس الفقرة. يتم استثناء قائمة من الكلمات الشائعة."
        details = ", ".join(DUPLICATE_WORDS_EXCLUSION_LIST)
        blocks = flat.non_empty_paragraphs

    items = []
    flagged = 0
    for block in blocks:
        occurrences: dict[str, list[re.Match]] = {}
        for match in iter_words(block.inline.text):
            normalized = normalize_term(match.group(0))
            if len(normalized) < 3:
                continue
            if not in_headings and normalized in _EXCLUDED_WORDS:
                continue
            occurrences.setdefault(normalized, []).append(match)

        repeated = {word: matches for word, matches in occurrences.items() if len(matches) > 1}
        if repeated:
            flagged += 1
        for word, matches in repeated.items():
            for match in matches:
                items.append(text_item(block, match.start(), match.end(), f"الكلمة المكررة: {word}"))

    if not items:
        return make_result(title, AnalysisStatus.PASS, GOOD, description, 1, description, details)
    return make_result(
        title, AnalysisStatus.FAIL, f"{len(items)} تكرار", description,
        (len(blocks) - flagged) / len(blocks), description, details,
        violating_items=items,
    )
