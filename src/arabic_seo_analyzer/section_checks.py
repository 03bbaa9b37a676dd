"""
Heading and section structure checks.

Sections are measured by word count, paragraph count and sub-heading count
and classified against fixed band tables. Failing sections are reported at
their heading with the whole section as the secondary highlight region.
"""

from .checks import (
    GOOD,
    ViolationCollector,
    block_item,
    get_status,
    in_warn_margin,
    make_result,
    presence_result,
    section_item,
    text_item,
)
from .document import Block, FlatDocument, is_faq_heading
from .models import AnalysisStatus, CheckResult
from .text_normalizer import contains_term, find_term_spans, sentence_count, word_count
from .word_lists import AMBIGUOUS_HEADING_WORDS, FAQ_KEYWORDS, INTERROGATIVE_H2_KEYWORDS


def joined_text(blocks: list[Block]) -> str:
    return " ".join(b.text for b in blocks)


def content_paragraphs(blocks: list[Block]) -> list[Block]:
    return [b for b in blocks if b.is_paragraph and b.has_text]


# --- H2 sections ---

H2_TITLE = "قسم H2"
H2_DESCRIPTION = (
    "يجب أن يتبع كل قسم عنوان مستوى ثاني بنية محددة بناءً على عدد الكلمات والعناوين الفرعية "
    "(عنوان مستوى ثالث). انقر على أيقونة المعلومات لعرض القواعد بالتفصيل."
)
H2_DETAILS = "\n".join([
    "- 80-150 كلمة: يجب أن يحتوي على 1-2 فقرة وبدون عنوان مستوى ثالث.",
    "- 150-180 كلمة: وضع عنوان مستوى ثالث اختياري (تحذير). إذا تم وضع عنوان مستوى ثالث، يصبح مطلوب 2-4 فقرات في القسم.",
    "- 180-220 كلمة: يجب وضع 2-3 عناوين مستوى ثالث و 3-8 فقرات في القسم.",
    "- 220-300 كلمة: يجب وضع 3-4 عناوين مستوى ثالث و 4-10 فقرات في القسم.",
    "- أكثر من 300 كلمة: مخالف.",
])

_SHORT_RULE = "1-2 فقرة, بدون عنوان مستوى ثالث"
_MEDIUM_RULE = "2-3 عناوين مستوى ثالث, 3-8 فقرات"
_LONG_RULE = "3-4 عناوين مستوى ثالث, 4-10 فقرات"


def classify_h2_section(words: int, paragraphs: int, h3s: int) -> tuple[AnalysisStatus, str]:
    """
    Classify one H2 section against the word-count band table.

    Returns:
        Tuple of (status, required-condition text).
    """
    if 80 <= words <= 150:
        ok = 1 <= paragraphs <= 2 and h3s == 0
        return (AnalysisStatus.PASS if ok else AnalysisStatus.FAIL), _SHORT_RULE
    if 150 < words <= 180:
        if h3s == 0:
            return AnalysisStatus.WARN, "يفضل إضافة عنوان مستوى ثالث أو تعديل عدد الكلمات"
        ok = 2 <= paragraphs <= 4
        return (AnalysisStatus.PASS if ok else AnalysisStatus.FAIL), "2-4 فقرات"
    if 180 < words <= 220:
        ok = 2 <= h3s <= 3 and 3 <= paragraphs <= 8
        return (AnalysisStatus.PASS if ok else AnalysisStatus.FAIL), _MEDIUM_RULE
    if 220 < words <= 300:
        ok = 3 <= h3s <= 4 and 4 <= paragraphs <= 10
        return (AnalysisStatus.PASS if ok else AnalysisStatus.FAIL), _LONG_RULE
    if words > 310:
        return AnalysisStatus.FAIL, "أقل من 300 كلمة"
    if words < 70:
        return AnalysisStatus.FAIL, "أكثر من 80 كلمة"
    # 70-79 or 301-310 words
    rule = _SHORT_RULE if words < 80 else _LONG_RULE
    return AnalysisStatus.WARN, f"(تحذير) {rule}"


def check_h2_structure(flat: FlatDocument, total_words: int) -> CheckResult:
    h2_indices = [i for i, b in enumerate(flat.blocks) if b.is_heading_level(2)]
    if not h2_indices:
        too_long = total_words > 300
        return make_result(
            H2_TITLE,
            AnalysisStatus.WARN if too_long else AnalysisStatus.PASS,
            "0 عناوين",
            "يفضل استخدام عنوان مستوى ثاني",
            0 if too_long else 1,
            H2_DESCRIPTION,
            H2_DETAILS,
        )

    collector = ViolationCollector()
    boundaries = [*h2_indices, len(flat.blocks)]
    for start, end in zip(boundaries, boundaries[1:]):
        heading = flat.blocks[start]
        body = flat.blocks[start + 1:end]
        words = word_count(joined_text(body))
        paragraphs = len(content_paragraphs(body))
        h3s = sum(1 for b in body if b.is_heading_level(3))

        status, rule = classify_h2_section(words, paragraphs, h3s)
        if status is AnalysisStatus.PASS:
            continue
        message = (
            f"الحالي: {words} كلمة, {paragraphs} فقرة, {h3s} عناوين مستوى ثالث. "
            f"المطلوب: {rule}"
        )
        collector.add(
            section_item(heading, message, flat.position_at(end)),
            warn=status is AnalysisStatus.WARN,
        )

    return collector.result(
        H2_TITLE,
        "اتبع قواعد الهيكل المحددة",
        len(h2_indices),
        H2_DESCRIPTION,
        H2_DETAILS,
        passed_required="كل الأقسام تلتزم بالقواعد",
    )


# Expected H2 count by article length: (min words, max words, min H2, max H2)
H2_COUNT_BANDS = [
    (1000, 1500, 6, 7),
    (1501, 2000, 8, 9),
    (2001, 2500, 9, 10),
]


def check_h2_count(flat: FlatDocument, total_words: int) -> CheckResult:
    """
    Compare the number of H2 headings with the count expected for the length.

    Outside the defined length bands the check passes informationally. All
    H2 headings are listed as context either way.
    """
    title = "عدد H2"
    description = (
        "يراقب عدد عناوين مستوى ثاني بناءً على طول المقال.\n"
        "- 1000-1500 كلمة: 6-7 عناوين\n- 1500-2000 كلمة: 8-9 عناوين\n- 2000-2500 كلمة: 9-10 عناوين"
    )
    h2s = flat.headings_at(2)
    items = [block_item(h, f"عنوان مستوى ثاني: {h.text}") for h in h2s]

    for low, high, minimum, maximum in H2_COUNT_BANDS:
        if low <= total_words <= high:
            status = get_status(len(h2s), minimum, maximum)
            progress = 1 if status is AnalysisStatus.PASS else min(len(h2s) / maximum, 1)
            return make_result(
                title, status, len(h2s), f"{minimum}-{maximum}", progress, description,
                violating_items=items,
            )

    return make_result(
        title, AnalysisStatus.PASS, len(h2s), "غير مطبق", 1, description, violating_items=items,
    )


# --- H3 / H4 sections ---

def check_subheading_structure(flat: FlatDocument, level: int) -> CheckResult:
    """
    Check sections under H3 (35-70 words, 2-4 sentences) or H4 (20-60 words, one paragraph).

    A section runs to the next heading of any level. H3 questions inside an
    FAQ section are excluded; they are covered by the answer-paragraph check.
    A five-word miss is a warning when the sentence or paragraph rule holds.
    """
    title = f"قسم H{level}"
    if level == 3:
        min_words, max_words, min_units, max_units = 35, 70, 2, 4
        description = (
            f"المحتوى تحت عنوان مستوى ثالث يجب أن يتكون من {min_units}-{max_units} جمل، "
            f"بإجمالي كلمات يتراوح بين {min_words} و {max_words} كلمة."
        )
        required = f"{min_units}-{max_units} جمل ({min_words}-{max_words} كلمة)"
    else:
        min_words, max_words, min_units, max_units = 20, 60, 1, 1
        description = (
            f"المحتوى تحت عنوان مستوى رابع يجب أن يكون فقرة واحدة قصيرة ومحددة، "
            f"وتحتوي على {min_words} إلى {max_words} كلمة."
        )
        required = f"{max_units} فقرة ({min_words}-{max_words} كلمة)"

    indices = [
        i for i, b in enumerate(flat.blocks)
        if b.is_heading_level(level) and not (level == 3 and flat.is_in_faq(b.position))
    ]
    if not indices:
        return make_result(title, AnalysisStatus.PASS, "0 عناوين", "مستحسن للمقالات الطويلة", 1, description)

    collector = ViolationCollector()
    for index in indices:
        heading = flat.blocks[index]
        body, end = flat.section(index)
        paragraphs = content_paragraphs(body)
        counted = [b for b in body if (b.is_paragraph and b.has_text) or b.is_list]
        text = joined_text(counted)
        words = word_count(text)

        if level == 3:
            units = sentence_count(text)
            message = f"الحالي: {words} كلمة, {units} جمل"
        else:
            units = len(paragraphs)
            message = f"الحالي: {words} كلمة, {units} فقرة"

        words_met = min_words <= words <= max_words
        structure_met = min_units <= units <= max_units
        if words_met and structure_met:
            continue
        collector.add(
            section_item(heading, message, flat.position_at(end)),
            warn=structure_met and in_warn_margin(words, min_words, max_words),
        )

    return collector.result(
        title, required, len(indices), description, passed_required=f"كل الأقسام تلتزم بـ: {required}",
    )


def check_between_h2_h3(flat: FlatDocument) -> CheckResult:
    """Content between an H2 and an immediately following H3: 1-2 paragraphs, 40-120 words."""
    title = "بين H2-H3"
    description = (
        "يجب أن يكون هناك فقرة إلى فقرتين (40-120 كلمة) بين عنوان مستوى ثاني وعنوان مستوى ثالث التالي له."
    )
    required = "1-2 فقرة (40-120 كلمة)"

    collector = ViolationCollector()
    sections = 0
    for index, heading in enumerate(flat.blocks):
        if not heading.is_heading_level(2) or is_faq_heading(heading.text):
            continue
        next_index = flat.next_heading_index(index)
        if next_index >= len(flat.blocks) or not flat.blocks[next_index].is_heading_level(3):
            continue

        sections += 1
        between = flat.blocks[index + 1:next_index]
        paragraphs = len(content_paragraphs(between))
        words = word_count(joined_text(between))
        paragraphs_met = 1 <= paragraphs <= 2
        words_met = 40 <= words <= 120
        if paragraphs_met and words_met:
            continue
        collector.add(
            section_item(heading, f"الحالي: {paragraphs} فقرة, {words} كلمة", flat.blocks[next_index].position),
            warn=paragraphs_met and in_warn_margin(words, 40, 120),
        )

    return collector.result(
        title, required, sections, description, passed_required=f"كل الأقسام تلتزم بـ: {required}",
    )


# --- FAQ ---

def check_faq_section(flat: FlatDocument) -> CheckResult:
    has_faq = any(is_faq_heading(h.text) for h in flat.headings_at(2))
    return presence_result(
        "الأسئلة والاجوبة",
        has_faq,
        "وجود عنوان مستوى ثاني للأسئلة",
        "يجب أن يحتوي المقال على قسم للأسئلة الشائعة بعنوان مستوى ثاني يتضمن إحدى الكلمات التالية.",
        ", ".join(FAQ_KEYWORDS),
    )


def check_answer_paragraph(flat: FlatDocument) -> CheckResult:
    """
    Each FAQ question (H3 inside an FAQ section) needs exactly one answer
    paragraph of 35-70 words and 2-3 sentences.
    """
    title = "فقرة الأجوبة"
    description = (
        "كل سؤال (H3) تحت قسم الأسئلة الشائعة (H2) يجب أن يتبعه إجابة من فقرة واحدة (35-70 كلمة و 2-3 جمل)."
    )
    required = "35-70 كلمة | 2-3 جمل"

    if not flat.faq_ranges:
        return make_result(title, AnalysisStatus.PASS, "لا يوجد قسم أسئلة", required, 1, description)

    questions = [h for h in flat.headings_at(3) if flat.is_in_faq(h.position)]
    if not questions:
        return make_result(title, AnalysisStatus.PASS, "لا توجد أسئلة (H3)", required, 1, description)

    collector = ViolationCollector()
    for index, question in enumerate(questions):
        faq_range = flat.faq_range_of(question.position)
        answer_end = faq_range.end if faq_range else flat.total_size
        if index + 1 < len(questions):
            answer_end = min(answer_end, questions[index + 1].position)

        answer_blocks = [b for b in flat.blocks if question.position < b.position < answer_end]
        answers = content_paragraphs(answer_blocks)
        if len(answers) != 1:
            collector.add(block_item(
                question, f"{len(answers)} فقرة", section_from=question.position, section_to=answer_end,
            ))
            continue

        answer = answers[0]
        words = word_count(answer.text)
        sentences = sentence_count(answer.text)
        sentences_met = 2 <= sentences <= 3
        if 35 <= words <= 70 and sentences_met:
            continue
        collector.add(
            block_item(
                answer, f"{words} كلمة, {sentences} جمل",
                section_from=question.position, section_to=answer_end,
            ),
            warn=sentences_met and in_warn_margin(words, 35, 70),
        )

    first = collector.items[0].message if collector.items else None
    return collector.result(title, required, len(questions), description, passed_required=required, current=first)


# --- Heading wording ---

def check_ambiguous_headings(flat: FlatDocument) -> CheckResult:
    title = "عناوين مبهمة"
    description = (
        "لا تستخدم كلمات الإشارة أو الضمائر الغامضة في عناوين H2 لجعلها صريحة ومباشرة. "
        "يجب أن يكون العنوان مفهوماً بذاته دون الحاجة لسياق."
    )
    details = ", ".join(AMBIGUOUS_HEADING_WORDS)
    required = "0 عناوين مبهمة"

    h2s = flat.headings_at(2)
    if not h2s:
        return make_result(title, AnalysisStatus.PASS, "لا يوجد H2", required, 1, description, details)

    items = []
    flagged: set[int] = set()
    for heading in h2s:
        text = heading.inline.text
        for word in AMBIGUOUS_HEADING_WORDS:
            for start, end in find_term_spans(text, word):
                flagged.add(heading.position)
                items.append(text_item(heading, start, end, f'كلمة مبهمة: "{text[start:end]}"'))

    if not items:
        return make_result(title, AnalysisStatus.PASS, GOOD, required, 1, description, details)
    return make_result(
        title,
        AnalysisStatus.FAIL,
        f"{len(items)} كلمة مخالفة",
        required,
        (len(h2s) - len(flagged)) / len(h2s),
        description,
        details,
        items,
    )


def is_interrogative(text: str) -> bool:
    return any(contains_term(text, word) for word in INTERROGATIVE_H2_KEYWORDS)


def check_interrogative_h2(flat: FlatDocument, required_count: int = 3) -> CheckResult:
    count = sum(1 for h in flat.headings_at(2) if is_interrogative(h.text))
    return make_result(
        "عناوين H2 استفهامية",
        get_status(count, required_count, float("inf"), 1, required_count - 1),
        count,
        f"{required_count}+",
        min(count / required_count, 1),
        "يجب استخدام 3 عناوين مستوى ثاني استفهامية على الأقل باستخدام إحدى الكلمات التالية.",
        ", ".join(INTERROGATIVE_H2_KEYWORDS),
    )
