"""
Checks that apply only to tour-program articles.

For any other goal each check reports not-applicable.
"""

from .checks import block_item, get_status, make_result, not_applicable, section_item
from .config import AnalysisConfig
from .document import Block, FlatDocument
from .models import AnalysisStatus, CheckResult
from .text_normalizer import contains_term, word_count
from .word_lists import PRE_TRAVEL_H2_KEYWORDS, PRICING_H2_KEYWORDS, WHO_IS_IT_FOR_H2_KEYWORDS

INCLUDES = "يشمل"
EXCLUDES = "لا يشمل"
DURATION_WORDS = ("أيام", "ليالي")


def _mark(flag: bool) -> str:
    return "✓" if flag else "✗"


def _paragraph_words(blocks: list[Block]) -> int:
    return word_count(" ".join(b.text for b in blocks if b.is_paragraph))


def check_first_title(flat: FlatDocument, config: AnalysisConfig) -> CheckResult:
    """Paragraph text between the H1 and the next heading: 150-200 words."""
    title = "العنوان الاول"
    description = "يجب أن يكون المحتوى بعد العنوان الرئيسي H1 وقبل العنوان التالي بين 150 و 200 كلمة."
    required = "150-200 كلمة"
    if not config.is_tour_program:
        return not_applicable(title, required, description)

    h1s = flat.headings_at(1)
    if not h1s:
        return make_result(title, AnalysisStatus.FAIL, "لا يوجد H1", required, 0, description)

    h1 = h1s[0]
    body, end = flat.section(h1.index)
    words = _paragraph_words(body)
    status = get_status(words, 150, 200)
    items = None
    if status is AnalysisStatus.FAIL:
        items = [section_item(h1, f"الحالي: {words} كلمة", flat.position_at(end))]
    return make_result(title, status, words, required, min(words / 200, 1), description, violating_items=items)


def check_second_title(flat: FlatDocument, config: AnalysisConfig) -> CheckResult:
    """The first H2 names the duration (days/nights) and has at least two H3s."""
    title = "H2 الثاني"
    description = "أول عنوان مستوى ثاني يجب أن يحتوي على 'أيام' أو 'ليالي' وأن يتبعه عنوانين مستوى ثالث على الأقل."
    required = "عنوان مستوى ثاني يتضمن 'أيام'/'ليالي' و 2+ عنوان مستوى ثالث"
    if not config.is_tour_program:
        return not_applicable(title, required, description)

    h2s = flat.headings_at(2)
    if not h2s:
        return make_result(title, AnalysisStatus.FAIL, "لا يوجد عنوان مستوى ثاني", required, 0, description)

    first = h2s[0]
    body, _ = flat.section(first.index, level=2)
    names_duration = any(contains_term(first.text, word) for word in DURATION_WORDS)
    h3s = sum(1 for b in body if b.is_heading_level(3))
    passed = names_duration and h3s >= 2

    current = f"النص: {_mark(names_duration)}, عناوين مستوى ثالث: {h3s}"
    if passed:
        return make_result(title, AnalysisStatus.PASS, current, required, 1, description)
    message = (
        f"النص يتضمن الكلمة المطلوبة: {'نعم' if names_duration else 'لا'}. "
        f"عدد عناوين مستوى ثالث: {h3s} (المطلوب >= 2)."
    )
    return make_result(
        title, AnalysisStatus.FAIL, current, required, 0, description,
        violating_items=[block_item(first, message)],
    )


def check_includes_excludes(flat: FlatDocument, config: AnalysisConfig) -> CheckResult:
    """
    Exactly one H2 mentions what the program includes, with an "includes"
    H3 and an "excludes" H3 inside its section.
    """
    title = "يشمل/لايشمل"
    description = (
        "يجب أن يحتوي المقال على عنوان مستوى ثاني واحد يتضمن كلمة 'يشمل'، "
        "وتحته عنوان مستوى ثالث يتضمن 'يشمل' وآخر يتضمن 'لا يشمل'."
    )
    required = "عنوان مستوى ثاني 'يشمل' > عنوان مستوى ثالث 'يشمل' + عنوان مستوى ثالث 'لا يشمل'"
    if not config.is_tour_program:
        return not_applicable(title, required, description)

    targets = [h for h in flat.headings_at(2) if contains_term(h.text, INCLUDES)]
    if not targets:
        return make_result(title, AnalysisStatus.FAIL, 'لا يوجد عنوان مستوى ثاني يتضمن "يشمل"', required, 0, description)
    if len(targets) > 1:
        return make_result(
            title, AnalysisStatus.FAIL, f'{len(targets)} عناوين مستوى ثاني تتضمن "يشمل"', required, 0, description,
            violating_items=[
                block_item(h, "يجب أن يكون هناك عنوان مستوى ثاني واحد فقط يتضمن 'يشمل'") for h in targets
            ],
        )

    target = targets[0]
    body, _ = flat.section(target.index, level=2)
    h3s = [b for b in body if b.is_heading_level(3)]
    has_includes = any(contains_term(h.text, INCLUDES) for h in h3s)
    has_excludes = any(contains_term(h.text, EXCLUDES) for h in h3s)

    current = (
        f"عنوان مستوى ثالث 'يشمل': {_mark(has_includes)}, "
        f"عنوان مستوى ثالث 'لا يشمل': {_mark(has_excludes)}"
    )
    if has_includes and has_excludes:
        return make_result(title, AnalysisStatus.PASS, current, required, 1, description)
    return make_result(
        title, AnalysisStatus.FAIL, current, required, 0, description,
        violating_items=[block_item(target, f"الحالة الحالية: {current}")],
    )


def _h2_word_band_check(flat: FlatDocument, title: str, markers: list[str]) -> CheckResult:
    description = (
        f"يجب أن يحتوي المقال على عنوان مستوى ثاني واحد يتضمن إحدى الكلمات ({'/'.join(markers)})، "
        "وأن يكون محتواه بين 150-180 كلمة."
    )
    required = "150-180 كلمة"

    targets = [h for h in flat.headings_at(2) if any(contains_term(h.text, m) for m in markers)]
    if not targets:
        return make_result(title, AnalysisStatus.FAIL, "لا يوجد عنوان مستوى ثاني بالمطلوب", required, 0, description)

    target = targets[0]
    body, end = flat.section(target.index)
    words = _paragraph_words(body)
    status = get_status(words, 150, 180)
    items = None
    if status is AnalysisStatus.FAIL:
        items = [section_item(target, f"الحالي: {words} كلمة", flat.position_at(end))]
    return make_result(
        title, status, f"{words} كلمة", required, min(words / 180, 1), description, violating_items=items,
    )


def check_pre_travel_h2(flat: FlatDocument, config: AnalysisConfig) -> CheckResult:
    title = "H2 قبل السفر"
    if not config.is_tour_program:
        return not_applicable(title, "150-180 كلمة")
    return _h2_word_band_check(flat, title, PRE_TRAVEL_H2_KEYWORDS)


def check_pricing_h2(flat: FlatDocument, config: AnalysisConfig) -> CheckResult:
    title = "H2 سعر وحجز"
    if not config.is_tour_program:
        return not_applicable(title, "150-180 كلمة")
    return _h2_word_band_check(flat, title, PRICING_H2_KEYWORDS)


def check_who_is_it_for_h2(flat: FlatDocument, config: AnalysisConfig) -> CheckResult:
    title = "H2 المرشح"
    markers = WHO_IS_IT_FOR_H2_KEYWORDS
    description = (
        f"يجب أن يحتوي المقال على عنوان مستوى ثاني واحد يتضمن إحدى الكلمات ({'/'.join(markers)}) "
        "لتحديد لمن هذا البرنامج."
    )
    required = 'عنوان مستوى ثاني يتضمن "مناسب" أو "مرشح" أو "يناسب"'
    if not config.is_tour_program:
        return not_applicable(title, required, description)

    targets = [h for h in flat.headings_at(2) if any(contains_term(h.text, m) for m in markers)]
    if not targets:
        return make_result(title, AnalysisStatus.FAIL, "غير موجود", required, 0, description)
    return make_result(
        title, AnalysisStatus.PASS, "موجود", required, 1, description,
        violating_items=[block_item(h, f"العنوان الموجود: {h.text}") for h in targets],
    )
