"""
Lexical quality checks.

Ratio and presence checks against the Arabic marker-word catalogues, plus
Latin-word, filler-phrase and spelling-consistency detection.
"""

from .checks import GOOD, make_result, presence_result, text_item
from .document import FlatDocument
from .models import AnalysisStatus, CheckResult, ViolatingItem
from .text_normalizer import (
    LATIN_WORD_RE,
    contains_term,
    count_occurrences,
    find_term_spans,
    iter_words,
    normalize,
    percentage,
    split_sentences,
    word_count,
)
from .word_lists import (
    CTA_WORDS,
    INTERACTIVE_WORDS,
    REPEATED_PHRASES,
    SLOW_WORDS,
    TRANSITIONAL_WORDS,
    WARNING_ADVICE_WORDS,
)


def check_transitional_words(plain_text: str) -> CheckResult:
    """At least 30% of sentences should carry a transitional word (20-30% warns)."""
    title = "كلمات إنتقالية"
    description = "يجب أن تحتوي 30% على الأقل من الجمل على كلمة انتقالية. التحذير بين 20-30%. الفشل أقل من 20%."
    details = ", ".join(TRANSITIONAL_WORDS)

    sentences = split_sentences(plain_text)
    if not sentences:
        return make_result(title, AnalysisStatus.FAIL, "0%", "> 30%", 0, description, details)

    with_transition = sum(
        1 for sentence in sentences if any(contains_term(sentence, word) for word in TRANSITIONAL_WORDS)
    )
    share = with_transition / len(sentences) * 100
    if share >= 30:
        status = AnalysisStatus.PASS
    elif share >= 20:
        status = AnalysisStatus.WARN
    else:
        status = AnalysisStatus.FAIL
    return make_result(title, status, f"{share:.0f}%", "> 30%", min(share / 30, 1), description, details)


def check_cta_words(plain_text: str) -> CheckResult:
    return presence_result(
        "كلمات الحث",
        any(contains_term(plain_text, word) for word in CTA_WORDS),
        "وجود كلمة واحدة على الأقل",
        "يجب أن يحتوي المقال على كلمة واحدة على الأقل للحث على اتخاذ إجراء. الكلمات المتاحة:",
        ", ".join(CTA_WORDS),
    )


def check_warning_words(plain_text: str) -> CheckResult:
    return presence_result(
        "كلمات تحذيرية",
        any(contains_term(plain_text, word) for word in WARNING_ADVICE_WORDS),
        "وجود كلمة تحذيرية أو نصيحة واحدة على الأقل",
        "يجب أن يحتوي المقال على كلمة تحذيرية أو نصيحة واحدة على الأقل. الكلمات المتاحة:",
        ", ".join(WARNING_ADVICE_WORDS),
        present="موجودة",
        absent="غير موجودة",
    )


INTERACTIVE_SHARE = 0.0002


def check_interactive_language(plain_text: str, total_words: int) -> CheckResult:
    count = sum(count_occurrences(plain_text, word) for word in INTERACTIVE_WORDS)
    share = percentage(count, total_words)
    return make_result(
        "0.02% لغة تفاعلية",
        AnalysisStatus.PASS if share >= INTERACTIVE_SHARE else AnalysisStatus.FAIL,
        f"{share * 100:.3f}%",
        f"> {INTERACTIVE_SHARE * 100:g}%",
        min(share / INTERACTIVE_SHARE, 1),
        "يجب استخدام لغة تفاعلية بنسبة لا تقل عن 0.02% من إجمالي الكلمات لمخاطبة القارئ مباشرة. الكلمات المتاحة:",
        ", ".join(INTERACTIVE_WORDS),
    )


LATIN_SHARE = 0.005


def check_arabic_only(flat: FlatDocument, primary: str, total_words: int) -> CheckResult:
    """
    Latin words in paragraphs and headings: none passes, up to 0.5% warns.

    Latin words that belong to the primary keyword are exempt.
    """
    title = "كلمات لاتينية"
    description = (
        "يجب أن لا تتجاوز نسبة الكلمات اللاتينية 0.5% من إجمالي النص. "
        "سيتم استثناء الكلمات اللاتينية الموجودة في الكلمة المفتاحية الأساسية."
    )
    required = "< 0.5%"
    exempt = {w.lower() for w in LATIN_WORD_RE.findall(primary or "")}

    items = []
    for block in flat.text_blocks:
        for match in LATIN_WORD_RE.finditer(block.inline.text):
            word = match.group(0)
            if word.lower() not in exempt:
                items.append(text_item(block, match.start(), match.end(), f"كلمة لاتينية: {word}"))

    share = percentage(len(items), total_words)
    current = f"{share * 100:.2f}%"
    if share > LATIN_SHARE:
        return make_result(title, AnalysisStatus.FAIL, current, required, 0, description, violating_items=items)
    if share > 0:
        return make_result(title, AnalysisStatus.WARN, current, required, 0.5, description, violating_items=items)
    return make_result(title, AnalysisStatus.PASS, "0%", required, 1, description)


SLOW_WORDS_SHARE = 0.02


def check_slow_words(flat: FlatDocument, total_words: int) -> CheckResult:
    """Filler phrases must make up less than 2% of all words."""
    title = "كلمات بطيئة"
    description = (
        "الكلمات البطيئة هي عبارات حشو تضعف الكتابة. يجب أن يكون إجمالي كلماتها أقل من 2% من إجمالي كلمات النص."
    )
    required = "< 2%"
    details = ", ".join(SLOW_WORDS)

    if total_words == 0:
        return make_result(title, AnalysisStatus.PASS, "0%", required, 1, description, details)

    items = []
    slow_word_total = 0
    for block in flat.text_blocks:
        text = block.inline.text
        for slow_word in SLOW_WORDS:
            for start, end in find_term_spans(text, slow_word):
                slow_word_total += word_count(slow_word)
                items.append(text_item(block, start, end, f"كلمة بطيئة: {slow_word}"))

    share = slow_word_total / total_words
    if share >= SLOW_WORDS_SHARE:
        return make_result(
            title, AnalysisStatus.FAIL, f"{share * 100:.1f}%", required,
            max(0, 1 - share / (SLOW_WORDS_SHARE * 2)), description, details,
            violating_items=items,
        )
    return make_result(title, AnalysisStatus.PASS, f"{share * 100:.1f}%", required, 1, description, details)


def check_repeated_bigrams(flat: FlatDocument, plain_text: str) -> CheckResult:
    """Stock filler phrases may appear at most once in the whole text."""
    title = "ثنائيات مكررة"
    description = "تجنب تكرار العبارات الشائعة أكثر من مرة واحدة للحفاظ على أسلوب فريد."
    required = "تكرار < 2"
    phrases = list(dict.fromkeys(REPEATED_PHRASES))
    details = ", ".join(phrases)

    repeated = [p for p in phrases if count_occurrences(plain_text, p) > 1]
    if not repeated:
        return make_result(title, AnalysisStatus.PASS, GOOD, required, 1, description, details)

    items = []
    for block in flat.text_blocks:
        text = block.inline.text
        for phrase in repeated:
            for start, end in find_term_spans(text, phrase):
                items.append(text_item(block, start, end, f"العبارة المكررة: {phrase}"))

    return make_result(
        title, AnalysisStatus.FAIL, f"{len(repeated)} عبارة مكررة", required, 0, description, details,
        violating_items=items,
    )


def check_word_consistency(flat: FlatDocument) -> CheckResult:
    """
    The same word must be spelled the same way throughout.

    Words are grouped by their normalized form; a group written with more
    than one surface spelling (hamza, diacritics, taa marbuta) is reported
    with every occurrence of every spelling.
    """
    title = "تناسق الكلمات"
    description = (
        "يجب كتابة نفس الكلمة بنفس الطريقة في كل مرة (مثل استخدام الهمزة 'أ' أو عدم استخدامها 'ا'). "
        "هذا يساعد على الاتساق."
    )
    required = "0 تناقضات"

    # normalized form -> surface spelling -> occurrence items
    groups: dict[str, dict[str, list[tuple]]] = {}
    for block in flat.text_blocks:
        for match in iter_words(block.inline.text):
            surface = match.group(0)
            normalized = normalize(surface)
            if len(normalized) < 3:
                continue
            spellings = groups.setdefault(normalized, {})
            spellings.setdefault(surface, []).append((block, match.start(), match.end()))

    inconsistent = [spellings for spellings in groups.values() if len(spellings) > 1]
    if not inconsistent:
        return make_result(title, AnalysisStatus.PASS, GOOD, required, 1, description)

    items: list[ViolatingItem] = []
    for spellings in inconsistent:
        message = f"تناقض: {', '.join(spellings)}"
        for occurrences in spellings.values():
            items.extend(text_item(block, start, end, message) for block, start, end in occurrences)

    return make_result(
        title, AnalysisStatus.FAIL, f"{len(inconsistent)} مجموعة متناقضة", required, 0, description,
        violating_items=items,
    )
