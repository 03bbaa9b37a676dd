"""
Prompt context for the AI writing assistant.

Builds the single prompt string sent to the assistant from the user's
command, the keyword configuration and the rules of the current analysis.
Sending it is left to the caller.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .config import ContentGoal, resolve_goal
from .models import CheckResult, FullAnalysis, Keywords

UNSET = "لم تحدد"


@dataclass
class PromptOptions:
    """Which parts of the context to include."""
    manual_command: bool = True
    target_keywords: bool = False
    keyword_criteria: bool = False
    structure_criteria: bool = False
    goal_criteria: bool = False
    editor_text: bool = True


def rule_line(check: CheckResult) -> Optional[str]:
    """One rule line for an applicable check, or None."""
    if not check.is_applicable:
        return None
    description = check.description or f"المطلوب هو {check.required}"
    return f'- قاعدة "{check.title}": {description}'


def _join_range(values) -> str:
    return " و ".join(str(v) for v in values)


def _target_keywords_section(keywords: Keywords) -> str:
    return (
        "**الكلمات المستهدفة والشركة:**\n"
        f"- الكلمة الأساسية: {keywords.primary or UNSET}\n"
        f"- الصيغ المرادفة: {', '.join(keywords.active_secondaries) or UNSET}\n"
        f"- اسم الشركة: {keywords.company or UNSET}\n"
    )


def _keyword_criteria_section(keywords: Keywords, analysis: FullAnalysis) -> str:
    kw = analysis.keyword_analysis
    section = "**معايير الكلمات المستهدفة الصارمة (يجب الالتزام بها):**\n"
    if keywords.primary:
        section += (
            f"- الكلمة الأساسية ({keywords.primary}): يجب أن تظهر بين {_join_range(kw.primary.required_count)} مرة. "
            "ويجب أن تكون موجودة في: الفقرة الأولى، العنوان الأول، آخر عنوان، وآخر فقرة.\n"
        )
    if keywords.active_secondaries:
        section += (
            "- الصيغ المرادفة (الإجمالي): يجب أن يظهر إجمالي المرادفات بين "
            f"{_join_range(kw.secondaries_distribution.required_count)} مرة.\n"
        )
    if keywords.company:
        section += (
            f"- اسم الشركة ({keywords.company}): يجب أن تظهر بين {_join_range(kw.company.required_count)} مرة.\n"
        )
    return section


def build_assistant_prompt(
    command: str,
    analysis: FullAnalysis,
    keywords: Keywords,
    text: str = "",
    options: Optional[PromptOptions] = None,
    goal: Union[ContentGoal, str, None] = None,
) -> str:
    """
    Compose the assistant prompt.

    Args:
        command: The user's free-text instruction.
        analysis: Current analysis of the document.
        keywords: Keyword configuration the analysis ran with.
        text: Plain text of the document.
        options: Sections to include; defaults to command plus document text.
        goal: Content goal. Goal rules are only included for tour programs.

    Returns:
        The prompt, or an empty string when nothing was selected.
    """
    options = options or PromptOptions()
    parts: list[str] = []

    if options.manual_command and command.strip():
        parts.append(f"**الأمر المطلوب:**\n{command}")

    context: list[str] = []
    if options.target_keywords:
        context.append(_target_keywords_section(keywords))

    if options.keyword_criteria:
        context.append(_keyword_criteria_section(keywords, analysis))

    if options.structure_criteria:
        rules = [line for line in map(rule_line, analysis.structure_analysis) if line]
        if rules:
            context.append("**معايير الهيكل والمحتوى الصارمة (يجب الالتزام بها):**\n" + "\n".join(rules))

    if options.goal_criteria and resolve_goal(goal) is ContentGoal.TOUR_PROGRAM:
        rules = [line for line in map(rule_line, analysis.structure_analysis.goal_checks()) if line]
        if rules:
            context.append("**معايير الهدف (برنامج سياحي) الصارمة (يجب الالتزام بها):**\n" + "\n".join(rules))

    if context:
        parts.append(
            "مهمة: أنت مساعد كتابة متخصص في تحسين محركات البحث (SEO). "
            "يرجى الالتزام بالقواعد والسياق التالي بدقة عند تنفيذ الأمر المطلوب.\n\n"
            "**-- سياق وقواعد --**\n" + "\n\n".join(context) + "\n**-- نهاية السياق --**"
        )

    if options.editor_text:
        parts.append(f"**النص للعمل عليه:**\n---\n{text}\n---")

    return "\n\n".join(parts).strip()
