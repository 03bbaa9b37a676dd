"""
Shared building blocks for structure checks.

Provides the status lattice, CheckResult construction and the collector
that splits a check's findings into hard violations and near-miss warnings.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from .document import Block
from .models import NOT_APPLICABLE, AnalysisStatus, CheckResult, ViolatingItem


GOOD = "جيد"
WARN_MARGIN = 5


def get_status(
    current: float,
    minimum: float,
    maximum: float,
    warn_min: Optional[float] = None,
    warn_max: Optional[float] = None,
) -> AnalysisStatus:
    """
    Classify a value against an inclusive band and an optional warn band.

    Args:
        current: Measured value.
        minimum: Lower bound of the passing band.
        maximum: Upper bound of the passing band (may be ``float("inf")``).
        warn_min: Lower bound of the warn band.
        warn_max: Upper bound of the warn band.

    Returns:
        PASS inside the band, WARN inside the warn band, FAIL otherwise.
    """
    if minimum <= current <= maximum:
        return AnalysisStatus.PASS
    if warn_min is not None and warn_max is not None and warn_min <= current <= warn_max:
        return AnalysisStatus.WARN
    return AnalysisStatus.FAIL


def in_warn_margin(value: int, minimum: int, maximum: int, margin: int = WARN_MARGIN) -> bool:
    """True when ``value`` misses the band by no more than ``margin``."""
    return (minimum - margin <= value < minimum) or (maximum < value <= maximum + margin)


def make_result(
    title: str,
    status: AnalysisStatus,
    current: Union[str, int, float],
    required: Union[str, int, float],
    progress: float,
    description: Optional[str] = None,
    details: Optional[str] = None,
    violating_items: Optional[list[ViolatingItem]] = None,
) -> CheckResult:
    return CheckResult(
        title=title,
        status=status,
        current=current,
        required=required,
        progress=progress,
        description=description,
        details=details,
        violating_items=violating_items,
    )


def not_applicable(title: str, required: str, description: Optional[str] = None) -> CheckResult:
    """A passing result for a check that does not apply to this document."""
    return make_result(title, AnalysisStatus.PASS, NOT_APPLICABLE, required, 1, description)


def presence_result(
    title: str,
    found: bool,
    required: str,
    description: str,
    details: Optional[str] = None,
    present: str = "موجود",
    absent: str = "غير موجود",
) -> CheckResult:
    """Binary pass/fail result for "at least one X exists" checks."""
    return make_result(
        title,
        AnalysisStatus.PASS if found else AnalysisStatus.FAIL,
        present if found else absent,
        required,
        1 if found else 0,
        description,
        details,
    )


def block_item(
    block: Block,
    message: str,
    section_from: Optional[int] = None,
    section_to: Optional[int] = None,
) -> ViolatingItem:
    """A violating item spanning a whole block."""
    return ViolatingItem(
        from_pos=block.position,
        to_pos=block.end,
        message=message,
        section_from=section_from,
        section_to=section_to,
    )


def section_item(block: Block, message: str, section_end: int) -> ViolatingItem:
    """A violating item anchored at a heading, covering its section."""
    return block_item(block, message, section_from=block.position, section_to=section_end)


def text_item(block: Block, start: int, end: int, message: str) -> ViolatingItem:
    """A violating item for a character span of a block's inline text."""
    from_pos, to_pos = block.absolute_span(start, end)
    return ViolatingItem(from_pos=from_pos, to_pos=to_pos, message=message)


@dataclass
class ViolationCollector:
    """
    Accumulates findings of a multi-item check.

    Hard violations and warnings are kept apart; the check's status is the
    worst across all items and progress counts only hard violations.
    """
    violations: list[ViolatingItem] = field(default_factory=list)
    warnings: list[ViolatingItem] = field(default_factory=list)

    def add(self, item: ViolatingItem, warn: bool = False) -> None:
        (self.warnings if warn else self.violations).append(item)

    @property
    def items(self) -> list[ViolatingItem]:
        return [*self.violations, *self.warnings]

    @property
    def status(self) -> AnalysisStatus:
        if self.violations:
            return AnalysisStatus.FAIL
        if self.warnings:
            return AnalysisStatus.WARN
        return AnalysisStatus.PASS

    @property
    def summary(self) -> str:
        return f"{len(self.violations)} مخالفة, {len(self.warnings)} تحذير"

    def progress(self, total: int) -> float:
        if total <= 0:
            return 1
        return (total - len(self.violations)) / total

    def result(
        self,
        title: str,
        required: str,
        total: int,
        description: Optional[str] = None,
        details: Optional[str] = None,
        passed_required: Optional[str] = None,
        current: Optional[str] = None,
    ) -> CheckResult:
        """
        Build the CheckResult for the collected findings.

        Args:
            title: Check title.
            required: Required-value text shown while failing or warning.
            total: Number of units inspected, for the progress fraction.
            description: Check description.
            details: Optional extra details.
            passed_required: Required-value text shown when passing.
            current: Current-value text overriding the violation summary.
        """
        status = self.status
        if status is AnalysisStatus.PASS:
            return make_result(
                title, status, GOOD, passed_required or required, 1, description, details
            )
        return make_result(
            title,
            status,
            current or self.summary,
            required,
            self.progress(total),
            description,
            details,
            self.items,
        )
