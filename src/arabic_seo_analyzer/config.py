"""
Analysis configuration for the Arabic SEO analyzer.

This module maps the declared content goal onto the density bands used by
the keyword analysis and decides whether goal-specific structure checks run.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


# Density bands are fractions of total words, inclusive on both ends
DensityBand = tuple[float, float]


class ContentGoal(Enum):
    """Declared intent of the article."""
    ACADEMIC = "academic"
    SALES = "sales"
    BLOG = "blog"
    TOUR_PROGRAM = "tour-program"
    COMPARISON = "comparison"

    @property
    def arabic_label(self) -> str:
        return GOAL_ARABIC_LABELS[self]


GOAL_ARABIC_LABELS = {
    ContentGoal.ACADEMIC: "اكاديمية",
    ContentGoal.SALES: "البيع",
    ContentGoal.BLOG: "مدونة",
    ContentGoal.TOUR_PROGRAM: "برنامج سياحي",
    ContentGoal.COMPARISON: "مقارنة",
}

DEFAULT_GOAL = ContentGoal.SALES

_GOAL_LOOKUP = {goal.value: goal for goal in ContentGoal}
_GOAL_LOOKUP.update({label: goal for goal, label in GOAL_ARABIC_LABELS.items()})
_GOAL_LOOKUP.update({goal.name.lower(): goal for goal in ContentGoal})
_GOAL_LOOKUP["tour_program"] = ContentGoal.TOUR_PROGRAM


def resolve_goal(goal: Union[ContentGoal, str, None]) -> Optional[ContentGoal]:
    """
    Resolve a goal given as enum, English value or Arabic label.

    Args:
        goal: Goal to resolve.

    Returns:
        The matching ContentGoal, or None for an unknown or empty value.
    """
    if isinstance(goal, ContentGoal):
        return goal
    if not goal or not isinstance(goal, str):
        return None
    return _GOAL_LOOKUP.get(goal.strip()) or _GOAL_LOOKUP.get(goal.strip().lower())


# Primary keyword density per goal
PRIMARY_DENSITY: dict[ContentGoal, DensityBand] = {
    ContentGoal.ACADEMIC: (0.008, 0.009),
    ContentGoal.SALES: (0.005, 0.008),
    ContentGoal.BLOG: (0.009, 0.011),
    ContentGoal.TOUR_PROGRAM: (0.009, 0.011),
}
DEFAULT_PRIMARY_DENSITY: DensityBand = (0.005, 0.01)

# Combined density of all secondary keywords, split evenly between them
SECONDARY_TOTAL_DENSITY: dict[ContentGoal, DensityBand] = {
    ContentGoal.SALES: (0.003, 0.005),
}
DEFAULT_SECONDARY_TOTAL_DENSITY: DensityBand = (0.005, 0.01)

COMPANY_DENSITY: DensityBand = (0.001, 0.002)

LSI_DENSITY: dict[ContentGoal, DensityBand] = {
    ContentGoal.BLOG: (0.02, 0.03),
}
DEFAULT_LSI_DENSITY: DensityBand = (0.015, 0.025)
LSI_WARN_MARGIN = 5


@dataclass
class AnalysisConfig:
    """
    Goal-derived parameters for one analysis run.

    Attributes:
        goal: Resolved content goal. None means an unrecognized goal was
            supplied: default density bands apply and goal-specific
            checks report not-applicable.
    """
    goal: Optional[ContentGoal] = DEFAULT_GOAL

    @classmethod
    def for_goal(cls, goal: Union[ContentGoal, str, None]) -> "AnalysisConfig":
        return cls(goal=resolve_goal(goal))

    @property
    def primary_density(self) -> DensityBand:
        return PRIMARY_DENSITY.get(self.goal, DEFAULT_PRIMARY_DENSITY)

    @property
    def secondary_total_density(self) -> DensityBand:
        return SECONDARY_TOTAL_DENSITY.get(self.goal, DEFAULT_SECONDARY_TOTAL_DENSITY)

    @property
    def company_density(self) -> DensityBand:
        return COMPANY_DENSITY

    @property
    def lsi_density(self) -> DensityBand:
        return LSI_DENSITY.get(self.goal, DEFAULT_LSI_DENSITY)

    @property
    def is_tour_program(self) -> bool:
        return self.goal is ContentGoal.TOUR_PROGRAM
