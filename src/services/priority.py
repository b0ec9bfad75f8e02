"""
Ticket Scoring Priority Service

Red flag / impact / urgency questionnaire -> 0-10 score -> P0..P3.

Formula: final = min(impact + urgency, 10)

Any red flag short-circuits the questionnaire: final is forced to 10
and the ticket is P0 no matter what else was ticked.
"""

from typing import Any, Callable, List, Optional, Tuple, Union

import structlog

from ..models.enums import Priority, Urgency
from ..models.scoring import PriorityInput, PriorityResult

logger = structlog.get_logger(__name__)

PriorityLike = Union[PriorityInput, dict, None]


class PriorityScorer:
    """
    Priority questionnaire scoring.

    Impact (2 points per factor, max 6):
    - Lost revenue
    - Core processes down
    - Data loss

    Urgency:
    - <=48h: 4
    - 3-7d: 3
    - 8-30d: 2
    - >=31d: 1
    - none: 0

    Tiers (first match wins):
    - red flag OR final == 10: P0
    - final >= 8: P1
    - final >= 5: P2
    - otherwise: P3

    Example:
    Lost revenue + core processes (4) + <=48h (4) = 8 -> P1
    """

    POINTS_PER_IMPACT = 2
    MAX_IMPACT = 6
    MAX_FINAL = 10

    URGENCY_SCORES = {
        Urgency.WITHIN_48H: 4,
        Urgency.WITHIN_WEEK: 3,
        Urgency.WITHIN_MONTH: 2,
        Urgency.LATER: 1,
        Urgency.NONE: 0,
    }

    TIER_RULES: List[Tuple[Callable[[bool, int], bool], Priority]] = [
        (lambda red, final: red or final == 10, Priority.P0),
        (lambda red, final: final >= 8, Priority.P1),
        (lambda red, final: final >= 5, Priority.P2),
    ]

    def calculate(self, data: PriorityLike = None) -> PriorityResult:
        """
        Score a priority questionnaire.

        Never raises for missing fields; an empty questionnaire is P3.
        """
        questionnaire = self._coerce(data)
        red = questionnaire.red_flags.selected() > 0

        if red:
            impact, urgency, final = 0, 0, self.MAX_FINAL
        else:
            impact = self._impact_score(questionnaire)
            urgency = self._urgency_score(questionnaire.urgency)
            final = min(impact + urgency, self.MAX_FINAL)

        result = PriorityResult(
            red_flag=red,
            impact=impact,
            urgency=urgency,
            final=final,
            priority=self.tier(final, red),
        )
        logger.debug(
            "priority.computed",
            red_flag=red,
            final=final,
            priority=result.priority.value,
        )
        return result

    def tier(self, final: int, red_flag: bool = False) -> Priority:
        """Map a final score to its priority tier."""
        for matches, priority in self.TIER_RULES:
            if matches(red_flag, final):
                return priority
        return Priority.P3

    # =========================================================================
    # Component scores
    # =========================================================================

    def _impact_score(self, questionnaire: PriorityInput) -> int:
        raw = self.POINTS_PER_IMPACT * questionnaire.impact.selected()
        return max(0, min(raw, self.MAX_IMPACT))

    def _urgency_score(self, urgency: Optional[Urgency]) -> int:
        return self.URGENCY_SCORES.get(urgency, 0)

    @staticmethod
    def _coerce(data: Any) -> PriorityInput:
        if isinstance(data, PriorityInput):
            return data
        return PriorityInput.model_validate(data or {})


_scorer = PriorityScorer()


def compute_priority(data: PriorityLike = None) -> PriorityResult:
    """Score a priority questionnaire with the default scorer."""
    return _scorer.calculate(data)
