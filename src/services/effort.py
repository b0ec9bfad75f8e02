"""
Ticket Scoring Effort Service

Effort checklist -> base score 0-12.

Four categories (development, security, data, operations) of three
items each. One point per ticked item.
"""

from typing import Any, Union

import structlog

from ..models.scoring import EffortInput

logger = structlog.get_logger(__name__)

EffortLike = Union[EffortInput, dict, None]


class EffortScorer:
    """
    Effort checklist scoring.

    Development: version control, external service, internal integration
    Security:    legal compliance, access control, personal data
    Data:        migration, data preparation, encryption
    Operations:  off-hours work, training, UAT

    Each category is capped at 3, the total at 12.
    """

    MAX_PER_CATEGORY = 3
    MAX_BASE = 12

    def calculate(self, data: EffortLike = None) -> int:
        checklist = self._coerce(data)
        base = sum(
            min(category.selected(), self.MAX_PER_CATEGORY)
            for category in checklist.categories()
        )
        base = max(0, min(base, self.MAX_BASE))
        logger.debug("effort.computed", base_score=base)
        return base

    @staticmethod
    def _coerce(data: Any) -> EffortInput:
        if isinstance(data, EffortInput):
            return data
        return EffortInput.model_validate(data or {})


_scorer = EffortScorer()


def compute_effort_base(data: EffortLike = None) -> int:
    """Count ticked effort items with the default scorer."""
    return _scorer.calculate(data)
