"""
Ticket Scoring Collaboration Service

Effort base score + assignee count -> per-assignee points.

Formula: total_pool = base + bonus_per_person x assignees
         points_per_person = total_pool / max(assignees, 1)

Multi-person tickets earn every assignee a bonus on top of their
share of the base score, so helping out never costs points.
"""

from typing import Tuple

import structlog

from ..models.enums import CollaborationLevel
from ..models.scoring import CollaborationResult

logger = structlog.get_logger(__name__)


class CollaborationAllocator:
    """
    Collaboration point allocation.

    Brackets (step function, no interpolation):
    - 0-1 assignees: +0 per person (No collaboration)
    - 2: +2 (Basic)
    - 3-4: +4 (Good)
    - 5-6: +6 (High)
    - 7+: +8 (Maximum)

    Example:
    Base 12, 2 assignees: pool 12 + 2x2 = 16, each gets 8
    """

    MAX_BASE = 12

    # (minimum assignee count, bonus per person, level), highest first
    BRACKETS = [
        (7, 8, CollaborationLevel.MAXIMUM),
        (5, 6, CollaborationLevel.HIGH),
        (3, 4, CollaborationLevel.GOOD),
        (2, 2, CollaborationLevel.BASIC),
    ]

    def calculate(self, base_score: int, assignee_count: int) -> CollaborationResult:
        base = max(0, min(int(base_score), self.MAX_BASE))
        count = max(0, int(assignee_count))

        bonus, level = self.bracket(count)
        total_pool = base + bonus * count
        # Zero assignees: the pool is the base score itself
        points = total_pool / max(count, 1)

        logger.debug(
            "collaboration.computed",
            base_score=base,
            assignee_count=count,
            total_pool=total_pool,
        )
        return CollaborationResult(
            assignee_count=count,
            level=level,
            bonus_per_person=bonus,
            total_pool=total_pool,
            points_per_person=points,
        )

    def bracket(self, assignee_count: int) -> Tuple[int, CollaborationLevel]:
        """Return (bonus_per_person, level) for an assignee count."""
        for minimum, bonus, level in self.BRACKETS:
            if assignee_count >= minimum:
                return bonus, level
        return 0, CollaborationLevel.NONE


_allocator = CollaborationAllocator()


def compute_collaboration(base_score: int, assignee_count: int) -> CollaborationResult:
    """Allocate collaboration points with the default allocator."""
    return _allocator.calculate(base_score, assignee_count)
