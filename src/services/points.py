"""
Ticket Scoring Points Service

Completed ticket -> one points award per assignee.

Every assignee gets the same share: the collaboration pool divided
by the number of distinct assignees. No remainder redistribution.
"""

from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

import structlog

from ..models.enums import TicketStatus
from ..models.ticket import PointsAward, Ticket
from .collaboration import CollaborationAllocator

logger = structlog.get_logger(__name__)


class ScoringError(Exception):
    """Base class for scoring workflow failures."""
    pass


class PointsDistributionError(ScoringError):
    """Raised when points cannot be distributed for a ticket."""
    pass


class PointsService:
    """
    Splits a ticket's effort points between its assignees.

    Rules:
    1. Duplicate assignees are counted once
    2. A ticket with no assignees awards nothing (error)
    3. Only completed tickets earn points
    """

    def __init__(self, allocator: Optional[CollaborationAllocator] = None):
        self.allocator = allocator or CollaborationAllocator()

    def distribute_points(
        self,
        ticket_id: UUID,
        base_score: int,
        assignee_ids: Iterable[UUID],
        ticket_created_at: Optional[datetime] = None
    ) -> List[PointsAward]:
        assignees = list(dict.fromkeys(assignee_ids))
        if not assignees:
            raise PointsDistributionError(
                f"No assignees provided for ticket {ticket_id}. "
                "Assign at least one person before awarding points."
            )

        collaboration = self.allocator.calculate(base_score, len(assignees))
        awards = [
            PointsAward(
                user_id=user_id,
                ticket_id=ticket_id,
                points=collaboration.points_per_person,
                ticket_created_at=ticket_created_at,
            )
            for user_id in assignees
        ]

        logger.info(
            "points.distributed",
            ticket_id=str(ticket_id),
            assignees=len(assignees),
            total_pool=collaboration.total_pool,
            points_per_person=collaboration.points_per_person,
        )
        return awards

    def award_completion_points(self, ticket: Ticket) -> List[PointsAward]:
        """Distribute a completed ticket's effort score among its assignees."""
        if ticket.status != TicketStatus.COMPLETED:
            raise PointsDistributionError(
                f"Ticket {ticket.id} is {ticket.status.value}. "
                "Points are awarded on completion only."
            )

        return self.distribute_points(
            ticket.id,
            ticket.effort_score,
            ticket.assignee_ids,
            ticket_created_at=ticket.created_at,
        )
