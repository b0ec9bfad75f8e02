"""
Ticket Scoring Ticket Service

Merges questionnaire results into ticket records.

The client sends an effort score hint along with the checklist for
display; the stored score is always recomputed here.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

import structlog

from ..models.enums import Priority
from ..models.scoring import EffortInput, PriorityInput
from ..models.ticket import Ticket
from .effort import EffortScorer
from .priority import PriorityScorer

logger = structlog.get_logger(__name__)


class TicketScoringService:
    """
    Applies priority and effort scores to tickets.

    Returns updated copies; persisting them is up to the caller.
    """

    def __init__(
        self,
        priority_scorer: Optional[PriorityScorer] = None,
        effort_scorer: Optional[EffortScorer] = None
    ):
        self.priority_scorer = priority_scorer or PriorityScorer()
        self.effort_scorer = effort_scorer or EffortScorer()

    def apply_priority(
        self,
        ticket: Ticket,
        priority_input: Optional[PriorityInput]
    ) -> Ticket:
        """
        Set impact/urgency/final/red flag/priority on a ticket.

        Tickets filed without a questionnaire keep zero scores and P3.
        """
        if priority_input is None:
            return ticket.model_copy(update={
                "impact_score": 0,
                "urgency_score": 0,
                "final_score": 0,
                "red_flag": False,
                "priority": Priority.P3,
                "updated_at": datetime.utcnow(),
            })

        result = self.priority_scorer.calculate(priority_input)
        logger.info(
            "ticket.priority_applied",
            ticket_id=str(ticket.id),
            priority=result.priority.value,
            final=result.final,
        )
        return ticket.model_copy(update={
            "impact_score": result.impact,
            "urgency_score": result.urgency,
            "final_score": result.final,
            "red_flag": result.red_flag,
            "priority": result.priority,
            "updated_at": datetime.utcnow(),
        })

    def apply_effort(
        self,
        ticket: Ticket,
        effort_input: Optional[EffortInput],
        client_hint: Optional[int] = None
    ) -> Ticket:
        """Recompute effort_score from the checklist and store both."""
        checklist = effort_input or EffortInput()
        score = self.recompute_effort(checklist, client_hint, ticket_id=ticket.id)

        return ticket.model_copy(update={
            "effort_score": score,
            "effort_data": checklist,
            "updated_at": datetime.utcnow(),
        })

    def recompute_effort(
        self,
        effort_input: Optional[EffortInput],
        client_hint: Optional[int] = None,
        ticket_id: Optional[UUID] = None
    ) -> int:
        """Authoritative effort score; a disagreeing client hint is logged and dropped."""
        score = self.effort_scorer.calculate(effort_input)
        if client_hint is not None and client_hint != score:
            logger.warning(
                "effort.hint_mismatch",
                ticket_id=str(ticket_id) if ticket_id else None,
                client_hint=client_hint,
                effort_score=score,
            )
        return score
