"""
Ticket Scoring Ticket Model

Ticket records as seen by the scoring engine, plus the points ledger
and leaderboard rows built from completed tickets.

Core principles:
1. Scores are computed, never typed in by hand
2. Effort is recomputed server side from the checklist
3. Points are split between assignees when a ticket completes
4. Rankings are derived from the points ledger on read
"""

from datetime import datetime
from typing import Optional, List
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import Priority, TicketInitialType, TicketStatus
from .scoring import EffortInput


class Ticket(BaseModel):
    """
    An IT ticket: issue report, change request or service request.

    Priority fields are filled from the priority questionnaire,
    effort_score from the effort checklist.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    title: str
    description: Optional[str] = None
    initial_type: TicketInitialType = TicketInitialType.ISSUE_REPORT
    status: TicketStatus = TicketStatus.PENDING

    # Priority questionnaire output
    impact_score: int = 0
    urgency_score: int = 0
    final_score: int = 0
    red_flag: bool = False
    priority: Priority = Priority.P3

    # Effort checklist
    effort_score: int = 0
    effort_data: Optional[EffortInput] = None

    # Assignment (owned by the assignment subsystem)
    assignee_ids: List[UUID] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class PointsAward(BaseModel):
    """Points one user earned from one completed ticket."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: UUID
    ticket_id: UUID
    points: float
    ticket_created_at: Optional[datetime] = None
    awarded_at: datetime = Field(default_factory=datetime.utcnow)


class RankingUser(BaseModel):
    """A user eligible for the leaderboard."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    name: str
    email: Optional[str] = None
    role: str = "User"  # User, Supervisor, Manager


class UserRanking(BaseModel):
    """One leaderboard row."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    name: str
    email: Optional[str] = None
    role: str = "User"
    total_points: float = 0.0
    tickets_completed: int = 0
    rank: int
