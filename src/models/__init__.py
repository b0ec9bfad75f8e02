"""
Ticket Scoring Models

Priority questionnaire + effort checklist + points ledger
"""

from .enums import (
    TicketStatus,
    TicketInitialType,
    Priority,
    Urgency,
    CollaborationLevel,
)
from .scoring import (
    # Priority
    RedFlags,
    ImpactFactors,
    PriorityInput,
    PriorityResult,

    # Effort
    DevelopmentEffort,
    SecurityEffort,
    DataEffort,
    OperationsEffort,
    EffortInput,
    EffortResult,

    # Collaboration
    CollaborationResult,
)
from .ticket import (
    Ticket,
    PointsAward,
    RankingUser,
    UserRanking,
)

__all__ = [
    "TicketStatus", "TicketInitialType", "Priority", "Urgency", "CollaborationLevel",
    "RedFlags", "ImpactFactors", "PriorityInput", "PriorityResult",
    "DevelopmentEffort", "SecurityEffort", "DataEffort", "OperationsEffort",
    "EffortInput", "EffortResult",
    "CollaborationResult",
    "Ticket", "PointsAward", "RankingUser", "UserRanking",
]
