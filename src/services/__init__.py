"""
Ticket Scoring Services

Priority, effort and collaboration scoring plus the points ledger
built on top of them.
"""

from .priority import PriorityScorer, compute_priority
from .effort import EffortScorer, compute_effort_base
from .collaboration import CollaborationAllocator, compute_collaboration
from .ticket_scoring import TicketScoringService
from .points import PointsService, ScoringError, PointsDistributionError
from .ranking import RankingService, effort_growth_rate

__all__ = [
    # Scoring core
    "PriorityScorer", "compute_priority",
    "EffortScorer", "compute_effort_base",
    "CollaborationAllocator", "compute_collaboration",

    # Tickets
    "TicketScoringService",

    # Points ledger
    "PointsService", "ScoringError", "PointsDistributionError",

    # Leaderboard
    "RankingService", "effort_growth_rate",
]
