"""
Ticket Scoring Engine

Scoring core for the IT ticket system:
- Priority questionnaire (red flags, impact, urgency) -> P0..P3
- Effort checklist -> base score 0-12
- Collaboration bonus -> per-assignee points
- Points ledger -> leaderboard
"""

__version__ = "0.1.0"
