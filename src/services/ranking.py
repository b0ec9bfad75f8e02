"""
Ticket Scoring Ranking Service

Points ledger -> leaderboard.

Ordering: total points descending, then name ascending.
Users without awards still appear, with zero points.
"""

from collections import defaultdict
from typing import Iterable, List, Optional

from ..models.ticket import PointsAward, RankingUser, UserRanking


class RankingService:
    """
    Leaderboard aggregation.

    Period filter uses the ticket's creation date:
    - year only: whole year
    - year + month: that month
    - month without year: ignored (all time)
    """

    def build_rankings(
        self,
        users: Iterable[RankingUser],
        awards: Iterable[PointsAward],
        limit: Optional[int] = None,
        month: Optional[int] = None,
        year: Optional[int] = None
    ) -> List[UserRanking]:
        totals = defaultdict(float)
        counts = defaultdict(int)

        for award in awards:
            if not self._in_period(award, month, year):
                continue
            totals[award.user_id] += award.points
            counts[award.user_id] += 1

        ordered = sorted(
            users,
            key=lambda u: (-totals.get(u.id, 0.0), u.name)
        )
        if limit is not None:
            ordered = ordered[:max(0, limit)]

        return [
            UserRanking(
                id=user.id,
                name=user.name,
                email=user.email,
                role=user.role,
                total_points=totals.get(user.id, 0.0),
                tickets_completed=counts.get(user.id, 0),
                rank=position,
            )
            for position, user in enumerate(ordered, start=1)
        ]

    @staticmethod
    def _in_period(
        award: PointsAward,
        month: Optional[int],
        year: Optional[int]
    ) -> bool:
        if year is None:
            return True
        created = award.ticket_created_at
        if created is None or created.year != year:
            return False
        return month is None or created.month == month


def effort_growth_rate(current: int, previous: int) -> float:
    """
    Month-over-month effort growth in percent.

    - previous > 0: (current - previous) / previous x 100
    - previous == 0, current > 0: 100.0
    - both zero: 0.0
    """
    if previous > 0:
        return (current - previous) / previous * 100
    if current > 0:
        return 100.0
    return 0.0
