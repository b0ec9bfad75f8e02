"""Deterministic scoring tests for EffortScorer.

Covers:
    - Empty checklist -> 0
    - Full checklist -> 12
    - Score equals the number of ticked items
    - Missing categories and None flags count as unticked
"""

import itertools

import pytest

from src.models import EffortInput
from src.services.effort import EffortScorer, compute_effort_base


CHECKLIST = {
    "development": ["versionControl", "externalService", "internalIntegration"],
    "security": ["legalCompliance", "accessControl", "personalData"],
    "data": ["migration", "dataPreparation", "encryption"],
    "operations": ["offHours", "training", "uat"],
}
ITEMS = [(category, item) for category, items in CHECKLIST.items() for item in items]


def _checklist(ticked) -> dict:
    data = {category: {} for category in CHECKLIST}
    for category, item in ticked:
        data[category][item] = True
    return data


class TestEffortScorer:
    """Effort base score from the 12-item checklist."""

    def test_empty_checklist_is_zero(self) -> None:
        assert compute_effort_base(EffortInput()) == 0

    def test_none_is_zero(self) -> None:
        assert compute_effort_base(None) == 0

    def test_full_checklist_is_twelve(self) -> None:
        assert compute_effort_base(_checklist(ITEMS)) == 12

    @pytest.mark.parametrize("count", [1, 3, 5, 7, 11])
    def test_score_counts_ticked_items(self, count: int) -> None:
        ticked = ITEMS[:count]
        assert compute_effort_base(_checklist(ticked)) == count

    def test_single_category(self) -> None:
        ticked = [("security", item) for item in CHECKLIST["security"]]
        assert compute_effort_base(_checklist(ticked)) == 3

    def test_every_pair_of_items(self) -> None:
        scorer = EffortScorer()
        for pair in itertools.combinations(ITEMS, 2):
            assert scorer.calculate(_checklist(pair)) == 2

    def test_missing_categories(self) -> None:
        assert compute_effort_base({"data": {"migration": True}}) == 1

    def test_null_category_and_flags(self) -> None:
        data = {
            "development": None,
            "operations": {"uat": True, "training": None, "offHours": False},
        }
        assert compute_effort_base(data) == 1

    def test_unticked_flags_ignored(self) -> None:
        data = _checklist(ITEMS)
        data["development"]["versionControl"] = False
        assert compute_effort_base(data) == 11

    def test_snake_case_fields_accepted(self) -> None:
        checklist = EffortInput(
            development={"version_control": True},
            operations={"off_hours": True},
        )
        assert compute_effort_base(checklist) == 2
