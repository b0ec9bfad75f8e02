"""
Scoring Questionnaire Models

Inputs and results of the priority / effort / collaboration engine.

Every questionnaire field is optional. Validation happens here, once,
at the boundary: missing flags become False, a missing or unknown
urgency becomes Urgency.NONE. The scorers can then read plain
attributes without null checks.

Wire format is camelCase (redFlags.paymentsFailing, operations.uat, ...);
Python attributes are snake_case. Both are accepted on input.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .enums import CollaborationLevel, Priority, Urgency


class ScoringModel(BaseModel):
    """Immutable camelCase model shared by all scoring types."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class FlagSet(ScoringModel):
    """
    A group of named boolean flags.

    None for the whole group, or for any single flag, means
    "not selected".
    """

    @model_validator(mode="before")
    @classmethod
    def _default_unset_flags(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def selected(self) -> int:
        """Number of flags set to True."""
        return sum(1 for name in type(self).model_fields if getattr(self, name))


# =============================================================================
# PRIORITY
# =============================================================================

class RedFlags(FlagSet):
    outage: bool = False
    payments_failing: bool = False
    security_breach: bool = False
    non_compliance: bool = False


class ImpactFactors(FlagSet):
    lost_revenue: bool = False
    core_processes: bool = False
    data_loss: bool = False


class PriorityInput(ScoringModel):
    """Red flag / impact / urgency questionnaire filled in on a ticket."""
    red_flags: RedFlags = Field(default_factory=RedFlags)
    impact: ImpactFactors = Field(default_factory=ImpactFactors)
    urgency: Urgency = Urgency.NONE

    @model_validator(mode="before")
    @classmethod
    def _default_missing(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("red_flags", "impact", mode="before")
    @classmethod
    def _empty_group(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("urgency", mode="before")
    @classmethod
    def _known_urgency(cls, value: Any) -> Urgency:
        try:
            return Urgency(value)
        except (ValueError, TypeError):
            return Urgency.NONE


class PriorityResult(ScoringModel):
    red_flag: bool
    impact: int = Field(ge=0, le=6)
    urgency: int = Field(ge=0, le=4)
    final: int = Field(ge=0, le=10)
    priority: Priority


# =============================================================================
# EFFORT
# =============================================================================

class DevelopmentEffort(FlagSet):
    version_control: bool = False
    external_service: bool = False
    internal_integration: bool = False


class SecurityEffort(FlagSet):
    legal_compliance: bool = False
    access_control: bool = False
    personal_data: bool = False


class DataEffort(FlagSet):
    migration: bool = False
    data_preparation: bool = False
    encryption: bool = False


class OperationsEffort(FlagSet):
    off_hours: bool = False
    training: bool = False
    uat: bool = False


class EffortInput(ScoringModel):
    """Effort checklist: four categories of three items, one point each."""
    development: DevelopmentEffort = Field(default_factory=DevelopmentEffort)
    security: SecurityEffort = Field(default_factory=SecurityEffort)
    data: DataEffort = Field(default_factory=DataEffort)
    operations: OperationsEffort = Field(default_factory=OperationsEffort)

    @model_validator(mode="before")
    @classmethod
    def _default_missing(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("development", "security", "data", "operations", mode="before")
    @classmethod
    def _empty_category(cls, value: Any) -> Any:
        return {} if value is None else value

    def categories(self) -> list:
        return [self.development, self.security, self.data, self.operations]


class EffortResult(ScoringModel):
    base_score: int = Field(ge=0, le=12)


# =============================================================================
# COLLABORATION
# =============================================================================

class CollaborationResult(ScoringModel):
    """
    Point pool for a ticket worked by several assignees.

    points_per_person is the only fractional value in the engine;
    rounding for display is left to the caller.
    """
    assignee_count: int = Field(ge=0)
    level: CollaborationLevel
    bonus_per_person: int
    total_pool: int
    points_per_person: float
