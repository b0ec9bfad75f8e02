"""
Ticket Scoring API

FastAPI application with:
- Priority questionnaire scoring
- Effort checklist scoring
- Collaboration point allocation
- Points distribution for completed tickets
- Leaderboard rankings

Handlers are stateless: they validate, score and return.
Persisting results is up to the ticket service that calls them.
"""

from contextlib import asynccontextmanager
from typing import Optional, List
from uuid import UUID

import structlog
from fastapi import FastAPI, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .. import __version__
from ..config import Settings, get_settings
from ..models import (
    EffortInput,
    EffortResult,
    PointsAward,
    PriorityInput,
    RankingUser,
    Ticket,
)
from ..services import (
    CollaborationAllocator,
    EffortScorer,
    PointsService,
    PriorityScorer,
    RankingService,
    ScoringError,
    TicketScoringService,
)
from .middleware import LoggingMiddleware, configure_structlog

logger = structlog.get_logger(__name__)


# =============================================================================
# APP SETUP
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_structlog()
    logger.info("app.startup", environment=get_settings().ENVIRONMENT.value)
    yield


app = FastAPI(
    title="Ticket Scoring Engine",
    description="Priority, effort and collaboration scoring for IT tickets",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def envelope(data) -> dict:
    return {"data": data}


def error_envelope(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}


@app.exception_handler(ScoringError)
async def scoring_error_handler(request: Request, exc: ScoringError):
    logger.warning("request.rejected", path=request.url.path, reason=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope("BAD_REQUEST", str(exc)),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.warning("request.invalid", path=request.url.path, reason=message)
    return JSONResponse(
        status_code=422,
        content=error_envelope("VALIDATION_ERROR", message),
    )


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_priority_scorer() -> PriorityScorer:
    return PriorityScorer()


def get_effort_scorer() -> EffortScorer:
    return EffortScorer()


def get_collaboration_allocator() -> CollaborationAllocator:
    return CollaborationAllocator()


def get_ticket_scoring_service() -> TicketScoringService:
    return TicketScoringService()


def get_points_service() -> PointsService:
    return PointsService()


def get_ranking_service() -> RankingService:
    return RankingService()


# =============================================================================
# REQUEST MODELS
# =============================================================================

class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CollaborationRequest(ApiModel):
    base_score: int = 0
    assignee_count: int = 0


class DistributePointsRequest(ApiModel):
    ticket_id: UUID
    effort_data: Optional[EffortInput] = None
    effort_score: Optional[int] = None  # Client hint, display only
    assignee_ids: List[UUID] = Field(default_factory=list)


class ScoreTicketRequest(ApiModel):
    ticket: Ticket
    priority_input: Optional[PriorityInput] = None
    effort_data: Optional[EffortInput] = None
    effort_score: Optional[int] = None  # Client hint, display only


class RankingsRequest(ApiModel):
    users: List[RankingUser] = Field(default_factory=list)
    awards: List[PointsAward] = Field(default_factory=list)
    limit: Optional[int] = Field(default=None, ge=1)
    month: Optional[int] = Field(default=None, ge=1, le=12)
    year: Optional[int] = None


# =============================================================================
# HEALTH CHECK
# =============================================================================

@app.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "service": "ticket-scoring-engine",
        "version": __version__,
        "environment": settings.ENVIRONMENT.value
    }


# =============================================================================
# SCORING ENDPOINTS
# =============================================================================

@app.post("/priority/compute")
async def compute_priority(
    request: PriorityInput,
    scorer: PriorityScorer = Depends(get_priority_scorer)
):
    """
    Score a priority questionnaire.

    Any red flag forces P0 with final 10.
    """
    result = scorer.calculate(request)
    return envelope(result.model_dump(by_alias=True, mode="json"))


@app.post("/effort/compute")
async def compute_effort(
    request: EffortInput,
    scorer: EffortScorer = Depends(get_effort_scorer)
):
    """Count ticked effort checklist items (0-12)."""
    result = EffortResult(base_score=scorer.calculate(request))
    return envelope(result.model_dump(by_alias=True))


@app.post("/collaboration/compute")
async def compute_collaboration(
    request: CollaborationRequest,
    allocator: CollaborationAllocator = Depends(get_collaboration_allocator),
    settings: Settings = Depends(get_settings)
):
    """
    Collaboration pool for a ticket.

    Negative assignee counts are treated as zero.
    """
    result = allocator.calculate(request.base_score, request.assignee_count)
    data = result.model_dump(by_alias=True, mode="json")
    data["pointsPerPerson"] = round(result.points_per_person, settings.POINTS_DISPLAY_DECIMALS)
    return envelope(data)


@app.post("/tickets/score")
async def score_ticket(
    request: ScoreTicketRequest,
    ticket_scoring: TicketScoringService = Depends(get_ticket_scoring_service)
):
    """
    Apply priority and effort scores to a ticket record.

    Tickets without a questionnaire stay P3 with zero scores.
    """
    ticket = ticket_scoring.apply_priority(request.ticket, request.priority_input)
    ticket = ticket_scoring.apply_effort(
        ticket,
        request.effort_data,
        client_hint=request.effort_score,
    )
    return envelope(ticket.model_dump(by_alias=True, mode="json"))


# =============================================================================
# POINTS & RANKINGS
# =============================================================================

@app.post("/points/distribute")
async def distribute_points(
    request: DistributePointsRequest,
    ticket_scoring: TicketScoringService = Depends(get_ticket_scoring_service),
    points: PointsService = Depends(get_points_service),
    settings: Settings = Depends(get_settings)
):
    """
    Split a completed ticket's points between its assignees.

    The effort score is recomputed from effortData; the client's
    effortScore is only compared against it.
    """
    base = ticket_scoring.recompute_effort(
        request.effort_data,
        client_hint=request.effort_score,
        ticket_id=request.ticket_id,
    )
    awards = points.distribute_points(request.ticket_id, base, request.assignee_ids)
    return envelope({
        "ticketId": str(request.ticket_id),
        "effortScore": base,
        "awards": [
            {
                "userId": str(a.user_id),
                "points": round(a.points, settings.POINTS_DISPLAY_DECIMALS),
            }
            for a in awards
        ],
    })


@app.post("/rankings")
async def rankings(
    request: RankingsRequest,
    ranking: RankingService = Depends(get_ranking_service),
    settings: Settings = Depends(get_settings)
):
    """
    Leaderboard from a points ledger.

    Optional month/year filter by ticket creation date.
    """
    limit = min(request.limit or settings.RANKINGS_DEFAULT_LIMIT, settings.RANKINGS_MAX_LIMIT)
    rows = ranking.build_rankings(
        request.users,
        request.awards,
        limit=limit,
        month=request.month,
        year=request.year,
    )
    data = []
    for row in rows:
        item = row.model_dump(by_alias=True, mode="json")
        item["totalPoints"] = round(row.total_points, settings.POINTS_DISPLAY_DECIMALS)
        data.append(item)
    return envelope(data)
