"""
Ticket Scoring Enums

Shared vocabulary for tickets, priority questionnaires and the
collaboration point brackets.
"""

from enum import Enum


class TicketStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELED = "canceled"


class TicketInitialType(str, Enum):
    ISSUE_REPORT = "ISSUE_REPORT"
    CHANGE_REQUEST_NORMAL = "CHANGE_REQUEST_NORMAL"
    SERVICE_REQUEST_DATA_CORRECTION = "SERVICE_REQUEST_DATA_CORRECTION"
    SERVICE_REQUEST_DATA_EXTRACTION = "SERVICE_REQUEST_DATA_EXTRACTION"
    SERVICE_REQUEST_ADVISORY = "SERVICE_REQUEST_ADVISORY"
    SERVICE_REQUEST_GENERAL = "SERVICE_REQUEST_GENERAL"


class Priority(str, Enum):
    P0 = "P0"  # Red flag or final score 10
    P1 = "P1"  # Final 8-9
    P2 = "P2"  # Final 5-7
    P3 = "P3"  # Final 0-4


class Urgency(str, Enum):
    """Deadline bucket selected on the priority questionnaire."""
    WITHIN_48H = "<=48h"
    WITHIN_WEEK = "3-7d"
    WITHIN_MONTH = "8-30d"
    LATER = ">=31d"
    NONE = "none"


class CollaborationLevel(str, Enum):
    NONE = "No collaboration"
    BASIC = "Basic collaboration"
    GOOD = "Good collaboration"
    HIGH = "High collaboration"
    MAXIMUM = "Maximum collaboration"
