"""Domain Types — rich types that replace bare primitives in the catalog.

Invariants:
    - ServiceId is the slug form used in URLs (`/api/services/{id}`)
    - All valid service states encoded as an Enum — no raw string matching

Design Decisions:
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ServiceId = NewType("ServiceId", str)
UserId = NewType("UserId", int)


# ─── Enums ───────────────────────────────────────────────────────

class ServiceStatus(str, Enum):
    """Service lifecycle states as reported by the catalog."""
    RUNNING = "running"
    MAINTENANCE = "maintenance"
    DEPLOYING = "deploying"


class UserRole(str, Enum):
    DEVELOPER = "developer"
    DESIGNER = "designer"
    MANAGER = "manager"
