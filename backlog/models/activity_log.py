"""ActivityLog ORM — immutable, append-only audit trail of agent actions.

Invariants:
    - Rows are inserted, never updated or deleted by the service
    - agent is non-nullable (defaults to "system" upstream)
    - project_id / related_id are weak references: indexed, no foreign key

Design Decisions:
    - No FK to projects/tasks: the trail never couples to entity lifecycles
    - JSON details: each action carries its own payload shape
"""

import uuid
from datetime import datetime

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from backlog.db.base import Base
from backlog.models.project import _utcnow


class ActivityLog(Base):
    """One action by one actor."""
    __tablename__ = "activity_log"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    project_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), nullable=True, index=True,
    )
    team: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    agent: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    action: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    details: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    related_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), nullable=True, index=True,
    )
    related_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
