"""Task ORM — a unit of assignable work belonging to a project.

Invariants:
    - Always belongs to a Project (project_id FK, immutable after creation)
    - parent_id optionally links a subtask to its parent (acyclicity not enforced)
    - assigned_team / assigned_agent stored lowercase
    - started_at / completed_at written once, by core/task_lifecycle.py
    - blocker_reason non-null only while status == "blocked"

Design Decisions:
    - JSON lists for tags/deliverables instead of ARRAY: same schema on PostgreSQL and SQLite
    - Index on every column used as an equality filter by the task listings
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, Float, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from backlog.db.base import Base
from backlog.models.project import _utcnow


class Task(Base):
    """Task entity: lifecycle governed by status side-effect rules."""
    __tablename__ = "tasks"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    project_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    parent_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("tasks.id", ondelete="SET NULL"),
        nullable=True,
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="backlog", index=True,
    )
    priority: Mapped[str] = mapped_column(
        String(20), nullable=False, default="medium", index=True,
    )
    assigned_team: Mapped[str | None] = mapped_column(
        String(100), nullable=True, index=True,
    )
    assigned_agent: Mapped[str | None] = mapped_column(
        String(100), nullable=True, index=True,
    )
    estimated_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    actual_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    started_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    blocker_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    deliverables: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    metadata_: Mapped[dict] = mapped_column(
        "metadata", JSON, nullable=False, default=dict,
    )
    created_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    updated_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    # Relationships
    project: Mapped["Project"] = relationship("Project", back_populates="tasks")
