"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Project is the aggregate root for tasks; ActivityLog references but never owns

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from backlog.models.project import Project  # noqa: F401
from backlog.models.task import Task  # noqa: F401
from backlog.models.activity_log import ActivityLog  # noqa: F401
