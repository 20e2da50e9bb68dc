"""Dashboard Schemas — project_dashboard input."""

from uuid import UUID

from pydantic import BaseModel


class DashboardInput(BaseModel):
    project_id: UUID
