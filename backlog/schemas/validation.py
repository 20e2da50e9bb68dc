"""Input Parsing — converts pydantic validation failures into ToolValidationError.

Invariants:
    - Every datetime crossing the schema layer is UTC-aware: naive values are
      read as UTC (SQLite drops the offset on DateTime(timezone=True) columns)
"""

from datetime import datetime, timezone
from typing import Annotated, TypeVar

from pydantic import AfterValidator, BaseModel, ValidationError

from backlog.core.errors import ToolValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _as_utc(v: datetime) -> datetime:
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


def parse_input(schema: type[ModelT], input_data: dict) -> ModelT:
    """Validate raw tool input. The first failing field names the error."""
    try:
        return schema.model_validate(input_data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or "input"
        raise ToolValidationError(f"Invalid '{field}': {first['msg']}", field) from e
