"""
Workout template API schemas.
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TemplateSummary(BaseModel):
    """What a day view needs to know about a template."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: uuid.UUID
    name: str
    exercise_count: int = Field(0, ge=0)
    estimated_duration_minutes: int = Field(..., ge=0)
    set_count: int = Field(0, ge=0)
