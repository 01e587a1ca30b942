"""
Workout template repository.
"""

import uuid
from typing import Iterable, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import Session, col, select

from coachweek.models.workout_template import WorkoutTemplate


class WorkoutTemplateRepository:
    """Repository for WorkoutTemplate database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, template: WorkoutTemplate) -> WorkoutTemplate:
        self.session.add(template)
        self.session.commit()
        self.session.refresh(template)
        return template

    def get_by_id(self, template_id: uuid.UUID) -> Optional[WorkoutTemplate]:
        """Get a template with its exercises loaded."""
        statement = (select(WorkoutTemplate).where(WorkoutTemplate.id == template_id)
                     .options(selectinload(WorkoutTemplate.exercises)))
        return self.session.exec(statement).first()

    def existing_ids(self, template_ids: Iterable[uuid.UUID]) -> set[uuid.UUID]:
        """The subset of ``template_ids`` that exist."""
        ids = list(set(template_ids))
        if not ids:
            return set()
        statement = select(WorkoutTemplate.id).where(col(WorkoutTemplate.id).in_(ids))
        return set(self.session.exec(statement).all())
