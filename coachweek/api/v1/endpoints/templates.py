"""
Workout template endpoints.
"""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from coachweek.db.session import get_db
from coachweek.schemas.workout_template import TemplateSummary
from coachweek.services.template_resolver import SQLTemplateResolver

router = APIRouter()


@router.get("/{template_id}/summary", summary="Exercise count and duration of a template.",
            response_model=TemplateSummary, )
def get_template_summary(template_id: uuid.UUID, db: Session = Depends(get_db), ):
    summary = SQLTemplateResolver(db).resolve(template_id)
    if summary is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout template not found")
    return summary
