"""
Workout plan endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from coachweek.api.dependencies import get_client
from coachweek.db.session import get_db
from coachweek.models.profile import Profile
from coachweek.schemas.workout_plan import PlanCleanupResponse, WorkoutPlanCreate, WorkoutPlanResponse
from coachweek.services.workout_plan_service import WorkoutPlanService

router = APIRouter()


@router.post("/{client_id}/plans", summary="Create a recurring plan for a client.",
             response_model=WorkoutPlanResponse, status_code=status.HTTP_201_CREATED, )
def create_plan(data: WorkoutPlanCreate, client: Profile = Depends(get_client), db: Session = Depends(get_db), ):
    return WorkoutPlanService(db).create(client.id, data)


@router.get("/{client_id}/plans", summary="List a client's plans.", response_model=list[WorkoutPlanResponse], )
def list_plans(client: Profile = Depends(get_client), db: Session = Depends(get_db), ):
    return WorkoutPlanService(db).get_client_plans(client.id)


@router.post("/{client_id}/plans/cleanup", summary="Clear schedule entries pointing at missing templates.",
             response_model=PlanCleanupResponse, )
def cleanup_plans(client: Profile = Depends(get_client), db: Session = Depends(get_db), ):
    return WorkoutPlanService(db).cleanup_invalid_template_ids(client.id)
