"""
Workout plan service.

Besides plain create / list, this owns the schedule clean-up: plan
entries pointing at templates that no longer exist are reset to
``None`` so the weekly view stops offering them.
"""

import datetime
import uuid

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from coachweek.db.repositories.profile import ProfileRepository
from coachweek.db.repositories.workout_plan import WorkoutPlanRepository
from coachweek.db.repositories.workout_template import WorkoutTemplateRepository
from coachweek.models.workout_plan import WorkoutPlan
from coachweek.schemas.workout_plan import PlanCleanupResponse, WorkoutPlanCreate, WorkoutPlanResponse
from coachweek.utils.parsing import parse_template_id, schedule_mapping


class WorkoutPlanService:
    """Service for workout plan business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutPlanRepository(session)
        self.templates = WorkoutTemplateRepository(session)
        self.profiles = ProfileRepository(session)

    def create(self, client_id: uuid.UUID, data: WorkoutPlanCreate) -> WorkoutPlanResponse:
        if not self.profiles.get_by_id(data.trainer_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                detail=f"Unknown trainer: '{data.trainer_id}'", )

        plan = WorkoutPlan(client_id=client_id, **data.model_dump())
        plan = self.repository.create(plan)
        return WorkoutPlanResponse.model_validate(plan)

    def get_client_plans(self, client_id: uuid.UUID) -> list[WorkoutPlanResponse]:
        return [WorkoutPlanResponse.model_validate(p) for p in self.repository.get_all_by_client(client_id)]

    def cleanup_invalid_template_ids(self, client_id: uuid.UUID) -> PlanCleanupResponse:
        """Null out schedule entries whose template is malformed or missing.

        Returns:
            How many plans were inspected and how many entries were cleared.
        """
        plans = self.repository.get_all_by_client(client_id)
        referenced = {parse_template_id(v) for p in plans for v in schedule_mapping(p.schedule_data).values()}
        existing = self.templates.existing_ids(t for t in referenced if t is not None)

        cleared = 0
        for plan in plans:
            schedule = dict(schedule_mapping(plan.schedule_data))
            changed = False
            for day, raw in schedule.items():
                if raw is None:
                    continue
                template_id = parse_template_id(raw)
                if template_id is None or template_id not in existing:
                    logger.info(f"Clearing invalid template {raw!r} from plan '{plan.name}' ({day})")
                    schedule[day] = None
                    changed = True
                    cleared += 1
            if changed:
                plan.schedule_data = schedule
                plan.updated_at = datetime.datetime.utcnow()
                self.repository.update(plan)

        return PlanCleanupResponse(plans_checked=len(plans), cleared=cleared)
