"""
Workout plan repository.
"""

import datetime
import uuid
from typing import Optional

from sqlalchemy import or_
from sqlmodel import Session, col, select

from coachweek.models.workout_plan import PlanStatus, WorkoutPlan


class WorkoutPlanRepository:
    """Repository for WorkoutPlan database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, plan: WorkoutPlan) -> WorkoutPlan:
        self.session.add(plan)
        self.session.commit()
        self.session.refresh(plan)
        return plan

    def get_by_id(self, plan_id: uuid.UUID) -> Optional[WorkoutPlan]:
        return self.session.get(WorkoutPlan, plan_id)

    def get_all_by_client(self, client_id: uuid.UUID) -> list[WorkoutPlan]:
        statement = (select(WorkoutPlan).where(WorkoutPlan.client_id == client_id)
                     .order_by(WorkoutPlan.created_at))
        return list(self.session.exec(statement).all())

    def get_active_for_client(self, client_id: uuid.UUID, start: datetime.date,
                              end: datetime.date) -> list[WorkoutPlan]:
        """Active plans overlapping ``[start, end]``, oldest first.

        A plan without a start (end) date is open on that side.
        """
        statement = (select(WorkoutPlan).where(WorkoutPlan.client_id == client_id,
                                               WorkoutPlan.status == PlanStatus.ACTIVE,
                                               or_(col(WorkoutPlan.start_date).is_(None),
                                                   col(WorkoutPlan.start_date) <= end),
                                               or_(col(WorkoutPlan.end_date).is_(None),
                                                   col(WorkoutPlan.end_date) >= start), )
                     .order_by(WorkoutPlan.created_at))
        return list(self.session.exec(statement).all())

    def update(self, plan: WorkoutPlan) -> WorkoutPlan:
        self.session.add(plan)
        self.session.commit()
        self.session.refresh(plan)
        return plan
