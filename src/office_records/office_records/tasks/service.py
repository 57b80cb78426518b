from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_optional_date
from ..common.validators import optional_text, pick_fields, require_choice, require_non_empty, require_role
from ..core.enums import AdminRole, TaskPriority, TaskStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .repository import TaskRepository

logger = logging.getLogger(__name__)

TASK_ASSIGNERS = (AdminRole.HOD, AdminRole.SUPER_ADMIN)

_UPDATABLE = ("title", "description", "due_date", "priority", "status")


class TaskService:
    def __init__(self, tasks: TaskRepository):
        self._tasks = tasks

    def fetch_assigned_tasks(self, admin_id: int) -> Sequence[dict]:
        return self._tasks.list_assigned_by(int(admin_id))

    def add_task(
        self,
        *,
        current_role: AdminRole,
        title: str,
        employee_id: str,
        assigned_by: int,
        due_date: Optional[date],
        priority: str = TaskPriority.MEDIUM.value,
        description: Optional[str] = None,
        status: Optional[str] = None,
    ) -> str:
        require_role(current_role, *TASK_ASSIGNERS)
        if not due_date:
            raise ValidationError("Due date is required")

        task_id = str(uuid.uuid4())
        self._tasks.create(
            {
                "task_id": task_id,
                "title": require_non_empty(title, "Title"),
                "description": optional_text(description),
                "employee_id": require_non_empty(employee_id, "Employee"),
                "assigned_by": int(assigned_by),
                "due_date": due_date,
                "priority": require_choice(priority or TaskPriority.MEDIUM.value, TaskPriority, "priority").value,
                "status": require_choice(status or TaskStatus.PENDING.value, TaskStatus, "status").value,
            }
        )
        logger.info("task %s assigned to employee %s", task_id, employee_id)
        return task_id

    def update_task(self, *, current_role: AdminRole, task_id: str, data: dict) -> None:
        require_role(current_role, *TASK_ASSIGNERS)
        fields = pick_fields(data, _UPDATABLE)
        if "title" in fields:
            fields["title"] = require_non_empty(fields["title"], "Title")
        if "due_date" in fields:
            fields["due_date"] = parse_optional_date(fields["due_date"], "due date")
            if not fields["due_date"]:
                raise ValidationError("Due date is required")
        if "priority" in fields:
            fields["priority"] = require_choice(fields["priority"], TaskPriority, "priority").value
        if "status" in fields:
            fields["status"] = require_choice(fields["status"], TaskStatus, "status").value
        if not self._tasks.update(task_id, fields):
            raise NotFoundError("Task not found")

    def fetch_employee_tasks(self, employee_id: Optional[str]) -> Sequence[dict]:
        return self._tasks.list_for_employee(require_non_empty(employee_id, "Employee"))

    def fetch_finished_tasks(self, employee_id: Optional[str]) -> Sequence[dict]:
        return self._tasks.list_for_employee(
            require_non_empty(employee_id, "Employee"), status=TaskStatus.COMPLETED.value
        )

    def update_task_status(self, *, task_id: str, employee_id: Optional[str], status: str) -> None:
        new_status = require_choice(status, TaskStatus, "status")
        task = self._tasks.get_by_id(task_id)
        if not task:
            raise NotFoundError("Task not found")
        if task["employee_id"] != employee_id:
            raise AuthorizationError("You can only update your own tasks")
        self._tasks.update(task_id, {"status": new_status.value})
        logger.info("task %s moved to %s", task_id, new_status.value)
