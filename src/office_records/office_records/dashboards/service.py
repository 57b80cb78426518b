from __future__ import annotations

from typing import Optional

from ..admins.repository import AdminRepository
from ..common.validators import require_role
from ..core.constants import DEFAULT_RECENT_LIMIT
from ..core.enums import AdminRole, EmployeeStatus, LeaveStatus, RecordStatus, TaskStatus
from ..departments.repository import DepartmentRepository
from ..employees.repository import EmployeeRepository
from ..files.repository import FileRepository
from ..forwarding.repository import ForwardingRepository
from ..leaves.repository import LeaveRepository
from ..performance.repository import PerformanceRepository
from ..proposals.repository import ProposalRepository
from ..records.repository import RecordRepository
from ..tasks.repository import TaskRepository


class DashboardService:
    """Read-only summary counters, one method per role dashboard."""

    def __init__(
        self,
        *,
        admins: AdminRepository,
        departments: DepartmentRepository,
        employees: EmployeeRepository,
        files: FileRepository,
        records: RecordRepository,
        forwarding: ForwardingRepository,
        leaves: LeaveRepository,
        tasks: TaskRepository,
        performance: PerformanceRepository,
        proposals: ProposalRepository,
    ):
        self._admins = admins
        self._departments = departments
        self._employees = employees
        self._files = files
        self._records = records
        self._forwarding = forwarding
        self._leaves = leaves
        self._tasks = tasks
        self._performance = performance
        self._proposals = proposals

    def hr_summary(self, *, current_role: AdminRole) -> dict:
        require_role(current_role, AdminRole.HUMAN_RESOURCE, AdminRole.SUPER_ADMIN)
        return {
            "activeEmployees": self._employees.count_by_status(EmployeeStatus.ACTIVE.value),
            "pendingLeaves": self._leaves.count_by_status(LeaveStatus.PENDING),
            "upcomingReviews": self._performance.count_pending(),
            "departments": self._departments.count(),
        }

    def hod_summary(
        self, *, current_role: AdminRole, department_id: Optional[int], employee_id: Optional[str]
    ) -> dict:
        require_role(current_role, AdminRole.HOD)
        employees = self._employees.list_by_department(int(department_id)) if department_id else []
        return {
            "totalEmployees": len(employees),
            "pendingProposals": (
                self._proposals.count_pending_in_department(int(department_id)) if department_id else 0
            ),
            "upcomingReviews": self._performance.count_pending(employee_id=employee_id) if employee_id else 0,
            "pendingTasks": (
                self._tasks.count_for_employee(employee_id, status=TaskStatus.PENDING.value) if employee_id else 0
            ),
        }

    def boss_summary(self, *, current_role: AdminRole) -> dict:
        require_role(current_role, AdminRole.BOSS, AdminRole.SUPER_ADMIN)
        return {
            "awaitingReview": len(self._forwarding.list_boss_records()),
            "pendingLeaves": self._leaves.count_by_status(LeaveStatus.PENDING),
            "reviewedRecords": len(self._forwarding.list_reviewed()),
        }

    def registry_summary(self, *, current_role: AdminRole, recent_limit: int = DEFAULT_RECENT_LIMIT) -> dict:
        require_role(current_role, AdminRole.REGISTRY, AdminRole.SUPER_ADMIN)
        counts = self._records.count_by_status()
        return {
            "files": self._files.count_all(),
            "recordsByStatus": {status.value: int(counts.get(status.value, 0)) for status in RecordStatus},
            "recentActivity": list(self._records.recent(recent_limit)),
        }

    def super_admin_summary(self, *, current_role: AdminRole) -> dict:
        require_role(current_role, AdminRole.SUPER_ADMIN)
        counts = self._admins.count_by_role()
        return {"adminsByRole": {role.value: int(counts.get(role.value, 0)) for role in AdminRole}}
