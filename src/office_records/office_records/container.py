from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admins.mysql_admin_repository import MySQLAdminRepository
from .admins.repository import AdminRepository
from .admins.service import AdminService, AuthService
from .dashboards.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .files.mysql_file_repository import MySQLFileRepository
from .files.repository import FileRepository
from .files.service import FileService
from .forwarding.mysql_forwarding_repository import MySQLForwardingRepository
from .forwarding.repository import ForwardingRepository
from .forwarding.service import ForwardingService
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .notifications.mail import Mailer, MailSettings
from .performance.mysql_performance_repository import MySQLPerformanceRepository
from .performance.repository import PerformanceRepository
from .performance.service import PerformanceService
from .proposals.mysql_proposal_repository import MySQLProposalRepository
from .proposals.repository import ProposalRepository
from .proposals.service import ProposalService
from .records.mysql_record_repository import MySQLRecordRepository
from .records.repository import RecordRepository
from .records.service import RecordService
from .roles.mysql_role_repository import MySQLRoleRepository
from .roles.repository import RoleRepository
from .roles.service import RoleService
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.repository import TaskRepository
from .tasks.service import TaskService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    admins_repo: AdminRepository
    roles_repo: RoleRepository
    departments_repo: DepartmentRepository
    employees_repo: EmployeeRepository
    files_repo: FileRepository
    records_repo: RecordRepository
    forwarding_repo: ForwardingRepository
    leaves_repo: LeaveRepository
    tasks_repo: TaskRepository
    performance_repo: PerformanceRepository
    proposals_repo: ProposalRepository

    mailer: Mailer
    auth_service: AuthService
    admin_service: AdminService
    department_service: DepartmentService
    employee_service: EmployeeService
    role_service: RoleService
    file_service: FileService
    record_service: RecordService
    forwarding_service: ForwardingService
    leave_service: LeaveService
    task_service: TaskService
    performance_service: PerformanceService
    proposal_service: ProposalService
    dashboard_service: DashboardService


def assemble(
    *,
    conn: Optional[DatabaseConnection],
    mailer: Mailer,
    admins_repo: AdminRepository,
    roles_repo: RoleRepository,
    departments_repo: DepartmentRepository,
    employees_repo: EmployeeRepository,
    files_repo: FileRepository,
    records_repo: RecordRepository,
    forwarding_repo: ForwardingRepository,
    leaves_repo: LeaveRepository,
    tasks_repo: TaskRepository,
    performance_repo: PerformanceRepository,
    proposals_repo: ProposalRepository,
) -> Container:
    """Wire services over the given repositories (MySQL ones in production, fakes in tests)."""
    return Container(
        conn=conn,
        admins_repo=admins_repo,
        roles_repo=roles_repo,
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        files_repo=files_repo,
        records_repo=records_repo,
        forwarding_repo=forwarding_repo,
        leaves_repo=leaves_repo,
        tasks_repo=tasks_repo,
        performance_repo=performance_repo,
        proposals_repo=proposals_repo,
        mailer=mailer,
        auth_service=AuthService(admins_repo, roles_repo),
        admin_service=AdminService(admins_repo, mailer),
        department_service=DepartmentService(departments_repo),
        employee_service=EmployeeService(employees_repo),
        role_service=RoleService(roles_repo, employees_repo),
        file_service=FileService(files_repo),
        record_service=RecordService(records_repo, files_repo),
        forwarding_service=ForwardingService(forwarding_repo, records_repo, employees_repo),
        leave_service=LeaveService(leaves_repo, mailer),
        task_service=TaskService(tasks_repo),
        performance_service=PerformanceService(performance_repo),
        proposal_service=ProposalService(proposals_repo),
        dashboard_service=DashboardService(
            admins=admins_repo,
            departments=departments_repo,
            employees=employees_repo,
            files=files_repo,
            records=records_repo,
            forwarding=forwarding_repo,
            leaves=leaves_repo,
            tasks=tasks_repo,
            performance=performance_repo,
            proposals=proposals_repo,
        ),
    )


def build_container(*, db_config: dict, mail_settings: MailSettings) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", 10)),
    )
    conn = DatabaseConnection.get_instance(config)

    return assemble(
        conn=conn,
        mailer=Mailer(mail_settings),
        admins_repo=MySQLAdminRepository(conn),
        roles_repo=MySQLRoleRepository(conn),
        departments_repo=MySQLDepartmentRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        files_repo=MySQLFileRepository(conn),
        records_repo=MySQLRecordRepository(conn),
        forwarding_repo=MySQLForwardingRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        tasks_repo=MySQLTaskRepository(conn),
        performance_repo=MySQLPerformanceRepository(conn),
        proposals_repo=MySQLProposalRepository(conn),
    )
