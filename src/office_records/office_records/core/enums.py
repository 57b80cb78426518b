from __future__ import annotations

from enum import Enum


class AdminRole(str, Enum):
    """Roles stored in lists_of_admins.role."""

    SUPER_ADMIN = "Super Admin"
    BOSS = "Boss"
    REGISTRY = "Registry"
    HUMAN_RESOURCE = "Human Resource"
    HOD = "HOD"
    EMPLOYEE = "Employee"


class FileType(str, Enum):
    OPEN = "Open File"
    SECRET = "Secret File"
    SUBJECT_MATTER = "Subject Matter"
    TEMPORARY = "Temporary"


class RecordStatus(str, Enum):
    """Workflow status of a record (records_table.status)."""

    ACTIVE = "Active"
    FORWARDED = "Forwarded"
    REVIEWED = "Reviewed"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    ARCHIVED = "Archived"
    URGENT = "Urgent"


class ForwardStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "Reviewed"
    APPROVED = "approved"
    REJECTED = "rejected"
    ACCEPTED = "Accepted"
    DECLINED = "Rejected"


class RecipientType(str, Enum):
    BOSS = "boss"
    DEPARTMENT = "department"
    EMPLOYEE = "employee"


class ReviewAction(str, Enum):
    """Boss decisions on a forwarded record."""

    APPROVE = "approve"
    REJECT = "reject"
    MINUTE = "minute"
    SENDBACK = "sendback"


class EmployeeReviewAction(str, Enum):
    ACCEPT = "Accept"
    REJECT = "Reject"


class LeaveType(str, Enum):
    ANNUAL = "annual"
    SICK = "sick"
    PERSONAL = "personal"


class LeaveStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ReviewStatus(str, Enum):
    """Status of a performance review."""

    PENDING = "pending"
    COMPLETED = "completed"


class ProposalStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
