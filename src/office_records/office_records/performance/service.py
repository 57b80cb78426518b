from __future__ import annotations

import uuid
from typing import Optional, Sequence, Tuple

from ..common.validators import require_choice, require_non_empty, require_role
from ..core.constants import MAX_RATING, MIN_RATING, PERFORMANCE_REVIEW_SUBJECT
from ..core.enums import AdminRole, ReviewStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..tasks.service import TASK_ASSIGNERS
from .repository import PerformanceRepository


def compose_content(feedback: Optional[str], goals: Optional[str]) -> str:
    return f"Feedback: {feedback or ''}\n\nGoals: {goals or ''}"


def split_content(content: Optional[str]) -> Tuple[str, str]:
    """Inverse of compose_content; free-form content is treated as feedback only."""
    if not content:
        return "", ""
    if "Feedback:" in content and "Goals:" in content:
        feedback, goals = content.split("Goals:", 1)
        return feedback.replace("Feedback:", "", 1).strip(), goals.strip()
    return content, ""


def _with_feedback(row: dict) -> dict:
    out = dict(row)
    out["feedback"], out["goals"] = split_content(out.pop("content", None))
    return out


def _rating(value) -> int:
    try:
        rating = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Rating must be a number")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    return rating


class PerformanceService:
    def __init__(self, reviews: PerformanceRepository):
        self._reviews = reviews

    def fetch_performance_reviews(self, reviewer_id: int) -> Sequence[dict]:
        return [_with_feedback(r) for r in self._reviews.list_by_reviewer(int(reviewer_id))]

    def fetch_employee_performance(self, employee_id: Optional[str]) -> Sequence[dict]:
        rows = self._reviews.list_by_employee(require_non_empty(employee_id, "Employee"))
        return [_with_feedback(r) for r in rows]

    def add_review(
        self,
        *,
        current_role: AdminRole,
        employee_id: str,
        reviewer_id: int,
        rating,
        feedback: Optional[str],
        goals: Optional[str],
        status: str = ReviewStatus.PENDING.value,
    ) -> str:
        require_role(current_role, *TASK_ASSIGNERS)
        review_id = str(uuid.uuid4())
        self._reviews.create(
            {
                "review_id": review_id,
                "employee_id": require_non_empty(employee_id, "Employee"),
                "reviewer_id": int(reviewer_id),
                "subject": PERFORMANCE_REVIEW_SUBJECT,
                "content": compose_content(feedback, goals),
                "rating": _rating(rating),
                "status": require_choice(status or ReviewStatus.PENDING.value, ReviewStatus, "status").value,
            }
        )
        return review_id

    def update_review(
        self,
        *,
        current_role: AdminRole,
        review_id: str,
        rating,
        feedback: Optional[str],
        goals: Optional[str],
        status: str,
    ) -> None:
        require_role(current_role, *TASK_ASSIGNERS)
        fields = {
            "subject": PERFORMANCE_REVIEW_SUBJECT,
            "content": compose_content(feedback, goals),
            "rating": _rating(rating),
            "status": require_choice(status, ReviewStatus, "status").value,
        }
        if not self._reviews.update(review_id, fields):
            raise NotFoundError("Performance review not found")
