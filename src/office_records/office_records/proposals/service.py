from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from ..common.validators import optional_text, require_choice, require_non_empty, require_role
from ..core.enums import AdminRole, ProposalStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..tasks.service import TASK_ASSIGNERS
from .repository import ProposalRepository

logger = logging.getLogger(__name__)


class ProposalService:
    def __init__(self, proposals: ProposalRepository):
        self._proposals = proposals

    def submit_proposal(self, *, employee_id: Optional[str], subject: str, content: str) -> str:
        proposal_id = str(uuid.uuid4())
        self._proposals.create(
            {
                "proposal_id": proposal_id,
                "employee_id": require_non_empty(employee_id, "Employee"),
                "subject": require_non_empty(subject, "Subject"),
                "content": require_non_empty(content, "Content"),
                "status": ProposalStatus.PENDING.value,
            }
        )
        return proposal_id

    def fetch_proposals(self, department_id: Optional[int]) -> Sequence[dict]:
        if not department_id:
            raise ValidationError("Department is required")
        return self._proposals.list_by_department(int(department_id))

    def fetch_employee_proposals(self, employee_id: Optional[str]) -> Sequence[dict]:
        return self._proposals.list_by_employee(require_non_empty(employee_id, "Employee"))

    def review_proposal(
        self,
        *,
        current_role: AdminRole,
        proposal_id: str,
        status: str,
        reviewer_id: int,
        review_note: Optional[str] = None,
    ) -> None:
        require_role(current_role, *TASK_ASSIGNERS)
        decision = require_choice(status, ProposalStatus, "status")
        if decision == ProposalStatus.PENDING:
            raise ValidationError("Status must be approved or rejected")
        if not self._proposals.review(
            proposal_id, status=decision.value, reviewer_id=int(reviewer_id), review_note=optional_text(review_note)
        ):
            raise NotFoundError("Proposal not found")
        logger.info("proposal %s %s", proposal_id, decision.value)
