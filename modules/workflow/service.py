"""Project workflow: completion → payment → receipt.

Runs the single-milestone settlement of a project:

    precondition check → participants → milestone details
        → complete → calculate → process payment → log receipt

Every step runs inside one failure scope. Any error raised along the way is
caught once, reported on stderr and returned as a WorkflowOutcome; it never
reaches the caller as an exception.

Usage:
    from modules.workflow import Project

    project = Project("E-Commerce Website", client, freelancer, milestone, receipts)
    outcome = project.execute_project_workflow()
    if not outcome.ok:
        print(outcome.failure, outcome.message)
"""
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from common.exceptions import (
    InvalidHoursError,
    MilestoneStateError,
    MissingReferenceError,
    PaymentFailureError,
    WorkflowError,
)
from common.models import User
from modules.milestones import Milestone
from modules.receipts import Receipt, ReceiptLogger

logger = logging.getLogger(__name__)


class WorkflowStatus(Enum):
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'


class FailureKind(Enum):
    INVALID_HOURS = 'invalid_hours'
    MISSING_REFERENCE = 'missing_reference'
    PAYMENT_FAILURE = 'payment_failure'
    MILESTONE_STATE = 'milestone_state'
    RECEIPT_IO = 'receipt_io'
    WORKFLOW = 'workflow'
    UNEXPECTED = 'unexpected'


FAILURE_KINDS = {
    InvalidHoursError: FailureKind.INVALID_HOURS,
    MissingReferenceError: FailureKind.MISSING_REFERENCE,
    PaymentFailureError: FailureKind.PAYMENT_FAILURE,
    MilestoneStateError: FailureKind.MILESTONE_STATE,
}


def classify_failure(error: Exception) -> FailureKind:
    """Map a caught error to its failure kind."""
    if isinstance(error, OSError):
        return FailureKind.RECEIPT_IO
    for error_type, kind in FAILURE_KINDS.items():
        if isinstance(error, error_type):
            return kind
    if isinstance(error, WorkflowError):
        return FailureKind.WORKFLOW
    return FailureKind.UNEXPECTED


@dataclass
class WorkflowOutcome:
    """Result of one workflow run."""
    project_name: str
    status: WorkflowStatus
    failure: Optional[FailureKind] = None
    message: str = ''
    amount: float = 0.0
    payment_type: Optional[str] = None
    receipt: Optional[Receipt] = None

    @property
    def ok(self) -> bool:
        return self.status is WorkflowStatus.SUCCEEDED

    @classmethod
    def success(cls, project_name: str, receipt: Receipt) -> "WorkflowOutcome":
        return cls(
            project_name=project_name,
            status=WorkflowStatus.SUCCEEDED,
            amount=receipt.amount,
            payment_type=receipt.payment_type,
            receipt=receipt,
        )

    @classmethod
    def failed(cls, project_name: str, error: Exception) -> "WorkflowOutcome":
        return cls(
            project_name=project_name,
            status=WorkflowStatus.FAILED,
            failure=classify_failure(error),
            message=str(error),
        )


class Project:
    """Pairs a client and a freelancer on one milestone and settles it."""

    def __init__(
        self,
        name: str,
        client: Optional[User],
        freelancer: Optional[User],
        milestone: Optional[Milestone],
        receipt_logger: Optional[ReceiptLogger] = None,
    ):
        self.name = name
        self.client = client
        self.freelancer = freelancer
        self.milestone = milestone
        self.receipt_logger = receipt_logger or ReceiptLogger()

    def execute_project_workflow(self) -> WorkflowOutcome:
        """
        Run the settlement workflow once.

        Returns:
            WorkflowOutcome, succeeded with the written receipt or failed
            with the failure kind and message. Never raises.
        """
        logger.info(f"Workflow start: {self.name}")
        try:
            receipt = self._run()
        except Exception as e:
            print(f"Error during execution: {e}", file=sys.stderr)
            outcome = WorkflowOutcome.failed(self.name, e)
            logger.error(
                f"Workflow '{self.name}' failed ({outcome.failure.value}): {e}",
                exc_info=outcome.failure is FailureKind.UNEXPECTED,
            )
            return outcome

        print("\n=== PROJECT WORKFLOW COMPLETED SUCCESSFULLY ===")
        logger.info(f"Workflow done: {self.name} ({receipt.amount} via {receipt.payment_type})")
        return WorkflowOutcome.success(self.name, receipt)

    def _run(self) -> Receipt:
        if self.client is None or self.freelancer is None or self.milestone is None:
            raise MissingReferenceError()

        print("\n=== PROJECT WORKFLOW START ===")
        print(f"Project: {self.name}\n")

        print("Participants:")
        self.client.display_info()
        self.freelancer.display_info()
        print()

        print("Milestone Details:")
        self.milestone.display_milestone()
        print()

        self.milestone.complete()

        amount = self.milestone.calculate_payment()
        if amount <= 0:
            raise PaymentFailureError()

        payment = self.milestone.payment
        payment.process_payment()

        return self.receipt_logger.log_payment_receipt(
            self.milestone.get_title(),
            amount,
            payment.get_payment_type(),
        )
