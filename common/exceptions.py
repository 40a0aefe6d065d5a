"""Domain errors raised along the milestone/payment workflow.

Only the workflow orchestrator catches these; everything below it raises.
"""


class WorkflowError(RuntimeError):
    """Base class for all workflow errors."""

    default_message = "Workflow error"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class InvalidHoursError(WorkflowError):
    """Hours for an hourly milestone are negative, or not positive at completion."""

    default_message = "Invalid hours worked: cannot be negative or zero"


class MissingReferenceError(WorkflowError):
    """Client, freelancer or milestone was never wired into the project."""

    default_message = "Null pointer access attempted"


class PaymentFailureError(WorkflowError):
    """Payable amount after completion is zero or negative."""

    default_message = "Payment processing failed: amount is zero or negative"


class MilestoneStateError(WorkflowError):
    """Milestone is already completed."""

    default_message = "Milestone already completed"
