"""Milestone state machine.

A milestone owns exactly one payment and moves one way:

    pending → completed

The amount owed is 0 until the milestone is completed; afterwards it is the
fixed amount (FixedPriceMilestone) or hours × rate (HourlyMilestone).

Usage:
    from modules.milestones import HourlyMilestone
    from modules.payments import Direct

    ms = HourlyMilestone("API", "REST endpoints", Direct(0), hourly_rate=50)
    ms.set_hours_worked(12)
    ms.complete()
    ms.calculate_payment()  # 600.0
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Union

from common.exceptions import InvalidHoursError, MilestoneStateError
from common.models import format_amount
from modules.payments import Payment

logger = logging.getLogger(__name__)


class MilestoneStatus(Enum):
    PENDING = 'Pending'
    COMPLETED = 'Completed'


class Milestone(ABC):
    """Billable unit of work with a completion state and a payment rule."""

    def __init__(self, title: str, description: str, payment: Payment):
        self.title = title
        self.description = description
        self.payment = payment
        self.status = MilestoneStatus.PENDING

    @property
    def is_completed(self) -> bool:
        return self.status is MilestoneStatus.COMPLETED

    def calculate_payment(self) -> float:
        """Amount owed; 0.0 while pending."""
        if not self.is_completed:
            return 0.0
        return self._amount_owed()

    @abstractmethod
    def _amount_owed(self) -> float:
        """Variant formula, only consulted once completed."""

    def complete(self) -> None:
        """Mark the milestone completed.

        Raises:
            MilestoneStateError: milestone was already completed
        """
        if self.is_completed:
            raise MilestoneStateError(f"Milestone '{self.title}' already completed")
        self._check_completable()
        self.status = MilestoneStatus.COMPLETED
        logger.debug(f"Milestone '{self.title}': pending → completed")
        self._announce_completion()

    def _check_completable(self) -> None:
        pass

    @abstractmethod
    def _announce_completion(self) -> None:
        pass

    def display_milestone(self) -> None:
        print(f"Milestone: {self.title}")
        print(f"Description: {self.description}")
        print(f"Status: {self.status.value}")
        print(f"Payment Method: {self.payment.get_payment_type()}")

    def get_title(self) -> str:
        return self.title


class FixedPriceMilestone(Milestone):
    """Milestone billed at a flat amount."""

    def __init__(self, title: str, description: str, payment: Payment, fixed_amount: float):
        super().__init__(title, description, payment)
        self.fixed_amount = float(fixed_amount)

    def _amount_owed(self) -> float:
        return self.fixed_amount

    def _announce_completion(self) -> None:
        print(f"Fixed-price milestone '{self.title}' completed!")
        print(f"Payment amount: ${format_amount(self.calculate_payment())}")


class HourlyMilestone(Milestone):
    """Milestone billed by hours worked at an hourly rate."""

    def __init__(self, title: str, description: str, payment: Payment, hourly_rate: float):
        super().__init__(title, description, payment)
        self.hourly_rate = float(hourly_rate)
        self.hours_worked = 0.0

    def set_hours_worked(self, hours: float) -> None:
        """Record hours worked; replaces any earlier value.

        Raises:
            InvalidHoursError: hours is negative (stored value unchanged)
        """
        if hours < 0:
            raise InvalidHoursError()
        self.hours_worked = float(hours)
        logger.debug(f"Milestone '{self.title}': {self.hours_worked} hours recorded")

    def _check_completable(self) -> None:
        if self.hours_worked <= 0:
            raise InvalidHoursError()

    def _amount_owed(self) -> float:
        return self.hours_worked * self.hourly_rate

    def _announce_completion(self) -> None:
        print(f"Hourly milestone '{self.title}' completed!")
        print(
            f"Hours worked: {format_amount(self.hours_worked)}"
            f" at ${format_amount(self.hourly_rate)}/hr"
        )
        print(f"Payment amount: ${format_amount(self.calculate_payment())}")


# Menu choices of the interactive prompt
MILESTONE_KINDS = {
    '1': 'fixed',
    '2': 'hourly',
    'fixed': 'fixed',
    'hourly': 'hourly',
}


def create_milestone(
    kind: Union[str, int],
    title: str,
    description: str,
    payment: Payment,
    amount: float = 0.0,
    hourly_rate: float = 0.0,
    hours: float = None,
) -> Milestone:
    """
    Build a milestone of the given kind.

    Args:
        kind: "fixed" / "hourly" or menu choice 1 / 2
        title: Milestone title
        description: Free text
        payment: Payment the milestone takes ownership of
        amount: Fixed price (fixed milestones)
        hourly_rate: Rate per hour (hourly milestones)
        hours: Hours worked (hourly milestones, optional)

    Returns:
        FixedPriceMilestone or HourlyMilestone

    Raises:
        ValueError: unknown kind
        InvalidHoursError: negative hours
    """
    key = MILESTONE_KINDS.get(str(kind).strip().lower())
    if key is None:
        raise ValueError(f"Unknown milestone type '{kind}'. Available: ['fixed', 'hourly']")

    if key == 'fixed':
        return FixedPriceMilestone(title, description, payment, amount)

    milestone = HourlyMilestone(title, description, payment, hourly_rate)
    if hours is not None:
        milestone.set_hours_worked(hours)
    return milestone
