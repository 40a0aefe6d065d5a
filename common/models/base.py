"""Participant models shared across modules."""
from abc import ABC, abstractmethod
from dataclasses import dataclass


def format_amount(value: float) -> str:
    """Render a number like a default C stream: six significant digits, no padding."""
    return f"{value:g}"


@dataclass(frozen=True)
class User(ABC):
    """Marketplace participant."""
    name: str
    email: str

    @abstractmethod
    def summary(self) -> str:
        """One-line description used in workflow narration."""

    def display_info(self) -> None:
        print(self.summary())


@dataclass(frozen=True)
class Client(User):
    """Auftraggeber."""
    company_name: str = ''

    def summary(self) -> str:
        return f"Client: {self.name} ({self.company_name}) - {self.email}"


@dataclass(frozen=True)
class Freelancer(User):
    """Auftragnehmer."""
    skill_set: str = ''
    hourly_rate: float = 0.0

    def summary(self) -> str:
        return (
            f"Freelancer: {self.name} - Skills: {self.skill_set}"
            f" - Rate: ${format_amount(self.hourly_rate)}/hr - {self.email}"
        )
