"""Milestones Module: fixed-price and hourly milestones."""

from .service import (
    Milestone,
    MilestoneStatus,
    FixedPriceMilestone,
    HourlyMilestone,
    create_milestone,
)

__all__ = [
    "Milestone",
    "MilestoneStatus",
    "FixedPriceMilestone",
    "HourlyMilestone",
    "create_milestone",
]
