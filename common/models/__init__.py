"""Shared data models across modules."""

from .base import User, Client, Freelancer, format_amount

__all__ = ['User', 'Client', 'Freelancer', 'format_amount']
