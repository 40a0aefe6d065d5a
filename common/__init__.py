"""Shared models and errors for the freelance workflow engine."""
