"""Feature modules of the freelance workflow engine."""
