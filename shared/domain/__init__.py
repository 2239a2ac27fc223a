"""Domain helpers that do not belong to a single app."""
