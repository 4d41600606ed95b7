"""Project-wide views that belong to no domain app."""
