"""Core shortlink data model and resolution."""
