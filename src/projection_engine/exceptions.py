"""Domain-specific exceptions."""


class ProjectionEngineError(Exception):
    """Base exception for the projection engine."""


class InvalidInputError(ProjectionEngineError, ValueError):
    """An argument is outside the domain a calculation accepts (e.g. negative years)."""
