"""Base error for the counting engine."""


class CountError(Exception):
    """Raised for failures while counting an input or collecting inputs to count."""
