"""Exercise tracking record service: users, exercise entries and filtered logs."""

__version__ = "0.1.0"

__all__ = ["__version__"]
