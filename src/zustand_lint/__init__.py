"""zustand-lint: selector checks for Zustand store hooks."""

__version__ = "0.3.0"
