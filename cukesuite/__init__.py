"""Building blocks for running Gherkin scenarios: tag filters, result storage, hooks and file access."""

__version__ = "0.1.0"

__all__ = ["fs", "hooks", "storage", "tags", "utils"]