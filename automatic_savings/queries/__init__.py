"""Query execution package."""

from automatic_savings.queries.executor import QueryExecutor

__all__ = ["QueryExecutor"]
