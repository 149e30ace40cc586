"""Amount entry package."""

from accountant.entry.amount import describe_error, looks_like_expression, parse_amount

__all__ = ["describe_error", "looks_like_expression", "parse_amount"]
