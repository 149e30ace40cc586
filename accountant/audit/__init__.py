"""Audit logging package."""

from accountant.audit.logger import AuditLogger, configure_logging

__all__ = ["AuditLogger", "configure_logging"]
