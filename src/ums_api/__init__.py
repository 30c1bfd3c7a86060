"""User management API guarded by role-based access control."""

__version__ = "0.3.0"
