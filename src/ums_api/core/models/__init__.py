from .user import User, ordered_set

__all__ = ["User", "ordered_set"]
