from .errors import UserConflictError, UserError, UserNotFoundError
from .repository import InMemoryUsersRepository, UserDraft, UserPatch, UsersRepository
from .service import UsersService
from .visibility import VisibilityResolver

__all__ = [
    "InMemoryUsersRepository",
    "UserConflictError",
    "UserDraft",
    "UserError",
    "UserNotFoundError",
    "UserPatch",
    "UsersRepository",
    "UsersService",
    "VisibilityResolver",
]
