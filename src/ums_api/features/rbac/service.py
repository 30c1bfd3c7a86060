"""Authorization engine: role aggregation and per-request decisions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ums_api.common.logging import log_context
from ums_api.core.auth import PermissionDeniedError, UnknownCallerError, parse_caller_id
from ums_api.core.models import User
from ums_api.core.rbac import DEFAULT_ROLE_REGISTRY, RoleRegistry
from ums_api.features.users.repository import UsersRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthorizationDecision:
    """Result of an authorization evaluation."""

    caller_id: int | None
    granted: frozenset[str]
    required: tuple[str, ...]
    missing: tuple[str, ...]
    caller: User | None = field(default=None, compare=False)

    @property
    def allowed(self) -> bool:
        return not self.missing


def _normalize_required(required: Iterable[str]) -> tuple[str, ...]:
    # Blank tokens stay required; no role grants them, so they deny.
    return tuple(sorted({str(getattr(key, "value", key)).strip() for key in required}))


class AuthorizationEngine:
    """Decide whether a caller holds every permission an action requires.

    The engine only reads: it resolves the caller through the directory and
    the permissions through the role registry, so concurrent and repeated
    calls are safe.
    """

    def __init__(
        self,
        *,
        repository: UsersRepository,
        registry: RoleRegistry = DEFAULT_ROLE_REGISTRY,
    ) -> None:
        self._repo = repository
        self._registry = registry

    @property
    def registry(self) -> RoleRegistry:
        return self._registry

    def aggregated_permissions(self, user: User) -> frozenset[str]:
        return self._registry.aggregate(user.roles)

    def resolve_caller(self, raw_caller_id: str | int | None) -> User:
        """Parse ``raw_caller_id`` and return the matching live user.

        Parsing happens before the lookup: a malformed identifier never
        reaches the directory.
        """

        caller_id = parse_caller_id(raw_caller_id)
        caller = self._repo.get_by_id(caller_id)
        if caller is None:
            logger.info("authz.unknown_caller", extra=log_context(caller_id=caller_id))
            raise UnknownCallerError(caller_id)
        return caller

    def authorize(
        self,
        raw_caller_id: str | int | None,
        required: Iterable[str],
    ) -> AuthorizationDecision:
        """Render an allow/deny decision for ``required``.

        Nothing required means allow, without looking at the caller at all.
        Raises ``MalformedCallerIdError`` or ``UnknownCallerError`` when a
        caller is needed but cannot be established.
        """

        required_keys = _normalize_required(required)
        if not required_keys:
            return AuthorizationDecision(
                caller_id=None,
                granted=frozenset(),
                required=(),
                missing=(),
            )

        caller = self.resolve_caller(raw_caller_id)
        granted = self.aggregated_permissions(caller)
        missing = tuple(key for key in required_keys if key not in granted)
        decision = AuthorizationDecision(
            caller_id=caller.id,
            granted=granted,
            required=required_keys,
            missing=missing,
            caller=caller,
        )

        if decision.allowed:
            logger.debug(
                "authz.allow",
                extra=log_context(caller_id=caller.id, required=required_keys),
            )
        else:
            logger.info(
                "authz.deny",
                extra=log_context(
                    caller_id=caller.id,
                    required=required_keys,
                    missing=missing,
                    roles=caller.roles,
                ),
            )
        return decision

    def require(
        self,
        raw_caller_id: str | int | None,
        required: Iterable[str],
    ) -> AuthorizationDecision:
        """Like :meth:`authorize` but raise ``PermissionDeniedError`` on deny."""

        decision = self.authorize(raw_caller_id, required)
        if not decision.allowed:
            raise PermissionDeniedError(decision.missing, caller_id=decision.caller_id)
        return decision


__all__ = ["AuthorizationDecision", "AuthorizationEngine"]
