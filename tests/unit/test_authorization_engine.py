"""Authorization engine decisions against an in-memory directory."""

from __future__ import annotations

import logging

import pytest

from ums_api.core.auth import MalformedCallerIdError, PermissionDeniedError, UnknownCallerError
from ums_api.core.models import User
from ums_api.core.rbac import Permission, RoleRegistry
from ums_api.features.rbac import AuthorizationEngine
from ums_api.features.users.repository import InMemoryUsersRepository
from ums_api.features.users.seed import seed_users


@pytest.fixture()
def repository() -> InMemoryUsersRepository:
    return InMemoryUsersRepository(seed_users())


@pytest.fixture()
def engine(repository: InMemoryUsersRepository) -> AuthorizationEngine:
    return AuthorizationEngine(repository=repository, registry=RoleRegistry())


def test_admin_is_allowed_everything(engine: AuthorizationEngine) -> None:
    decision = engine.authorize("1", [Permission.CREATE, Permission.DELETE])

    assert decision.allowed
    assert decision.caller_id == 1
    assert decision.required == ("CREATE", "DELETE")
    assert decision.missing == ()
    assert decision.caller is not None and decision.caller.name == "John Doe"


def test_viewer_may_view_but_not_create(engine: AuthorizationEngine) -> None:
    assert engine.authorize("6", ["VIEW"]).allowed

    denied = engine.authorize("6", ["CREATE"])
    assert not denied.allowed
    assert denied.missing == ("CREATE",)
    assert denied.granted == frozenset({"VIEW"})


def test_personal_only_user_has_no_permissions(engine: AuthorizationEngine) -> None:
    decision = engine.authorize("2", ["VIEW"])

    assert not decision.allowed
    assert decision.granted == frozenset()


def test_every_required_permission_must_be_held(engine: AuthorizationEngine) -> None:
    decision = engine.authorize("6", ["VIEW", "EDIT"])

    assert not decision.allowed
    assert decision.missing == ("EDIT",)


def test_nothing_required_allows_without_a_caller(engine: AuthorizationEngine) -> None:
    decision = engine.authorize(None, [])

    assert decision.allowed
    assert decision.caller_id is None


@pytest.mark.parametrize("raw", [None, "", "abc", "-3"])
def test_malformed_caller_raises_before_lookup(engine: AuthorizationEngine, raw) -> None:
    with pytest.raises(MalformedCallerIdError):
        engine.authorize(raw, ["VIEW"])


def test_unknown_caller_raises(engine: AuthorizationEngine) -> None:
    with pytest.raises(UnknownCallerError) as excinfo:
        engine.authorize("999", ["VIEW"])

    assert excinfo.value.caller_id == 999


def test_deleted_caller_is_unknown(
    engine: AuthorizationEngine,
    repository: InMemoryUsersRepository,
) -> None:
    assert repository.delete(6)

    with pytest.raises(UnknownCallerError):
        engine.authorize("6", ["VIEW"])


def test_role_change_is_seen_on_next_decision(
    engine: AuthorizationEngine,
    repository: InMemoryUsersRepository,
) -> None:
    from ums_api.features.users.repository import UserPatch

    assert not engine.authorize("3", ["VIEW"]).allowed
    repository.update(3, UserPatch(roles=("VIEWER",)))

    assert engine.authorize("3", ["VIEW"]).allowed


def test_require_raises_with_missing_permissions(engine: AuthorizationEngine) -> None:
    with pytest.raises(PermissionDeniedError) as excinfo:
        engine.require("6", ["CREATE", "VIEW", "DELETE"])

    assert excinfo.value.missing == ("CREATE", "DELETE")
    assert excinfo.value.caller_id == 6
    assert str(excinfo.value) == "Not allowed to perform action due to insufficient permissions"


def test_require_returns_decision_on_allow(engine: AuthorizationEngine) -> None:
    decision = engine.require(1, ["EDIT"])

    assert decision.allowed
    assert decision.caller_id == 1


def test_custom_registry_is_honoured() -> None:
    from ums_api.core.rbac import RoleDef

    repository = InMemoryUsersRepository(
        [User(id=10, name="Ed", roles=("EDITOR",), groups=("GROUP_1",))]
    )
    registry = RoleRegistry(
        [RoleDef(code="EDITOR", name="Editor", permissions=frozenset({"EDIT"}))]
    )
    engine = AuthorizationEngine(repository=repository, registry=registry)

    assert engine.authorize("10", ["EDIT"]).allowed
    assert not engine.authorize("10", ["VIEW"]).allowed


def test_denial_is_logged_with_missing_permissions(
    engine: AuthorizationEngine,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO, logger="ums_api.features.rbac.service")

    engine.authorize("6", ["DELETE"])

    records = [record for record in caplog.records if record.getMessage() == "authz.deny"]
    assert records
    assert records[-1].caller_id == 6
    assert records[-1].missing == ("DELETE",)


def test_overlong_caller_id_is_malformed(engine: AuthorizationEngine) -> None:
    with pytest.raises(MalformedCallerIdError):
        engine.authorize("9" * 5000, ["VIEW"])


@pytest.mark.parametrize("required", [[""], ["  "], ["VIEW", ""]])
def test_blank_permission_token_is_never_granted(engine: AuthorizationEngine, required) -> None:
    decision = engine.authorize("1", required)

    assert not decision.allowed
    assert decision.missing == ("",)


def test_blank_permission_token_still_requires_a_caller(engine: AuthorizationEngine) -> None:
    with pytest.raises(MalformedCallerIdError):
        engine.authorize(None, [""])
