from __future__ import annotations

from ums_api.core.rbac import (
    ALL_PERMISSIONS,
    DEFAULT_ROLE_REGISTRY,
    Permission,
    RoleDef,
    RoleRegistry,
)


def test_default_roles_grant_expected_permissions() -> None:
    registry = RoleRegistry()

    assert registry.codes == ("ADMIN", "PERSONAL", "VIEWER")
    assert registry.permissions_for("ADMIN") == ALL_PERMISSIONS
    assert registry.permissions_for("PERSONAL") == frozenset()
    assert registry.permissions_for("VIEWER") == frozenset({"VIEW"})


def test_all_permissions_is_the_closed_set() -> None:
    assert ALL_PERMISSIONS == {"CREATE", "VIEW", "EDIT", "DELETE"}
    assert {p.value for p in Permission} == ALL_PERMISSIONS


def test_unknown_role_grants_nothing() -> None:
    assert DEFAULT_ROLE_REGISTRY.permissions_for("SUPERUSER") == frozenset()
    assert DEFAULT_ROLE_REGISTRY.get("SUPERUSER") is None


def test_aggregate_is_union_of_held_roles() -> None:
    registry = RoleRegistry()

    assert registry.aggregate(["PERSONAL"]) == frozenset()
    assert registry.aggregate(["VIEWER", "PERSONAL"]) == frozenset({"VIEW"})
    assert registry.aggregate(["VIEWER", "ADMIN"]) == ALL_PERMISSIONS
    assert registry.aggregate([]) == frozenset()


def test_registry_accepts_custom_definitions() -> None:
    registry = RoleRegistry(
        [
            RoleDef(code="EDITOR", name="Editor", permissions=frozenset({"VIEW", "EDIT"})),
        ]
    )

    assert registry.codes == ("EDITOR",)
    assert registry.aggregate(["EDITOR", "ADMIN"]) == frozenset({"VIEW", "EDIT"})
