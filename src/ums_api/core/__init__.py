"""Core contracts: RBAC registry, caller resolution errors and HTTP bridging."""
