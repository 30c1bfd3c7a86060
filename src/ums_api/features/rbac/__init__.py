from .service import AuthorizationDecision, AuthorizationEngine

__all__ = ["AuthorizationDecision", "AuthorizationEngine"]
