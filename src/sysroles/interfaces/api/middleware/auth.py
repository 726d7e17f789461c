"""Auth middleware - attaches the acting identity to the request context."""

from dataclasses import dataclass

import falcon.asgi

from sysroles.infrastructure.auth.keycloak_provider import KeycloakProvider

ANONYMOUS = "anonymous"


@dataclass
class Actor:
    """Identity performing the request; stamped into audit fields."""

    actor_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Middleware that verifies bearer tokens and sets req.context.actor.

    No Authorization header means the anonymous actor. A token the
    provider rejects (or any token when no provider is configured)
    leaves ``req.context.actor`` as None.
    """

    def __init__(self, keycloak_provider: KeycloakProvider | None = None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract actor from Authorization header."""
        auth = req.get_header("Authorization")
        if not auth:
            req.context.actor = Actor(actor_id=ANONYMOUS)
            return

        req.context.actor = None
        if auth.startswith("Bearer ") and self._keycloak:
            identity = self._keycloak.verify(auth[7:])
            if identity:
                req.context.actor = Actor(
                    actor_id=identity.subject,
                    email=identity.email,
                    username=identity.username,
                )
