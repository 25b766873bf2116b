"""FusionAuth login, logout and JWT operations."""
from __future__ import annotations
from typing import Any, Optional

from fusionauth.core.rest import ClientResponse, JSONBodyHandler

from .client import FusionAuthClient


class LoginService:
    """Service for authentication and JWT management."""

    def __init__(self, client: FusionAuthClient):
        """Initialize login service.

        Args:
            client: Configured FusionAuth client
        """
        self.client = client

    def login(self, request: Any) -> ClientResponse:
        """Authenticate a user.

        Args:
            request: LoginRequest, e.g. {"loginId": ..., "password": ..., "applicationId": ...}

        Returns:
            ClientResponse whose success body carries ``user`` and, when the
            user is registered to the application, ``token``
        """
        return (
            self.client.start().uri("/api/login")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def login_ping(self, user_id: str, application_id: str, caller_ip_address: Optional[str] = None) -> ClientResponse:
        """Record a login that happened outside of FusionAuth (e.g. SSO)."""
        return (
            self.client.start().uri("/api/login")
            .url_segment(user_id)
            .url_segment(application_id)
            .url_parameter("ipAddress", caller_ip_address)
            .put()
            .go()
        )

    def logout(self, global_: bool, refresh_token: Optional[str] = None) -> ClientResponse:
        """Log a user out; ``global_`` revokes every refresh token of the user."""
        return (
            self.client.start_anonymous().uri("/api/logout")
            .url_parameter("global", global_)
            .url_parameter("refreshToken", refresh_token)
            .post()
            .go()
        )

    def logout_with_request(self, request: Any) -> ClientResponse:
        return (
            self.client.start_anonymous().uri("/api/logout")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def issue_jwt(self, application_id: str, encoded_jwt: str, refresh_token: Optional[str] = None) -> ClientResponse:
        """Issue a JWT for another application from an existing JWT."""
        return (
            self.client.start_anonymous().uri("/api/jwt/issue")
            .authorization("Bearer " + encoded_jwt)
            .url_parameter("applicationId", application_id)
            .url_parameter("refreshToken", refresh_token)
            .get()
            .go()
        )

    def validate_jwt(self, encoded_jwt: str) -> ClientResponse:
        """Validate a JWT issued by FusionAuth; the success body holds its claims."""
        return (
            self.client.start_anonymous().uri("/api/jwt/validate")
            .authorization("Bearer " + encoded_jwt)
            .get()
            .go()
        )

    def exchange_refresh_token_for_jwt(self, request: Any) -> ClientResponse:
        return (
            self.client.start_anonymous().uri("/api/jwt/refresh")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_refresh_tokens(self, user_id: str) -> ClientResponse:
        return self.client.start().uri("/api/jwt/refresh").url_parameter("userId", user_id).get().go()

    def revoke_refresh_token(
        self,
        token: Optional[str] = None,
        user_id: Optional[str] = None,
        application_id: Optional[str] = None,
    ) -> ClientResponse:
        """Revoke one refresh token, or all tokens of a user and/or application."""
        return (
            self.client.start().uri("/api/jwt/refresh")
            .url_parameter("token", token)
            .url_parameter("userId", user_id)
            .url_parameter("applicationId", application_id)
            .delete()
            .go()
        )

    def retrieve_jwt_public_key(self, key_id: str) -> ClientResponse:
        return (
            self.client.start_anonymous().uri("/api/jwt/public-key")
            .url_parameter("kid", key_id)
            .get()
            .go()
        )
