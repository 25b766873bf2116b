"""FusionAuth OAuth2 endpoints.

These endpoints follow RFC 6749 and take application/x-www-form-urlencoded
bodies instead of JSON. Optional parameters left as None are not sent.
"""
from __future__ import annotations
from typing import Optional

from fusionauth.core.rest import ClientResponse, FormDataBodyHandler

from .client import FusionAuthClient


class OAuthService:
    """Service for OAuth2 grants, device approval and token introspection."""

    def __init__(self, client: FusionAuthClient):
        self.client = client

    def _token(self, body: dict) -> ClientResponse:
        return (
            self.client.start_anonymous().uri("/oauth2/token")
            .body_handler(FormDataBodyHandler(body))
            .post()
            .go()
        )

    def exchange_o_auth_code_for_access_token(
        self,
        code: str,
        client_id: Optional[str],
        client_secret: Optional[str],
        redirect_uri: str,
    ) -> ClientResponse:
        """Authorization code grant."""
        return self._token({
            "code": code,
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "authorization_code",
            "redirect_uri": redirect_uri,
        })

    def exchange_user_credentials_for_access_token(
        self,
        username: str,
        password: str,
        client_id: Optional[str],
        client_secret: Optional[str],
        scope: Optional[str] = None,
        user_code: Optional[str] = None,
    ) -> ClientResponse:
        """Resource owner password credentials grant."""
        return self._token({
            "username": username,
            "password": password,
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "password",
            "scope": scope,
            "user_code": user_code,
        })

    def client_credentials_grant(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        scope: Optional[str] = None,
    ) -> ClientResponse:
        return self._token({
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "client_credentials",
            "scope": scope,
        })

    def approve_device(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        token: str,
        user_code: str,
    ) -> ClientResponse:
        """Approve a device grant on behalf of the user identified by ``token``."""
        body = {
            "client_id": client_id,
            "client_secret": client_secret,
            "token": token,
            "user_code": user_code,
        }
        return (
            self.client.start().uri("/oauth2/device/approve")
            .body_handler(FormDataBodyHandler(body))
            .post()
            .go()
        )

    def introspect_access_token(self, client_id: str, token: str) -> ClientResponse:
        body = {
            "client_id": client_id,
            "token": token,
        }
        return (
            self.client.start_anonymous().uri("/oauth2/introspect")
            .body_handler(FormDataBodyHandler(body))
            .post()
            .go()
        )

    def retrieve_user_info_from_access_token(self, encoded_jwt: str) -> ClientResponse:
        return (
            self.client.start_anonymous().uri("/oauth2/userinfo")
            .authorization("Bearer " + encoded_jwt)
            .get()
            .go()
        )
