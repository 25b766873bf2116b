"""Entry point of the FusionAuth API facade.

FusionAuthClient holds the shared configuration (base URL, API key, tenant,
timeouts) and hands out pre-configured RESTClient builders. The service
classes in this package compose those builders, one method per endpoint.
"""
from __future__ import annotations
from typing import Optional

import requests

from fusionauth.config.settings import ClientConfig, load_settings
from fusionauth.core.rest import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    JSONResponseHandler,
    RESTClient,
)

TENANT_ID_HEADER = "X-FusionAuth-TenantId"


class FusionAuthClient:
    """Shared configuration for FusionAuth API calls.

    Usage:
        client = FusionAuthClient("api-key", "http://localhost:9011")
        users = UserService(client)
        response = users.retrieve_user_by_email("alice@example.com")
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        tenant_id: Optional[str] = None,
        connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: int = DEFAULT_READ_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            api_key: API key sent on authenticated calls (None for anonymous use)
            base_url: FusionAuth base URL, e.g. http://localhost:9011
            tenant_id: Tenant scoping every call (optional)
            connect_timeout: Connect timeout in milliseconds
            read_timeout: Read timeout in milliseconds
            session: Optional requests.Session used for every call
        """
        self.api_key = api_key
        self.base_url = base_url
        self.tenant_id = tenant_id
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.session = session

    @classmethod
    def from_settings(cls, config: Optional[ClientConfig] = None, session: Optional[requests.Session] = None) -> "FusionAuthClient":
        """Build a client from ClientConfig (loaded from the environment by default)."""
        config = config or load_settings()
        return cls(
            config.api_key,
            config.base_url,
            tenant_id=config.tenant_id,
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
            session=session,
        )

    def set_tenant_id(self, tenant_id: Optional[str]) -> None:
        self.tenant_id = tenant_id

    def start(self) -> RESTClient:
        """Builder for a call authenticated with the API key."""
        return self.start_anonymous().authorization(self.api_key)

    def start_anonymous(self) -> RESTClient:
        """Builder for a call without the API key (login, JWT, OAuth endpoints)."""
        client = (
            RESTClient()
            .success_response_handler(JSONResponseHandler())
            .error_response_handler(JSONResponseHandler())
            .url(self.base_url)
            .connect_timeout(self.connect_timeout)
            .read_timeout(self.read_timeout)
            .session(self.session)
        )
        if self.tenant_id is not None:
            client.header(TENANT_ID_HEADER, self.tenant_id)
        return client
