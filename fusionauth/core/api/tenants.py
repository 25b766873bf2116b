"""FusionAuth tenant operations."""
from __future__ import annotations
from typing import Any, Optional

from fusionauth.core.rest import ClientResponse, JSONBodyHandler

from .client import FusionAuthClient


class TenantService:
    """Service for FusionAuth tenants."""

    def __init__(self, client: FusionAuthClient):
        self.client = client

    def create_tenant(self, tenant_id: Optional[str], request: Any) -> ClientResponse:
        return (
            self.client.start().uri("/api/tenant")
            .url_segment(tenant_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_tenant(self, tenant_id: str) -> ClientResponse:
        return self.client.start().uri("/api/tenant").url_segment(tenant_id).get().go()

    def retrieve_tenants(self) -> ClientResponse:
        return self.client.start().uri("/api/tenant").get().go()

    def delete_tenant(self, tenant_id: str) -> ClientResponse:
        return self.client.start().uri("/api/tenant").url_segment(tenant_id).delete().go()
