"""FusionAuth application and application role operations."""
from __future__ import annotations
from typing import Any, Optional

from fusionauth.core.rest import ClientResponse, JSONBodyHandler

from .client import FusionAuthClient


class ApplicationService:
    """Service for FusionAuth applications."""

    def __init__(self, client: FusionAuthClient):
        """Initialize application service.

        Args:
            client: Configured FusionAuth client
        """
        self.client = client

    def create_application(self, application_id: Optional[str], request: Any) -> ClientResponse:
        return (
            self.client.start().uri("/api/application")
            .url_segment(application_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_application(self, application_id: Optional[str]) -> ClientResponse:
        """Retrieve one application, or all of them when application_id is None."""
        return self.client.start().uri("/api/application").url_segment(application_id).get().go()

    def retrieve_applications(self) -> ClientResponse:
        return self.client.start().uri("/api/application").get().go()

    def update_application(self, application_id: str, request: Any) -> ClientResponse:
        return (
            self.client.start().uri("/api/application")
            .url_segment(application_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def patch_application(self, application_id: str, request: Any) -> ClientResponse:
        return (
            self.client.start().uri("/api/application")
            .url_segment(application_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def deactivate_application(self, application_id: str) -> ClientResponse:
        return self.client.start().uri("/api/application").url_segment(application_id).delete().go()

    def reactivate_application(self, application_id: str) -> ClientResponse:
        return (
            self.client.start().uri("/api/application")
            .url_segment(application_id)
            .url_parameter("reactivate", True)
            .put()
            .go()
        )

    def delete_application(self, application_id: str) -> ClientResponse:
        """Hard delete an application and every registration to it."""
        return (
            self.client.start().uri("/api/application")
            .url_segment(application_id)
            .url_parameter("hardDelete", True)
            .delete()
            .go()
        )

    def create_application_role(self, application_id: str, role_id: Optional[str], request: Any) -> ClientResponse:
        return (
            self.client.start().uri("/api/application")
            .url_segment(application_id)
            .url_segment("role")
            .url_segment(role_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_application_role(self, application_id: str, role_id: str) -> ClientResponse:
        return (
            self.client.start().uri("/api/application")
            .url_segment(application_id)
            .url_segment("role")
            .url_segment(role_id)
            .delete()
            .go()
        )
