"""FusionAuth group and group membership operations."""
from __future__ import annotations
from typing import Any, Optional

from fusionauth.core.rest import ClientResponse, JSONBodyHandler

from .client import FusionAuthClient


class GroupService:
    """Service for FusionAuth groups."""

    def __init__(self, client: FusionAuthClient):
        """Initialize group service.

        Args:
            client: Configured FusionAuth client
        """
        self.client = client

    def create_group(self, group_id: Optional[str], request: Any) -> ClientResponse:
        return (
            self.client.start().uri("/api/group")
            .url_segment(group_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_group(self, group_id: str) -> ClientResponse:
        return self.client.start().uri("/api/group").url_segment(group_id).get().go()

    def retrieve_groups(self) -> ClientResponse:
        return self.client.start().uri("/api/group").get().go()

    def update_group(self, group_id: str, request: Any) -> ClientResponse:
        return (
            self.client.start().uri("/api/group")
            .url_segment(group_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def delete_group(self, group_id: str) -> ClientResponse:
        return self.client.start().uri("/api/group").url_segment(group_id).delete().go()

    def create_group_members(self, request: Any) -> ClientResponse:
        """Add users to groups.

        Args:
            request: MemberRequest, e.g. {"members": {group_id: [{"userId": ...}]}}
        """
        return (
            self.client.start().uri("/api/group/member")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_group_members(self, request: Any) -> ClientResponse:
        return (
            self.client.start().uri("/api/group/member")
            .body_handler(JSONBodyHandler(request))
            .delete()
            .go()
        )
