"""FusionAuth user and registration operations."""
from __future__ import annotations
from typing import Any, Optional, Sequence

from fusionauth.core.rest import ClientResponse, JSONBodyHandler

from .client import FusionAuthClient


class UserService:
    """Service for FusionAuth users, registrations and password flows."""

    def __init__(self, client: FusionAuthClient):
        """Initialize user service.

        Args:
            client: Configured FusionAuth client
        """
        self.client = client

    # ─────────────────────────────────────────────────────────────────────
    # Users
    # ─────────────────────────────────────────────────────────────────────
    def create_user(self, user_id: Optional[str], request: Any) -> ClientResponse:
        """Create a user. A None user_id lets FusionAuth generate the Id.

        Args:
            user_id: Id for the new user (optional)
            request: UserRequest body, e.g. {"user": {"email": ..., "password": ...}}
        """
        return (
            self.client.start().uri("/api/user")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_user(self, user_id: str) -> ClientResponse:
        return self.client.start().uri("/api/user").url_segment(user_id).get().go()

    def retrieve_user_by_email(self, email: str) -> ClientResponse:
        return self.client.start().uri("/api/user").url_parameter("email", email).get().go()

    def retrieve_user_by_login_id(self, login_id: str) -> ClientResponse:
        """Retrieve a user by email or username."""
        return self.client.start().uri("/api/user").url_parameter("loginId", login_id).get().go()

    def retrieve_user_by_username(self, username: str) -> ClientResponse:
        return self.client.start().uri("/api/user").url_parameter("username", username).get().go()

    def update_user(self, user_id: str, request: Any) -> ClientResponse:
        return (
            self.client.start().uri("/api/user")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def patch_user(self, user_id: str, request: Any) -> ClientResponse:
        """Update only the fields present in the request."""
        return (
            self.client.start().uri("/api/user")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def deactivate_user(self, user_id: str) -> ClientResponse:
        """Soft delete: the user can no longer log in but is kept."""
        return self.client.start().uri("/api/user").url_segment(user_id).delete().go()

    def reactivate_user(self, user_id: str) -> ClientResponse:
        return (
            self.client.start().uri("/api/user")
            .url_segment(user_id)
            .url_parameter("reactivate", True)
            .put()
            .go()
        )

    def delete_user(self, user_id: str) -> ClientResponse:
        """Permanently delete a user and all of their data."""
        return (
            self.client.start().uri("/api/user")
            .url_segment(user_id)
            .url_parameter("hardDelete", True)
            .delete()
            .go()
        )

    def deactivate_users_by_ids(self, user_ids: Sequence[str]) -> ClientResponse:
        """Bulk soft delete; every Id is sent as a repeated ``userId`` parameter."""
        return (
            self.client.start().uri("/api/user/bulk")
            .url_parameter("userId", list(user_ids))
            .url_parameter("dryRun", False)
            .url_parameter("hardDelete", False)
            .delete()
            .go()
        )

    def delete_users_by_query(self, request: Any) -> ClientResponse:
        """Bulk delete the users matching a search query (or an explicit userIds list)."""
        return (
            self.client.start().uri("/api/user/bulk")
            .body_handler(JSONBodyHandler(request))
            .delete()
            .go()
        )

    def search_users_by_ids(self, ids: Sequence[str]) -> ClientResponse:
        return self.client.start().uri("/api/user/search").url_parameter("ids", list(ids)).get().go()

    def search_users_by_query(self, request: Any) -> ClientResponse:
        return (
            self.client.start().uri("/api/user/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    # ─────────────────────────────────────────────────────────────────────
    # Registrations
    # ─────────────────────────────────────────────────────────────────────
    def register(self, user_id: Optional[str], request: Any) -> ClientResponse:
        """Register a user to an application.

        With a user_id only the registration is created; without one the request
        must also carry the user, which is created at the same time.
        """
        return (
            self.client.start().uri("/api/user/registration")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_registration(self, user_id: str, application_id: str) -> ClientResponse:
        return (
            self.client.start().uri("/api/user/registration")
            .url_segment(user_id)
            .url_segment(application_id)
            .get()
            .go()
        )

    def delete_registration(self, user_id: str, application_id: str) -> ClientResponse:
        return (
            self.client.start().uri("/api/user/registration")
            .url_segment(user_id)
            .url_segment(application_id)
            .delete()
            .go()
        )

    # ─────────────────────────────────────────────────────────────────────
    # Password & email verification
    # ─────────────────────────────────────────────────────────────────────
    def forgot_password(self, request: Any) -> ClientResponse:
        return (
            self.client.start().uri("/api/user/forgot-password")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def change_password(self, change_password_id: Optional[str], request: Any) -> ClientResponse:
        """Change a password with the Id issued by the forgot password workflow.

        The Id may also be sent in the request body, in which case pass None.
        """
        return (
            self.client.start_anonymous().uri("/api/user/change-password")
            .url_segment(change_password_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def verify_email(self, verification_id: str) -> ClientResponse:
        return (
            self.client.start_anonymous().uri("/api/user/verify-email")
            .url_segment(verification_id)
            .post()
            .go()
        )

    def resend_email_verification(self, email: str) -> ClientResponse:
        return (
            self.client.start().uri("/api/user/verify-email")
            .url_parameter("email", email)
            .put()
            .go()
        )
