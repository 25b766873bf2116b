"""FusionAuth API facade.

Architecture:
- client.py: FusionAuthClient (shared configuration, builder factory)
- users.py: Users, registrations, password and email verification flows
- applications.py: Applications and application roles
- groups.py: Groups and memberships
- tenants.py: Tenants
- login.py: Login, logout and JWT management
- oauth.py: OAuth2 form-encoded grants

Usage:
    from fusionauth.core.api import FusionAuthClient, UserService

    client = FusionAuthClient("api-key", "http://localhost:9011")
    response = UserService(client).retrieve_user(user_id)
    if response.was_successful:
        print(response.success_response.user.email)
    else:
        print(response.status, response.error_response)
"""
from .applications import ApplicationService
from .client import TENANT_ID_HEADER, FusionAuthClient
from .groups import GroupService
from .login import LoginService
from .oauth import OAuthService
from .tenants import TenantService
from .users import UserService

__all__ = [
    "FusionAuthClient",
    "TENANT_ID_HEADER",
    "UserService",
    "ApplicationService",
    "GroupService",
    "TenantService",
    "LoginService",
    "OAuthService",
]
