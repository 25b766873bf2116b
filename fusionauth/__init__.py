"""FusionAuth Python client.

To call the API:
    from fusionauth import FusionAuthClient, UserService

    client = FusionAuthClient("api-key", "http://localhost:9011")
    response = UserService(client).retrieve_user_by_email("alice@example.com")

To build a request by hand:
    from fusionauth.core.rest import RESTClient, JSONBodyHandler
"""
from .core.api import (
    ApplicationService,
    FusionAuthClient,
    GroupService,
    LoginService,
    OAuthService,
    TenantService,
    UserService,
)
from .core.rest import (
    ClientResponse,
    DynamicObject,
    FormDataBodyHandler,
    FusionAuthAPIError,
    FusionAuthError,
    JSONBodyHandler,
    JSONResponseHandler,
    RequestConfigurationError,
    ResponseDecodeError,
    RESTClient,
)

__version__ = "1.0.0"

__all__ = [
    "FusionAuthClient",
    "UserService",
    "ApplicationService",
    "GroupService",
    "TenantService",
    "LoginService",
    "OAuthService",
    "RESTClient",
    "ClientResponse",
    "JSONBodyHandler",
    "FormDataBodyHandler",
    "JSONResponseHandler",
    "DynamicObject",
    "FusionAuthError",
    "FusionAuthAPIError",
    "RequestConfigurationError",
    "ResponseDecodeError",
]
