"""Command-line helper for common FusionAuth administration calls.

This module serves as a CLI wrapper around fusionauth.core.api services.
"""
from __future__ import annotations
import argparse
import json
import os
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fusionauth.config import load_settings
from fusionauth.core.api import FusionAuthClient, LoginService, OAuthService, UserService
from fusionauth.core.rest import ClientResponse, to_plain


def _to_json(value) -> str:
    return json.dumps(to_plain(value), indent=2, sort_keys=True)


def report(command: str, response: ClientResponse) -> int:
    """Print the outcome of one call and return the process exit code."""
    if response.was_successful:
        if response.success_response is not None:
            print(_to_json(response.success_response))
        return 0

    if response.transport_failed:
        print(f"[{command}] Error: could not reach FusionAuth: {response.exception}", file=sys.stderr)
    elif response.decode_error is not None:
        print(f"[{command}] Error: status {response.status}, {response.decode_error}", file=sys.stderr)
    else:
        print(f"[{command}] Error: status {response.status}", file=sys.stderr)
        if response.error_response is not None:
            print(_to_json(response.error_response), file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="FusionAuth admin helper")
    parser.add_argument("--url", default=None, help="FusionAuth base URL (default: FUSIONAUTH_URL)")
    parser.add_argument("--api-key", default=None, help="API key (default: FUSIONAUTH_API_KEY)")
    parser.add_argument("--tenant-id", default=None, help="Tenant Id (default: FUSIONAUTH_TENANT_ID)")

    sub = parser.add_subparsers(dest="cmd")

    ru = sub.add_parser("retrieve-user")
    target = ru.add_mutually_exclusive_group(required=True)
    target.add_argument("--user-id")
    target.add_argument("--email")
    target.add_argument("--login-id")

    su = sub.add_parser("search-users")
    su.add_argument("--ids", nargs="+", required=True)

    du = sub.add_parser("deactivate-users")
    du.add_argument("--ids", nargs="+", required=True)

    lg = sub.add_parser("login")
    lg.add_argument("--login-id", required=True)
    lg.add_argument("--password", default=os.environ.get("FUSIONAUTH_LOGIN_PASSWORD"))
    lg.add_argument("--application-id")

    vj = sub.add_parser("validate-jwt")
    vj.add_argument("--jwt", required=True)

    cc = sub.add_parser("client-credentials")
    cc.add_argument("--client-id", required=True)
    cc.add_argument("--client-secret", default=os.environ.get("FUSIONAUTH_CLIENT_SECRET"))
    cc.add_argument("--scope")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        return

    config = load_settings()
    if args.url:
        config.base_url = args.url
    if args.api_key:
        config.api_key = args.api_key
    if args.tenant_id:
        config.tenant_id = args.tenant_id

    client = FusionAuthClient.from_settings(config)

    if args.cmd == "retrieve-user":
        users = UserService(client)
        if args.user_id:
            response = users.retrieve_user(args.user_id)
        elif args.email:
            response = users.retrieve_user_by_email(args.email)
        else:
            response = users.retrieve_user_by_login_id(args.login_id)
    elif args.cmd == "search-users":
        response = UserService(client).search_users_by_ids(args.ids)
    elif args.cmd == "deactivate-users":
        response = UserService(client).deactivate_users_by_ids(args.ids)
    elif args.cmd == "login":
        if not args.password:
            parser.error("Missing password (use --password or FUSIONAUTH_LOGIN_PASSWORD)")
        response = LoginService(client).login({
            "loginId": args.login_id,
            "password": args.password,
            "applicationId": args.application_id,
        })
    elif args.cmd == "validate-jwt":
        response = LoginService(client).validate_jwt(args.jwt)
    elif args.cmd == "client-credentials":
        if not args.client_secret:
            parser.error("Missing client secret (use --client-secret or FUSIONAUTH_CLIENT_SECRET)")
        response = OAuthService(client).client_credentials_grant(args.client_id, args.client_secret, args.scope)
    else:
        parser.print_help()
        return

    sys.exit(report(args.cmd, response))


if __name__ == "__main__":
    main()
