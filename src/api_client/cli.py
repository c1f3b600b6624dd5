"""Command-line interface for the people API demo client."""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from api_client.clients.registration import build_person_client
from api_client.clients.response import ApiResponse
from api_client.models import PersonModel
from api_client.settings import get_settings


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def _report(response: ApiResponse) -> int:
    print(response.to_json(indent=True).decode("utf-8"))
    return 0 if response.success else 1


def command_check_config(args: argparse.Namespace) -> int:
    """Print active configuration."""

    settings = get_settings()
    print("API client configuration")
    print(f"Base URL: {settings.api_base_url}")
    print(f"People endpoint: {settings.person_endpoint}")
    print(f"API key configured: {settings.api_key is not None}")
    print(f"Timeout: {settings.api_timeout_seconds}s")
    print(f"Log level: {settings.log_level}")
    return 0


def command_get_person(args: argparse.Namespace) -> int:
    client = build_person_client(get_settings())
    return _report(client.get_person_by_id(args.person_id))


def command_add_person(args: argparse.Namespace) -> int:
    client = build_person_client(get_settings())
    person = PersonModel(first_name=args.first_name, last_name=args.last_name)
    return _report(client.add_person(person))


def command_update_person(args: argparse.Namespace) -> int:
    client = build_person_client(get_settings())
    person = PersonModel(
        id=args.person_id,
        first_name=args.first_name,
        last_name=args.last_name,
        is_active=not args.inactive,
    )
    return _report(client.update_person(args.person_id, person))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="People API client tools.")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check-config", help="Print active configuration.")
    check.set_defaults(func=command_check_config)

    get = sub.add_parser("get-person", help="Fetch a person by id.")
    get.add_argument("person_id", type=int, help="Identifier of the person.")
    get.set_defaults(func=command_get_person)

    add = sub.add_parser("add-person", help="Create a new person.")
    add.add_argument("--first-name", type=str, required=True, help="Given name.")
    add.add_argument("--last-name", type=str, required=True, help="Family name.")
    add.set_defaults(func=command_add_person)

    update = sub.add_parser("update-person", help="Replace an existing person.")
    update.add_argument("person_id", type=int, help="Identifier of the person.")
    update.add_argument("--first-name", type=str, default=None, help="Given name.")
    update.add_argument("--last-name", type=str, default=None, help="Family name.")
    update.add_argument("--inactive", action="store_true", help="Mark the person as inactive.")
    update.set_defaults(func=command_update_person)

    return parser


def run(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(run())
