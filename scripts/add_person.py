#!/usr/bin/env python3
"""Add a single person through the people API using settings from the environment."""

from __future__ import annotations

import argparse

from api_client.clients.registration import build_person_client
from api_client.models import PersonModel
from api_client.settings import get_settings


def add_person(first_name: str, last_name: str) -> bool:
    client = build_person_client(get_settings())
    response = client.add_person(PersonModel(first_name=first_name, last_name=last_name))
    if not response.success:
        print(f"Request failed with HTTP {response.http_status_code}: {response.error_message or 'no details'}")
        return False
    print("Created:", response.data)
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Add a person through the people API.")
    parser.add_argument("--first-name", default="Enrico", help="Given name.")
    parser.add_argument("--last-name", default="Rossini", help="Family name.")
    args = parser.parse_args()
    raise SystemExit(0 if add_person(args.first_name, args.last_name) else 1)


if __name__ == "__main__":
    main()
