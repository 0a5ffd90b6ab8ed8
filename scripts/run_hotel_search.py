#!/usr/bin/env python3
"""Invoke the hotel search handler locally."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from hotel_search.cities import known_cities
from hotel_search.handler import lambda_handler

EXAMPLE_QUERY: dict[str, Any] = {
    "city": "Paris",
    "checkin": "2024-06-01",
    "checkout": "2024-06-05",
    "adults": "2",
    "children": "0",
}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Run the hotel search Lambda locally with a JSON object of query "
            f"parameters. Known cities: {', '.join(known_cities())}."
        )
    )
    parser.add_argument(
        "payload",
        nargs="?",
        help="Path to a JSON file containing queryStringParameters.",
    )
    return parser.parse_args()


def load_query(path: str | None) -> dict[str, Any]:
    if not path:
        return EXAMPLE_QUERY
    payload_path = Path(path)
    with payload_path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def main() -> None:
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    args = parse_args()
    event = {"queryStringParameters": load_query(args.payload)}
    response = lambda_handler(event, None)
    print(json.dumps(response, indent=2))


if __name__ == "__main__":
    main()
