"""Lightweight REST client for the pyhoops API."""

from __future__ import annotations

import argparse
import json

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch position picks from a running pyhoops API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("period", nargs="?", default="week", choices=["week", "month"], help="Lookback window")
    parser.add_argument("--raw", action="store_true", help="Print the JSON payload instead of board lines")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.get("/recommendations", params={"period": args.period})
        if resp.status_code == 502:
            raise SystemExit(resp.json().get("detail", "upstream stats fetch failed"))
        resp.raise_for_status()
        payload = resp.json()

    if args.raw:
        print(json.dumps(payload, indent=2))
        return

    print(f"{payload['start_date']} to {payload['end_date']} ({payload['records_fetched']} box scores)")
    for slot in payload["slots"]:
        print(slot["display"])


if __name__ == "__main__":
    main()
