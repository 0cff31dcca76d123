"""Lightweight REST client for the TalentScope API."""

from __future__ import annotations

import argparse
import json

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the TalentScope REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("query", nargs="?", default="", help="Search query")
    parser.add_argument("--game", default=None)
    parser.add_argument("--region", default=None)
    parser.add_argument("--experience", default=None)
    parser.add_argument("--report-status", metavar="USER_ID", help="Fetch report status for a user and exit")
    parser.add_argument("--generate", metavar="USER_ID", help="Trigger report generation for a user and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.report_status or args.generate:
            if args.generate:
                resp = client.post(f"/reports/{args.generate}/generate")
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))
            if args.report_status:
                resp = client.get(f"/reports/{args.report_status}/status")
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))
            return

        payload = {
            "query": args.query,
            "game": args.game,
            "region": args.region,
            "experience": args.experience,
        }
        resp = client.post("/players/search", json=payload)
        if resp.status_code == 503:
            raise SystemExit("search service temporarily unavailable; try again")
        resp.raise_for_status()
        body = resp.json()
        print(f"{body['total']} players matched")
        for player in body["players"]:
            print(f"- {player['name']} ({player['role']}, {player['region']}, {player['experience']})")


if __name__ == "__main__":
    main()
