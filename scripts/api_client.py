"""Lightweight REST client for the transferviz API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_mapping(name: str) -> dict[str, str]:
    if not name:
        return {}
    try:
        return json.loads(name)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid mapping JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the transferviz REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("transfers", type=Path, nargs="?", help="Transfers CSV to upload")
    parser.add_argument("--mapping", default="", help="JSON mapping for CSV columns")
    parser.add_argument("--dataset", default=None, help="Existing dataset id (default: bundled file)")
    parser.add_argument("--team", default=None, help="Club to filter the team chart by")
    parser.add_argument("--list-teams", action="store_true", help="List teams by transfer count and exit")
    parser.add_argument("--export-path", type=Path, help="Download the yearly CSV to this path")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        dataset_id = args.dataset or "default"
        if args.transfers is not None:
            files = {"transfers": (args.transfers.name, args.transfers.read_bytes(), "text/csv")}
            mapping = build_mapping(args.mapping)
            data = {"mapping": json.dumps(mapping)} if mapping else None
            resp = client.post("/api/datasets", files=files, data=data)
            resp.raise_for_status()
            uploaded = resp.json()
            dataset_id = uploaded["dataset_id"]
            print("Upload report:", json.dumps(uploaded["report"], indent=2))

        if args.list_teams:
            resp = client.get(f"/api/datasets/{dataset_id}/teams")
            if resp.status_code == 404:
                raise SystemExit(f"dataset {dataset_id} not found")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        params = {"dataset": dataset_id}
        if args.team:
            params["team"] = args.team
        resp = client.get("/api/dashboard", params=params)
        if resp.status_code == 404:
            raise SystemExit(resp.json().get("detail", "dataset not found"))
        resp.raise_for_status()
        payload = resp.json()
        print("Summary:", json.dumps(payload["summary"], indent=2))
        print(f"Received {len(payload['yearly'])} yearly aggregates")
        if payload["team_stats"] is not None:
            print(f"Team {payload['team']}:", json.dumps(payload["team_stats"], indent=2))

        if args.export_path:
            resp = client.get(f"/api/datasets/{dataset_id}/export.csv", params={"team": args.team} if args.team else None)
            resp.raise_for_status()
            args.export_path.write_text(resp.text)
            print(f"CSV export saved to {args.export_path}")


if __name__ == "__main__":
    main()
