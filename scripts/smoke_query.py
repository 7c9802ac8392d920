"""Send one query to a running sqlsnap server and print the result."""

import argparse
import json
import sys

import httpx


def main() -> None:
    """Post a query to /query and print the JSON response."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("database", help="postgresql, mysql, sqlite, oracle or redis")
    parser.add_argument("query")
    parser.add_argument("--url", default="http://localhost:9091")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=0)
    parser.add_argument("--user", default="")
    parser.add_argument("--password", default="")
    parser.add_argument("--dbname", default="")
    parser.add_argument("--limit", type=int)
    parser.add_argument("--offset", type=int)
    args = parser.parse_args()

    body: dict[str, object] = {
        "database": args.database,
        "query": args.query,
        "config": {
            "host": args.host,
            "port": args.port,
            "user": args.user,
            "password": args.password,
            "dbname": args.dbname,
        },
    }
    if args.limit is not None:
        body["limit"] = args.limit
    if args.offset is not None:
        body["offset"] = args.offset

    try:
        resp = httpx.post(f"{args.url}/query", json=body, timeout=30.0)
    except httpx.ConnectError:
        print(f"  sqlsnap is not running at {args.url}. Start it with: sqlsnap -port 9091")
        sys.exit(1)

    print(json.dumps(resp.json(), indent=2))
    if resp.status_code != 200:
        sys.exit(1)


if __name__ == "__main__":
    main()
