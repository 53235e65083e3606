"""CloudLock command line.

Usage (from repo root):
    python -m cli check            # prompts for the password
    python -m cli check 'hunter2' --json
    python -m cli serve --port 3000
"""

from __future__ import annotations

import argparse
import getpass
import json
import logging

from core.strength import analyze
from server import serve


def _cmd_check(args) -> int:
    secret = args.password
    if secret is None:
        secret = getpass.getpass("Password: ")
    result = analyze(secret)
    if args.json:
        print(
            json.dumps(
                {
                    "score": result.score,
                    "category": result.category,
                    "suggestions": list(result.suggestions),
                }
            )
        )
        return 0
    print(f"Strength: {result.category} ({result.score}/100)")
    for s in result.suggestions:
        print(f"  - {s}")
    return 0


def _cmd_serve(args) -> int:
    serve(args.host, args.port)
    return 0


def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog="cloudlock")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="command", required=True)

    chk = sub.add_parser("check", help="Score a candidate password")
    chk.add_argument("password", nargs="?", default=None)
    chk.add_argument("--json", action="store_true", help="Print a JSON object")
    chk.set_defaults(func=_cmd_check)

    srv = sub.add_parser("serve", help="Run the API stub")
    srv.add_argument("--host", default="127.0.0.1")
    srv.add_argument("--port", type=int, default=None)
    srv.set_defaults(func=_cmd_serve)

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
