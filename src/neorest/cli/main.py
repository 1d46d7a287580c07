from __future__ import annotations

import argparse
import json
import sys

import httpx

from neorest.database import Database
from neorest.errors import NeoRestError
from neorest.settings import settings


def _configure_logging() -> None:
    import logging

    level = (settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _connect(args: argparse.Namespace) -> Database:
    return Database.connect(args.url, username=args.username, password=args.password)


def _print(obj) -> None:
    print(json.dumps(obj, indent=2, sort_keys=True))


def cmd_version() -> int:
    from neorest import __version__

    print(__version__)
    return 0


def cmd_rel_get(args: argparse.Namespace) -> int:
    with _connect(args) as db:
        rel = db.relationships.get(args.id)
        _print(
            {
                "id": rel.id,
                "type": rel.type,
                "self": rel.href_self,
                "start": rel.href_start,
                "end": rel.href_end,
                "data": rel.data,
            }
        )
    return 0


def cmd_rel_types(args: argparse.Namespace) -> int:
    with _connect(args) as db:
        _print(db.relationships.types())
    return 0


def cmd_node_get(args: argparse.Namespace) -> int:
    with _connect(args) as db:
        node = db.nodes.get(args.id)
        _print({"id": node.id, "self": node.href_self, "data": node.data})
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="neorest")
    p.add_argument("--url", default=None, help="Service root URL (default: NEOREST_URL)")
    p.add_argument("--username", default=None)
    p.add_argument("--password", default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version").set_defaults(func=lambda _a: cmd_version())

    rel = sub.add_parser("rel", help="Relationship operations")
    rel_sub = rel.add_subparsers(dest="rel_cmd", required=True)

    get = rel_sub.add_parser("get", help="Fetch a relationship by id")
    get.add_argument("id", type=int)
    get.set_defaults(func=cmd_rel_get)

    rel_sub.add_parser("types", help="List relationship types").set_defaults(func=cmd_rel_types)

    node = sub.add_parser("node", help="Node operations")
    node_sub = node.add_subparsers(dest="node_cmd", required=True)

    nget = node_sub.add_parser("get", help="Fetch a node by id")
    nget.add_argument("id", type=int)
    nget.set_defaults(func=cmd_node_get)

    return p


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging()
    try:
        return args.func(args)
    except NeoRestError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except httpx.HTTPError as e:
        print(f"transport error: {e}", file=sys.stderr)
        return 2


def app() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    app()
