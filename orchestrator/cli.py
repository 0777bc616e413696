from __future__ import annotations

import argparse
import json
import logging
import sys

from contracts.errors import InvalidConfiguration, JurisdictionNotFound
from jurisdiction_repository import InMemoryJurisdictionRepository, load_default_repository
from orchestrator import generate

EXIT_OK = 0
EXIT_INVALID_CONFIGURATION = 2
EXIT_NOT_FOUND = 3


def _load_json(path: str | None) -> dict:
    if path:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    return json.load(sys.stdin)


def _print_error(error: str, detail: str) -> None:
    print(json.dumps({"error": error, "detail": detail}, sort_keys=True))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a location compliance brief.")
    parser.add_argument("--request", help="request JSON file (stdin when omitted)")
    parser.add_argument("--jurisdictions", help="jurisdiction dataset JSON (bundled dataset when omitted)")
    parser.add_argument("--strict-city", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.jurisdictions:
        repository = InMemoryJurisdictionRepository.from_json_file(args.jurisdictions)
    else:
        repository = load_default_repository()

    request_raw = _load_json(args.request)

    try:
        brief = generate(request_raw, repository, strict_city=args.strict_city)
    except InvalidConfiguration as exc:
        _print_error("invalid_configuration", exc.reason)
        return EXIT_INVALID_CONFIGURATION
    except JurisdictionNotFound as exc:
        _print_error("not_found", exc.reason)
        return EXIT_NOT_FOUND

    print(json.dumps(brief.to_dict(), sort_keys=True))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
