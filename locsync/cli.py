"""Command line: serve the API, bundle per-locale files, check translations."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from locsync.config import API_HOST, API_PORT, LOG_FORMAT, LOG_LEVEL
from locsync.core.transfer import load_directory, parse_dataset, serialize_export
from locsync.core.validator import validate_dataset
from locsync.errors import DatasetParseError
from locsync.models.record_types import record_type_names

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("locsync.api.app:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def cmd_bundle(args: argparse.Namespace) -> int:
    dataset = load_directory(Path(args.directory))
    text = serialize_export(dataset)
    if args.output == "-":
        sys.stdout.write(text + "\n")
    else:
        Path(args.output).write_text(text, encoding="utf-8")
        logger.info("Unified data written to %s", args.output)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    try:
        dataset = parse_dataset(Path(args.file).read_text(encoding="utf-8"))
    except (OSError, DatasetParseError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    incomplete = 0
    for name in record_type_names():
        result = validate_dataset(dataset, name)
        for item in result.incomplete_items:
            incomplete += 1
            print(f"{name} {item.record_id}: {', '.join(item.missing_fields)}")
    if incomplete:
        print(f"{incomplete} record(s) with incomplete translations")
        return 1
    print("All translations complete")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="locsync", description="Localized content sync engine")
    ap.add_argument("--log-level", default=LOG_LEVEL)
    sub = ap.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("serve", help="Run the editor API")
    s.add_argument("--host", default=API_HOST)
    s.add_argument("--port", type=int, default=API_PORT)
    s.add_argument("--reload", action="store_true")
    s.set_defaults(func=cmd_serve)

    b = sub.add_parser("bundle", help="Merge <locale>/<type>.json files into one export")
    b.add_argument("directory")
    b.add_argument("-o", "--output", default="-")
    b.set_defaults(func=cmd_bundle)

    v = sub.add_parser("validate", help="List records with incomplete translations")
    v.add_argument("file")
    v.set_defaults(func=cmd_validate)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
