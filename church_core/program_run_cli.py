"""
Church Program Run CLI

Runs a named program (program_registry) on a JSON list of ints and emits
a JSON payload.

Contract: the payload carries a schema tag; the JSON Schema ships with the
package as church_core/schemas/program_run.schema.json.

    church-run factorial "[5]" --pretty
    church-run sum-list "[3,2,1]"
    church-run --list
"""

from __future__ import annotations

import argparse
import datetime
import hashlib
import json
import logging
import sys
from typing import Any, List, Optional

from church_core import config
from church_core.api import run_named_program
from church_core.program_registry import get_program, list_program_names

SCHEMA_TAG = "church-program-run.v1"
SCHEMA_FILE = "church_core/schemas/program_run.schema.json"

_logger = logging.getLogger(__name__)


def _utc_now_z() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def _inputs_hash(program: str, xs: List[int]) -> str:
    payload = json.dumps({"program": program, "input": xs}, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _parse_int_list_from_json_text(text: str) -> List[int]:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Input must be JSON. Parse error: {e}") from e

    if not isinstance(obj, list):
        raise ValueError("Input JSON must be a list of integers (e.g. [1,2,3]).")

    out: List[int] = []
    for i, v in enumerate(obj):
        # bool is an int subclass; reject it explicitly.
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"Input[{i}] is not an integer: {v!r}")
        if v < 0:
            raise ValueError(f"Input[{i}] is negative; numerals are natural numbers.")
        out.append(v)
    return out


def _read_input_json(args: argparse.Namespace) -> List[int]:
    """
    Priority:
      1) positional input_json (if provided)
      2) --input-file
      3) --stdin
    """
    if args.input_json is not None:
        return _parse_int_list_from_json_text(args.input_json)

    if args.input_file is not None:
        with args.input_file:
            text = args.input_file.read()
        return _parse_int_list_from_json_text(text)

    if args.stdin:
        return _parse_int_list_from_json_text(sys.stdin.read())

    raise ValueError("No input provided. Use positional JSON, --input-file, or --stdin.")


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=config.log_level(verbose),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="church-run",
        description="Run a named Church-encoded program on a JSON list of ints and emit JSON.",
    )
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema file and exit.")
    ap.add_argument("--list", action="store_true", help="List known program names and exit.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    ap.add_argument("--stdin", action="store_true", help="Read input JSON from stdin.")
    ap.add_argument(
        "--input-file",
        type=argparse.FileType("r", encoding="utf-8"),
        default=None,
        help="Read input JSON from a file (expects a JSON list of ints).",
    )
    ap.add_argument(
        "--recursion-limit",
        type=int,
        default=None,
        help="Raise the host recursion limit before evaluating (default: $CHURCH_RECURSION_LIMIT).",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")

    ap.add_argument("program", nargs="?", help="Registered program name (e.g. factorial)")
    ap.add_argument(
        "input_json",
        nargs="?",
        default=None,
        help='Input JSON list of ints, e.g. "[5]". Optional if using --stdin/--input-file.',
    )

    args = ap.parse_args(argv)
    _setup_logging(args.verbose)

    if args.schema:
        print(f"{SCHEMA_TAG} {SCHEMA_FILE}")
        return 0

    if args.list:
        for name in list_program_names():
            prog = get_program(name)
            print(f"{name}\t{prog.doc}" if prog is not None and prog.doc else name)
        return 0

    if not args.program:
        ap.error("program is required unless --schema or --list is used")

    try:
        xs = _read_input_json(args)
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    limit = config.apply_recursion_limit(args.recursion_limit)
    _logger.debug("recursion limit %d", limit)

    warnings: List[str] = []
    try:
        output = run_named_program(args.program, xs)
        ok = True
    except RecursionError:
        ok = False
        output = None
        warnings.append(
            "host recursion limit exceeded; retry with a larger --recursion-limit or smaller input"
        )
    except (KeyError, ValueError) as e:
        ok = False
        output = None
        warnings.append(e.args[0] if e.args else str(e))
    except Exception as e:
        _logger.exception("program %r failed", args.program)
        ok = False
        output = None
        warnings.append(f"{type(e).__name__}: {e}")

    payload: dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "program": args.program,
        "input": xs,
        "output": output,
        "ok": bool(ok),
        "warnings": warnings,
        "meta": {
            "tool": "program_run_cli",
            "generated_at": _utc_now_z(),
            "determinism": {
                "inputs_hash": _inputs_hash(args.program, xs),
            },
        },
    }

    _emit(payload, pretty=bool(args.pretty))
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
