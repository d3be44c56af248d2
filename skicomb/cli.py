from __future__ import annotations

"""
skicomb run CLI

Parses a program in SKI, Iota or Jot notation, simplifies it to a fixpoint
and reduces it over trailing arguments.

Examples:
  python3 -m skicomb.cli "S(K(SI))K"
  python3 -m skicomb.cli --json --pretty "*i*i*ii"
  echo 11100 | python3 -m skicomb.cli --stdin --trace
  SKI_TRACE=1 python3 -m skicomb.cli WBWB

Contract: --json emits a payload tagged with SCHEMA_TAG (see --schema).
"""

import argparse
import datetime
import hashlib
import io
import json
import sys
from typing import Any, List, Optional

from skicomb.api import run_program
from skicomb.cli_schema import SCHEMA_DOC, SCHEMA_TAG, schema_triplet
from skicomb.config import SimplifyConfig
from skicomb.errors import ParseError, StepLimitExceeded


def _utc_now_z() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def _inputs_hash(text: str, reduce_args: bool) -> str:
    payload = json.dumps({"program": text, "reduce": reduce_args}, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _read_program(args: argparse.Namespace) -> str:
    """
    Priority:
      1) positional program
      2) --input-file
      3) --stdin
    """
    if args.program is not None:
        return args.program

    if args.input_file is not None:
        try:
            return args.input_file.read()
        finally:
            args.input_file.close()

    if args.stdin:
        return sys.stdin.read()

    raise ValueError("No program provided. Use a positional program, --input-file, or --stdin.")


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def _build_config(args: argparse.Namespace, trace_sink) -> SimplifyConfig:
    env_cfg = SimplifyConfig.from_env(stream=trace_sink)
    trace = trace_sink if args.trace else env_cfg.trace
    max_passes = args.max_passes if args.max_passes is not None else env_cfg.max_passes
    return SimplifyConfig(trace=trace, max_passes=max_passes)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="skicomb",
        description="Simplify and reduce a combinatory logic program (SKI, Iota or Jot notation).",
    )
    ap.add_argument("--schema", action="store_true", help="Print schema tag, doc and JSON schema paths and exit.")
    ap.add_argument("--json", action="store_true", help="Emit a JSON payload instead of plain lines.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output (implies --json).")
    ap.add_argument("--trace", action="store_true", help="Show every intermediate simplification step.")
    ap.add_argument("--no-reduce", action="store_true", help="Only simplify; skip the trailing-argument reduction.")
    ap.add_argument("--max-passes", type=int, default=None, help="Give up after N simplification passes.")
    ap.add_argument("--stdin", action="store_true", help="Read the program from stdin.")
    ap.add_argument(
        "--input-file",
        type=argparse.FileType("r", encoding="utf-8"),
        default=None,
        help="Read the program from a file.",
    )
    ap.add_argument("program", nargs="?", default=None, help='Program text, e.g. "SKK", "*i*i*ii" or "11100".')

    args = ap.parse_args(argv)

    if args.schema:
        print(schema_triplet(), flush=True)
        return 0

    as_json = bool(args.json or args.pretty)

    try:
        text = _read_program(args)
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    # JSON mode collects the trace into the payload; text mode streams it
    trace_buf = io.StringIO() if as_json else None
    try:
        config = _build_config(args, trace_buf if as_json else sys.stderr)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    reduce_args = not args.no_reduce
    ok = True
    error = None
    result: dict[str, Any] = {}
    try:
        result = run_program(text, reduce_args=reduce_args, config=config)
    except ParseError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2
    except StepLimitExceeded as e:
        ok = False
        error = str(e)

    if not as_json:
        if not ok:
            print(f"skicomb: {error}", file=sys.stderr)
            return 1
        print(f"parsed:     {result['parsed']}")
        print(f"simplified: {result['simplified']}")
        if reduce_args:
            print(f"reduced:    {result['reduced']} ({result['arguments']} args)")
        return 0

    payload: dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_doc": SCHEMA_DOC,
        "input": text,
        "notation": result.get("notation"),
        "parsed": result.get("parsed"),
        "parsed_full": result.get("parsed_full"),
        "simplified": result.get("simplified"),
        "reduced": result.get("reduced"),
        "arguments": result.get("arguments"),
        "ok": ok,
        "error": error,
        "meta": {
            "tool": "skicomb.cli",
            "generated_at": _utc_now_z(),
            "determinism": {
                "inputs_hash": _inputs_hash(text, reduce_args),
            },
        },
    }
    if config.trace is not None:
        payload["trace"] = trace_buf.getvalue().splitlines()

    _emit(payload, pretty=bool(args.pretty))
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
