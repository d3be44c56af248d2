# skicomb/cli_schema.py
"""
The --schema contract: one line, three whitespace-free fields.

    ski-run.v1 docs/ski_run_schema.md docs/schemas/ski_run_schema.json
"""

from __future__ import annotations

from dataclasses import dataclass

SCHEMA_TAG = "ski-run.v1"
SCHEMA_DOC = "docs/ski_run_schema.md"
SCHEMA_JSON = "docs/schemas/ski_run_schema.json"


@dataclass(frozen=True)
class SchemaTriplet:
    tag: str
    doc_md: str
    schema_json: str


def _token(name: str, s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be str, got {type(s).__name__}")
    if s == "" or any(ch.isspace() for ch in s):
        raise ValueError(f"{name} must be a non-empty single token: {s!r}")
    return s


def schema_triplet(
    tag: str = SCHEMA_TAG,
    doc_md: str = SCHEMA_DOC,
    schema_json: str = SCHEMA_JSON,
) -> str:
    """Triplet line without trailing newline."""
    return f"{_token('tag', tag)} {_token('doc_md', doc_md)} {_token('schema_json', schema_json)}"


def parse_schema_triplet(line: str) -> SchemaTriplet:
    """Strict inverse of schema_triplet; tolerates one trailing newline."""
    s = line[:-1] if line.endswith("\n") else line
    parts = s.split(" ")
    if len(parts) != 3:
        raise ValueError(f"expected exactly 3 fields separated by single spaces: {line!r}")
    tag, doc_md, schema_json = parts
    return SchemaTriplet(
        tag=_token("tag", tag),
        doc_md=_token("doc_md", doc_md),
        schema_json=_token("schema_json", schema_json),
    )
