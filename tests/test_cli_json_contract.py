from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from subprocess import run, PIPE

import jsonschema

ROOT = Path(__file__).resolve().parents[1]
SCHEMA = json.loads((ROOT / "docs" / "schemas" / "ski_run_schema.json").read_text(encoding="utf-8"))


def _run(args, env=None):
    return run(
        [sys.executable, "-m", "skicomb.cli", *args],
        cwd=str(ROOT),
        stdout=PIPE,
        stderr=PIPE,
        text=True,
        env=env,
    )


def _payload(args, env=None):
    r = _run(args, env=env)
    assert r.stdout.strip(), f"expected json on stdout; stderr:\n{r.stderr}"
    return r, json.loads(r.stdout)


def test_json_contract_iota():
    r, data = _payload(["--json", "*i*i*ii"])
    assert r.returncode == 0, r.stderr

    required = {"schema", "schema_doc", "input", "notation", "parsed", "simplified", "reduced", "arguments", "ok"}
    missing = required - set(data.keys())
    assert not missing, f"missing keys: {sorted(missing)}"

    assert data["schema"] == "ski-run.v1"
    assert data["notation"] == "iota"
    assert data["parsed"] == "ISKSK"
    assert data["parsed_full"] == "((((IS)K)S)K)"
    assert data["simplified"] == "K"
    assert data["reduced"] == "a"
    assert data["arguments"] == 2
    assert data["ok"] is True
    assert data["error"] is None
    assert "trace" not in data


def test_json_validates_against_schema():
    for program in ("S", "B(CW)", "11111000", "*ii"):
        r, data = _payload(["--pretty", program])
        assert r.returncode == 0, r.stderr
        jsonschema.validate(instance=data, schema=SCHEMA)


def test_json_inputs_hash_is_deterministic():
    _, a = _payload(["--json", "SKK"])
    _, b = _payload(["--json", "SKK"])
    _, c = _payload(["--json", "SKS"])
    ha = a["meta"]["determinism"]["inputs_hash"]
    assert ha == b["meta"]["determinism"]["inputs_hash"]
    assert ha != c["meta"]["determinism"]["inputs_hash"]


def test_json_trace_embedded():
    r, data = _payload(["--json", "--trace", "--no-reduce", "W(BS)C"])
    assert r.returncode == 0
    assert r.stderr == ""
    assert data["trace"] == ["W(BS)C", "BSCC", "S(CC)"]
    assert data["reduced"] is None
    jsonschema.validate(instance=data, schema=SCHEMA)


def test_json_trace_from_env():
    env = dict(os.environ, SKI_TRACE="1")
    r, data = _payload(["--json", "--no-reduce", "IC"], env=env)
    assert r.returncode == 0
    assert data["trace"] == ["IC", "C"]


def test_json_pass_limit_reports_failure():
    r, data = _payload(["--json", "--max-passes", "10", "SII(SII)"])
    assert r.returncode == 1
    assert data["ok"] is False
    assert "10 passes" in data["error"]
    assert data["simplified"] is None
    jsonschema.validate(instance=data, schema=SCHEMA)
