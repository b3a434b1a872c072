"""Tests for the batch mode entry point."""
import json
import os

import pytest

from lims_export.main import run_batch_mode


@pytest.fixture
def environment(monkeypatch, tmp_path):
    # run_export writes EXPORT_BACKEND, monkeypatch restores it afterwards
    monkeypatch.setenv("EXPORT_BACKEND", "excel")
    monkeypatch.setenv("EXPORT_OUTPUT_DIR", str(tmp_path))
    monkeypatch.delenv("LOG_FILE", raising=False)
    return tmp_path


def test_batch_mode_exports_jsonl_to_csv(environment, document_dict):
    path = environment / "documents.jsonl"
    line = json.dumps(document_dict)
    path.write_text(f"{line}\n{line}\n", encoding="utf-8")

    exit_code = run_batch_mode(str(path), "csv")

    assert exit_code == 0
    exported = os.listdir(environment / "csv")
    assert len(exported) == 1
    with open(environment / "csv" / exported[0], encoding="utf-8") as f:
        lines = f.read().split("\n")
    assert lines[:4] == [
        "Device Name:,DEV-0042",
        "Line Name:,Line 3",
        "Product Type:,Cheese",
        "Product Name:,Gouda 48+",
    ]
    assert lines[5] == "Timestamp,Temperature [°C],Moisture [%]"
    assert lines[6:8] == [
        "3/7/2025 1:05:09 PM.042,21.5,0.0",
        "3/7/2025 1:05:09 PM.042,21.5,0.0",
    ]


def test_batch_mode_reports_missing_file(environment):
    assert run_batch_mode(str(environment / "missing.jsonl"), "csv") == 1


def test_batch_mode_reports_bad_document(environment, document_dict):
    del document_dict["summary"]
    path = environment / "documents.jsonl"
    path.write_text(json.dumps(document_dict) + "\n", encoding="utf-8")

    assert run_batch_mode(str(path), "csv") == 1
