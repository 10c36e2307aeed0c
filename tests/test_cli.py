"""Tests for the command line entry point and the generation pipeline."""
import json

import pytest
import yaml

from knack_openapi.agents.base import AgentResult, BaseAgent
from knack_openapi.agents.registry import AgentRegistry
from knack_openapi.cli import build_parser, generate_openapi, main
from knack_openapi.core.engine import GenerationEngine
from knack_openapi.core.workflow import GenerationJob, GenerationStage
from knack_openapi.core.workspace import Workspace


def test_main_writes_both_files(sample_schema_path, tmp_path, capsys):
    out_dir = tmp_path / "out"
    exit_code = main(["-s", str(sample_schema_path), "-o", str(out_dir)])

    assert exit_code == 0
    json_doc = json.loads((out_dir / "openapi.json").read_text(encoding="utf-8"))
    yaml_doc = yaml.safe_load((out_dir / "openapi.yaml").read_text(encoding="utf-8"))
    assert json_doc == yaml_doc
    assert json_doc["info"]["title"] == "Client Tracker API"

    captured = capsys.readouterr()
    assert "OpenAPI specification generated successfully!" in captured.out
    assert str(out_dir.resolve()) in captured.out


def test_main_with_missing_schema(tmp_path, capsys):
    out_dir = tmp_path / "out"
    exit_code = main(["-s", str(tmp_path / "nope.json"), "-o", str(out_dir)])

    assert exit_code == 1
    assert not out_dir.exists()
    assert "Error generating OpenAPI spec" in capsys.readouterr().err


def test_rerun_overwrites_with_identical_content(sample_schema_path, tmp_path):
    out_dir = tmp_path / "out"
    assert main(["-s", str(sample_schema_path), "-o", str(out_dir)]) == 0
    first = (out_dir / "openapi.yaml").read_text(encoding="utf-8")
    assert main(["-s", str(sample_schema_path), "-o", str(out_dir)]) == 0
    assert (out_dir / "openapi.yaml").read_text(encoding="utf-8") == first


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.schema == "application_schema.json"
    assert args.output == "output"
    assert args.verbose is False


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--version"])
    assert exc.value.code == 0
    assert "knack-openapi" in capsys.readouterr().out


def test_generate_openapi_job_state(sample_schema_path, tmp_path):
    job = generate_openapi(str(sample_schema_path), str(tmp_path / "out"))
    assert job.status == "DONE"
    assert job.stage == GenerationStage.DONE
    assert job.error_message is None
    assert job.artifacts["openapi_json"].endswith("openapi.json")
    assert job.artifacts["openapi_yaml"].endswith("openapi.yaml")
    assert job.artifacts["schemas"] == len(job.openapi_spec["components"]["schemas"])


class FailingDesigner(BaseAgent):
    stage = GenerationStage.DESIGN_SPEC

    def run(self, job, ws):
        return AgentResult(self.stage, False, "design exploded", {})


def test_engine_stops_at_first_failure(sample_schema_path, tmp_path):
    registry = AgentRegistry.default()
    registry.mapping[GenerationStage.DESIGN_SPEC] = FailingDesigner()
    out_dir = tmp_path / "out"
    job = GenerationJob(schema_source=str(sample_schema_path), output_dir=str(out_dir))

    with pytest.raises(RuntimeError, match="design exploded"):
        GenerationEngine(Workspace(out_dir), registry=registry).run(job)

    assert job.status == "FAILED"
    assert job.stage == GenerationStage.FAILED
    assert job.error_message == "design exploded"
    assert job.knack_schema is not None
    assert not out_dir.exists()
