"""Serialization of the generated document and file writing."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List
import yaml
from knack_openapi.core.config import settings
from knack_openapi.generators.openapi_gen.types import GeneratedFile

log = logging.getLogger(__name__)


class _NoAliasDumper(yaml.SafeDumper):
    """Emit repeated fragments inline instead of as YAML anchors."""
    def ignore_aliases(self, data):
        return True


def render_json(spec: Dict[str, Any]) -> str:
    return json.dumps(spec, indent=2, ensure_ascii=False) + "\n"


def render_yaml(spec: Dict[str, Any]) -> str:
    return yaml.dump(
        spec,
        Dumper=_NoAliasDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def render_spec_files(
    spec: Dict[str, Any],
    json_filename: str = settings.json_filename,
    yaml_filename: str = settings.yaml_filename,
) -> List[GeneratedFile]:
    """Render both serializations in memory so nothing is written if either fails."""
    return [
        GeneratedFile(path=json_filename, content=render_json(spec)),
        GeneratedFile(path=yaml_filename, content=render_yaml(spec)),
    ]


def write_files(files: List[GeneratedFile], out_dir: Path) -> List[Path]:
    """
    Write generated files to the output directory.
    
    Args:
        files: List of GeneratedFile objects to write
        out_dir: Base output directory path

    Returns:
        Paths of the written files
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for file in files:
        file_path = out_dir / file.path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(file.content, encoding="utf-8")
        log.debug("Wrote %s (%d bytes)", file_path, len(file.content))
        written.append(file_path)
    return written


def write_spec(spec: Dict[str, Any], out_dir: Path) -> List[Path]:
    """Render the document as JSON and YAML, then write both into ``out_dir``."""
    return write_files(render_spec_files(spec), out_dir)
