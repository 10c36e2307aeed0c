"""CLI for knack-openapi."""

import argparse
import sys
from pathlib import Path

from knack_openapi._version import __version__
from knack_openapi.core.config import settings
from knack_openapi.core.engine import GenerationEngine
from knack_openapi.core.logging import configure_logging
from knack_openapi.core.workflow import GenerationJob
from knack_openapi.core.workspace import Workspace


def generate_openapi(schema_source: str, output_dir: str) -> GenerationJob:
    """Main orchestration: Knack schema -> OpenAPI document -> JSON and YAML files."""
    job = GenerationJob(schema_source=schema_source, output_dir=output_dir)
    engine = GenerationEngine(workspace=Workspace(Path(output_dir).resolve()))
    engine.run(job)
    return job


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='knack-openapi',
        description='Generate OpenAPI specification from Knack application schema',
    )
    parser.add_argument('-s', '--schema', default=settings.default_schema_source,
                        help=f'Path to Knack schema file or URL (default: {settings.default_schema_source})')
    parser.add_argument('-o', '--output', default=settings.default_output_dir,
                        help=f'Output directory (default: {settings.default_output_dir})')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging('DEBUG' if args.verbose else settings.log_level)

    try:
        job = generate_openapi(args.schema, args.output)
    except RuntimeError as e:
        print(f"Error generating OpenAPI spec: {e}", file=sys.stderr)
        return 1

    print("OpenAPI specification generated successfully!")
    print(f"Output directory: {Path(job.output_dir).resolve()}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
