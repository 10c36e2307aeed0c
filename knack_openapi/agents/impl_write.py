import logging
from knack_openapi.agents.base import BaseAgent, AgentResult
from knack_openapi.core.workflow import GenerationStage
from knack_openapi.generators.openapi_gen.writer import write_spec

log = logging.getLogger(__name__)


class SpecWriterAgent(BaseAgent):
    stage = GenerationStage.WRITE_OUTPUT

    def run(self, job, ws):
        try:
            if job.openapi_spec is None:
                return AgentResult(
                    self.stage,
                    False,
                    "Cannot write output: no OpenAPI spec was generated",
                    {}
                )

            output_dir = ws.ensure()
            json_path, yaml_path = write_spec(job.openapi_spec, output_dir)

            log.info(f"Wrote {json_path.name} and {yaml_path.name} to {output_dir}")

            return AgentResult(
                self.stage,
                True,
                f"Wrote {json_path.name}, {yaml_path.name} to {output_dir}",
                {"openapi_json": str(json_path), "openapi_yaml": str(yaml_path)}
            )

        except Exception as e:
            log.exception(f"Failed to write OpenAPI spec: {e}")
            return AgentResult(
                self.stage,
                False,
                f"Failed to write OpenAPI spec: {str(e)}",
                {}
            )
