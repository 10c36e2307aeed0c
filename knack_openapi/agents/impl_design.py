import logging
from knack_openapi.agents.base import BaseAgent, AgentResult
from knack_openapi.core.workflow import GenerationStage
from knack_openapi.generators.openapi_gen.generator import build_openapi_spec

log = logging.getLogger(__name__)


class SpecDesignerAgent(BaseAgent):
    stage = GenerationStage.DESIGN_SPEC

    def run(self, job, ws):
        try:
            if job.knack_schema is None:
                return AgentResult(
                    self.stage,
                    False,
                    "Cannot generate OpenAPI spec: no Knack schema was loaded",
                    {}
                )

            spec = build_openapi_spec(job.knack_schema)
            job.openapi_spec = spec

            schema_count = len(spec["components"]["schemas"])
            path_count = len(spec["paths"])
            operation_count = sum(len(item) for item in spec["paths"].values())
            log.info(
                f"Generated OpenAPI spec: {schema_count} schemas, "
                f"{path_count} paths, {operation_count} operations"
            )

            return AgentResult(
                self.stage,
                True,
                f"Generated OpenAPI spec with {schema_count} schemas, {path_count} paths",
                {"paths": path_count, "schemas": schema_count}
            )

        except Exception as e:
            log.exception(f"Failed to generate OpenAPI spec: {e}")
            return AgentResult(
                self.stage,
                False,
                f"Failed to generate OpenAPI spec: {str(e)}",
                {}
            )
