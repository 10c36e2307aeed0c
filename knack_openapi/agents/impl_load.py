import logging
from knack_openapi.agents.base import BaseAgent, AgentResult
from knack_openapi.core.fetch import fetch_schema
from knack_openapi.core.workflow import GenerationStage

log = logging.getLogger(__name__)


class SchemaLoaderAgent(BaseAgent):
    stage = GenerationStage.LOAD_SCHEMA

    def run(self, job, ws):
        try:
            knack_schema = fetch_schema(job.schema_source)
            job.knack_schema = knack_schema

            application = knack_schema.application
            log.info(
                f"Loaded application '{application.name}': "
                f"{len(application.objects)} objects, {len(application.scenes)} scenes"
            )

            return AgentResult(
                self.stage,
                True,
                f"Loaded schema for {application.name} with {len(application.objects)} objects",
                {"schema_source": job.schema_source}
            )

        except Exception as e:
            log.exception(f"Failed to load schema: {e}")
            return AgentResult(
                self.stage,
                False,
                str(e),
                {}
            )
