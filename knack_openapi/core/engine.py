from __future__ import annotations
import logging
from knack_openapi.core.workflow import GenerationJob, GenerationStage
from knack_openapi.core.workspace import Workspace
from knack_openapi.agents.registry import AgentRegistry

log = logging.getLogger(__name__)

class GenerationEngine:
    def __init__(self, workspace: Workspace, registry: AgentRegistry | None = None):
        self.ws = workspace
        self.registry = registry or AgentRegistry.default()

    def _set_stage(self, job: GenerationJob, stage: GenerationStage) -> None:
        job.stage = stage

    def _merge_artifacts(self, job: GenerationJob, updates: dict) -> None:
        current = job.artifacts or {}
        current.update(updates)
        job.artifacts = current

    def run(self, job: GenerationJob) -> None:
        stages = [
            GenerationStage.LOAD_SCHEMA,
            GenerationStage.DESIGN_SPEC,
            GenerationStage.WRITE_OUTPUT,
        ]

        job.status = "RUNNING"
        for stage in stages:
            self._set_stage(job, stage)
            log.info("Running stage", extra={"stage": stage.value})

            agent = self.registry.get(stage)
            result = agent.run(job=job, ws=self.ws)

            self._merge_artifacts(job, result.artifacts_index)

            if not result.ok:
                log.error("Stage failed: %s", result.message, extra={"stage": stage.value})
                job.status = "FAILED"
                job.error_message = result.message
                job.stage = GenerationStage.FAILED
                raise RuntimeError(result.message)

        job.status = "DONE"
        job.stage = GenerationStage.DONE
        log.info("Generation completed successfully", extra={"stage": GenerationStage.DONE.value})
