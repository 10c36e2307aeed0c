from dataclasses import dataclass
from typing import Dict
from knack_openapi.core.workflow import GenerationStage
from knack_openapi.agents.base import BaseAgent
from knack_openapi.agents.impl_load import SchemaLoaderAgent
from knack_openapi.agents.impl_design import SpecDesignerAgent
from knack_openapi.agents.impl_write import SpecWriterAgent

@dataclass
class AgentRegistry:
    mapping: Dict[GenerationStage, BaseAgent]

    def get(self, stage: GenerationStage) -> BaseAgent:
        return self.mapping[stage]

    @staticmethod
    def default() -> "AgentRegistry":
        return AgentRegistry(mapping={
            GenerationStage.LOAD_SCHEMA: SchemaLoaderAgent(),
            GenerationStage.DESIGN_SPEC: SpecDesignerAgent(),
            GenerationStage.WRITE_OUTPUT: SpecWriterAgent(),
        })
