from dataclasses import dataclass
from typing import Dict, Any
from knack_openapi.core.workflow import GenerationStage

@dataclass
class AgentResult:
    stage: GenerationStage
    ok: bool
    message: str
    artifacts_index: Dict[str, Any]

class BaseAgent:
    stage: GenerationStage
    def run(self, job, ws) -> AgentResult:
        raise NotImplementedError
