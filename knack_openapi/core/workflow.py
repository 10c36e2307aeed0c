from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

class GenerationStage(str, Enum):
    PENDING = "PENDING"
    LOAD_SCHEMA = "LOAD_SCHEMA"
    DESIGN_SPEC = "DESIGN_SPEC"
    WRITE_OUTPUT = "WRITE_OUTPUT"
    DONE = "DONE"
    FAILED = "FAILED"

@dataclass
class GenerationJob:
    """One generation run: where the schema comes from and what it produced."""
    schema_source: str
    output_dir: str
    stage: GenerationStage = GenerationStage.PENDING
    status: str = "PENDING"
    error_message: Optional[str] = None
    artifacts: Dict[str, Any] = field(default_factory=dict)
    knack_schema: Optional[Any] = None
    openapi_spec: Optional[Dict[str, Any]] = None
