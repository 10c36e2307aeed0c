from dataclasses import dataclass
from pathlib import Path

@dataclass
class Workspace:
    output_dir: Path

    def ensure(self) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir
