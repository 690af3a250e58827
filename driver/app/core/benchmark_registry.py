import yaml
from pathlib import Path
from pydantic import BaseModel
from typing import Dict, Optional

from driver.app.core.settings import BENCHMARK_CONFIG


class LevelConfig(BaseModel):
    label: str
    path: str
    description: Optional[str] = None


class BenchmarkRegistry:
    def __init__(self, config_path: str = BENCHMARK_CONFIG):
        self.config_path = Path(config_path)
        self.levels: Dict[str, LevelConfig] = {}
        self._load(self.config_path)

    def _load(self, path: Path):
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
            for key, val in data.get("levels", {}).items():
                level = LevelConfig(**val)
                # Relative paths are relative to the YAML file itself
                resolved = Path(level.path)
                if not resolved.is_absolute():
                    resolved = (path.parent / resolved).resolve()
                level.path = str(resolved)
                self.levels[key] = level

    def get(self, level_key: str) -> Optional[LevelConfig]:
        return self.levels.get(level_key)

    def list_all(self) -> Dict[str, LevelConfig]:
        return self.levels

    def available(self) -> Dict[str, LevelConfig]:
        """Levels whose data file is actually on disk."""
        return {k: v for k, v in self.levels.items() if Path(v.path).is_file()}


# Singleton instance
registry = BenchmarkRegistry()
