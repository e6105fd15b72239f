import os
from typing import Dict, List

import yaml

from league_onboarding.execution.artifacts import persist_artifacts, process_paths
from league_onboarding.league.league_service import register_league
from league_onboarding.observability.logger import log_event


class ConfigExecutor:
    """
    Runs an onboarding batch described by a YAML configuration.

    files:        list of paths, relative to the config file
    output:       JSON | YAML | DOCUMENTATION | ALL_FORMATS
    output_dir:   where artifacts go (default: outputs)
    format:       optional csv/json override
    league:       optional league information, validated before processing
    """

    def __init__(self, config_path: str):
        self.config_path = config_path
        self.config = self._load_config()

    # ------------------------------------------
    # Load YAML
    # ------------------------------------------
    def _load_config(self) -> Dict:
        if not os.path.exists(self.config_path):
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError("Config file must contain a mapping")
        if not config.get("files"):
            raise ValueError("Config must list at least one file under 'files'")
        return config

    def _resolve(self, path: str) -> str:
        if os.path.isabs(path):
            return path
        base = os.path.dirname(os.path.abspath(self.config_path))
        return os.path.join(base, path)

    def _file_paths(self) -> List[str]:
        return [self._resolve(p) for p in self.config["files"]]

    # ------------------------------------------
    # Execute Pipeline
    # ------------------------------------------
    def execute(self) -> Dict:
        league = None
        if self.config.get("league"):
            league = register_league(self.config["league"])

        results = process_paths(self._file_paths(), format_hint=self.config.get("format"))

        output_dir = self._resolve(self.config.get("output_dir", "outputs"))
        written = persist_artifacts(
            results,
            output_dir,
            output_type=self.config.get("output", "ALL_FORMATS"),
            league=league,
        )

        log_event("CONFIG_RUN_COMPLETED", {
            "config": self.config_path,
            "files": len(results),
            "succeeded": sum(1 for r in results if r.success),
            "artifacts": len(written),
        })

        return {
            "league": league,
            "results": results,
            "artifacts": written,
        }
