"""Pipeline agent configs under ``pipeline/agents/*.json``."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from skill_corpus.constants import PIPELINE_AGENTS_DIRNAME, PIPELINE_DIRNAME
from skill_corpus.errors import InvalidJsonFormatError, InvalidPipelineConfigError
from skill_corpus.pipeline.models import PipelineAgentConfig
from skill_corpus.schemas import load_schema
from skill_corpus.utils import format_schema_error, read_json


class PipelineRepository:
    def __init__(self, root: Path) -> None:
        self._agents_dir = root / PIPELINE_DIRNAME / PIPELINE_AGENTS_DIRNAME
        self._validator = Draft202012Validator(load_schema("pipeline_agent"))

    @property
    def agents_dir(self) -> Path:
        return self._agents_dir

    def has_pipeline(self) -> bool:
        return self._agents_dir.is_dir()

    def list_config_paths(self) -> list[Path]:
        if not self.has_pipeline():
            return []
        return [path for path in sorted(self._agents_dir.glob("*.json")) if path.is_file()]

    def list_configs(self) -> list[PipelineAgentConfig]:
        return [self.load_config(path) for path in self.list_config_paths()]

    def load_config(self, path: Path) -> PipelineAgentConfig:
        try:
            payload: Any = read_json(path)
        except json.JSONDecodeError as exc:
            raise InvalidJsonFormatError(path, exc.msg) from exc

        error = next(iter(self._validator.iter_errors(payload)), None)
        if error is not None:
            raise InvalidPipelineConfigError(path, format_schema_error(error))

        return PipelineAgentConfig(
            name=path.stem,
            agent=str(payload.get("agent", "")),
            source_path=path,
            skills=[str(item) for item in payload.get("skills", [])],
        )
