"""Pydantic config schema and loader."""
from pathlib import Path
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class PermutationConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    max_group_size: int = 30
    max_perms_per_group: int = 500_000
    progress_interval: int = 5_000
    eligible_only: bool = False
    shuffle: bool = False
    incremental: bool = False
    workers: int = 1

    @field_validator("max_group_size")
    @classmethod
    def validate_group_size(cls, v: int) -> int:
        if v < 4:
            raise ValueError("max_group_size must be at least 4")
        return v

    @field_validator("max_perms_per_group", "progress_interval", "workers")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("value must be positive")
        return v


class RenderConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    enabled: bool = True
    top_k: int = 8

    @field_validator("top_k")
    @classmethod
    def validate_top_k(cls, v: int) -> int:
        if v < 0:
            raise ValueError("top_k must be non-negative")
        return v


class OutputConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    run_dir: Path = Path("runs")
    summarize: bool = True


class LoggingConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return level


class ConfigSchema(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    seed: int = 0
    permutations: PermutationConfig = Field(default_factory=PermutationConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    outputs: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG_PATH = Path(__file__).with_name("defaults.yaml")


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> ConfigSchema:
    data = yaml.safe_load(Path(path).read_text()) or {}
    return ConfigSchema(**data)
