"""Configuration data models using Pydantic."""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict


class EngineConfig(BaseModel):
    """Analysis engine configuration."""
    command: List[str] = Field(
        default_factory=lambda: ["npx", "--no-install", "eslint"],
        description="Command used to invoke ESLint"
    )
    config_files: List[str] = Field(
        default_factory=lambda: [".eslintrc.js", ".eslintrc.json"],
        description="ESLint config file names, checked in order"
    )
    ignore_file: str = Field(
        default=".eslintignore",
        description="Ignore file used when --ignore-path is not given"
    )
    default_extensions: List[str] = Field(
        default_factory=lambda: ["js", "ts"],
        description="Extensions linted when --ext is not given"
    )

    @field_validator('command')
    @classmethod
    def validate_command(cls, v):
        """Ensure a command is configured."""
        if not v:
            raise ValueError("command must not be empty")
        return v

    @field_validator('config_files')
    @classmethod
    def validate_config_files(cls, v):
        """Ensure at least one config file name is searched."""
        if not v:
            raise ValueError("config_files must list at least one file name")
        return v

    @field_validator('default_extensions')
    @classmethod
    def validate_extensions(cls, v):
        """Strip leading dots from extensions."""
        extensions = [ext.strip().lstrip('.') for ext in v if ext.strip()]
        if not extensions:
            raise ValueError("default_extensions must not be empty")
        return extensions


class ParallelConfig(BaseModel):
    """Parallel processing configuration."""
    max_workers: Optional[int] = Field(
        default=None,
        ge=1,
        le=256,
        description="Cap on concurrent workers (default: CPU count)"
    )
    executor: str = Field(
        default="thread",
        description="Worker isolation: 'thread' or 'process'"
    )
    fail_on_worker_error: bool = Field(
        default=False,
        description="Exit non-zero when any worker fails"
    )

    @field_validator('executor')
    @classmethod
    def validate_executor(cls, v):
        """Ensure executor is valid."""
        valid_executors = ["thread", "process"]
        v = v.lower()
        if v not in valid_executors:
            raise ValueError(f"executor must be one of {valid_executors}")
        return v


class OutputConfig(BaseModel):
    """Output configuration."""
    color: bool = Field(
        default=True,
        description="Enable colored console output"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    file: Optional[str] = Field(
        default=None,
        description="Optional log file path"
    )
    console: bool = Field(
        default=True,
        description="Enable console logging"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}")
        return v


class ParallintConfig(BaseModel):
    """Complete parallint configuration."""
    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True
    )

    engine: EngineConfig = Field(default_factory=EngineConfig)
    parallel: ParallelConfig = Field(default_factory=ParallelConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_yaml(self) -> str:
        """Convert configuration to YAML string."""
        import yaml
        return yaml.dump(self.model_dump(), default_flow_style=False, sort_keys=False)
