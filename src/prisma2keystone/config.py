"""Configuration of a generator run.

Settings are taken from the environment (optionally loaded from a `.env` file)
and can be overridden on the command line.
"""

import os
from pathlib import Path
from typing import Any, Literal, Self

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]
OutputFormat = Literal["keystone", "json"]

ENV_VARIABLES = {
    "output": "P2K_OUTPUT",
    "generate_enums": "P2K_GENERATE_ENUMS",
    "output_format": "P2K_FORMAT",
    "log_level": "P2K_LOG_LEVEL",
}
TRUE_VALUES = {"1", "true", "yes", "on"}


class GeneratorConfig(BaseModel):
    """
    Settings of a generator run.

    Attributes:
        schema_file (Path | None): The DMMF file to translate.
        output (Path): The file the generated configuration is written to.
        generate_enums (bool): Whether to emit standalone enum declarations.
        output_format (str): The emitter to use, `keystone` or `json`.
        log_level (str): The logging level of the run.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    schema_file: Path | None = Field(
        default=None, description="The DMMF file (.json, .yaml or .yml)."
    )
    output: Path = Field(
        default=Path("generated.ts"),
        description="The file the generated configuration is written to.",
    )
    generate_enums: bool = Field(
        default=False,
        description="Emit an enum declaration for every enum of the schema.",
    )
    output_format: OutputFormat = "keystone"
    log_level: LogLevel = "INFO"

    @field_validator("generate_enums", mode="before")
    @classmethod
    def parse_flag(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() in TRUE_VALUES
        return value

    @field_validator("output_format", mode="before")
    @classmethod
    def lower_case_format(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_case_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value

    @classmethod
    def from_environment(cls, env_file: str | Path | None = ".env") -> Self:
        """Create the configuration from the `P2K_*` environment variables.

        Args:
            env_file (str | Path | None): A dotenv file to load first. Variables
                already set in the environment take precedence.
        """
        if env_file is not None:
            load_dotenv(env_file)
        values = {
            name: os.environ[variable]
            for name, variable in ENV_VARIABLES.items()
            if os.environ.get(variable)
        }
        return cls.model_validate(values)

    def merge(self, **overrides: Any) -> Self:
        """Returns a copy with all overrides applied that are not None."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return self.model_validate(values)
