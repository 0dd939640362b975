from functools import cached_property
from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils import read_yaml_or_json_file
from .field import SourceField


class SourceEnum(BaseModel):
    """An enum of the source schema with its members in declaration order."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(description="The name of the enum.")
    values: tuple[str, ...] = Field(
        default_factory=tuple,
        description="The canonical member names, e.g. 'SUPER_ADMIN'.",
    )

    @field_validator("values", mode="before")
    @classmethod
    def extract_value_names(cls, value: Any) -> Any:
        """DMMF lists enum members as `{"name": ..., "dbName": ...}` objects."""
        if not isinstance(value, list | tuple):
            return value
        names = []
        for v in value:
            if isinstance(v, dict):
                if "name" not in v:
                    raise ValueError(f"Enum member {v!r} has no name.")
                v = v["name"]
            names.append(v)
        return names


class SourceModel(BaseModel):
    """A model of the source schema with its fields in declaration order."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(description="The name of the model.")
    fields: tuple[SourceField, ...] = Field(default_factory=tuple)

    @property
    def field_names(self) -> list[str]:
        """Returns a list of all field names."""
        return [field.name for field in self.fields]


class SourceSchema(BaseModel):
    """
    The fully resolved data model of a source schema, i.e. the `datamodel`
    part of a Prisma DMMF document.
    """

    model_config = ConfigDict(extra="ignore", ignored_types=(cached_property,))

    models: list[SourceModel] = Field(
        default_factory=list,
        description="The models of the schema in declaration order.",
    )
    enums: list[SourceEnum] = Field(
        default_factory=list,
        description="The enums of the schema in declaration order.",
    )

    @cached_property
    def _model_index(self) -> dict[str, SourceModel]:
        return {model.name: model for model in self.models}

    @property
    def model_names(self) -> list[str]:
        return list(self._model_index)

    def get_model(self, name: str) -> SourceModel:
        try:
            return self._model_index[name]
        except KeyError as e:
            raise KeyError(f"Model '{name}' not found in schema.") from e

    @classmethod
    def from_dmmf(cls, data: dict[str, Any]) -> Self:
        """Validate a DMMF document. Both a full dump with a top level
        `datamodel` key and the bare datamodel are accepted."""
        if "datamodel" in data:
            data = data["datamodel"]
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, file_path: str | Path) -> Self:
        """
        Load a source schema from a YAML or JSON DMMF file.

        Raises:
            FileNotFoundError: If the specified file does not exist.
            ValueError: If the file format is not supported (not .json, .yaml, or .yml).
        """
        data = read_yaml_or_json_file(file_path)
        return cls.from_dmmf(data)
