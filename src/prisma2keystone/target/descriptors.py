from enum import Enum
from functools import cached_property
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .options import FieldOptions


class FieldConstructor(str, Enum):
    """The Keystone field constructors a source field can be translated to."""

    TEXT = "text"
    PASSWORD = "password"
    CHECKBOX = "checkbox"
    INTEGER = "integer"
    FLOAT = "float"
    TIMESTAMP = "timestamp"
    JSON = "json"
    SELECT = "select"
    RELATIONSHIP = "relationship"


# Constructors that take no `validation` options.
UNVALIDATED_CONSTRUCTORS = frozenset(
    {FieldConstructor.RELATIONSHIP, FieldConstructor.JSON, FieldConstructor.CHECKBOX}
)


class TargetFieldDescriptor(BaseModel):
    """Describes a single field constructor call, e.g. `text({...})`."""

    model_config = ConfigDict(frozen=True)

    fieldName: str = Field(description="The name of the field in the list.")
    constructorName: FieldConstructor = Field(
        description="The Keystone field constructor to call."
    )
    options: FieldOptions = Field(default_factory=FieldOptions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "fieldName": self.fieldName,
            "constructorName": self.constructorName.value,
            "options": self.options.to_dict(),
        }


class TargetListDescriptor(BaseModel):
    """Describes a Keystone list, i.e. the translation of one source model."""

    model_config = ConfigDict(frozen=True)

    modelName: str
    fields: dict[str, TargetFieldDescriptor] = Field(
        default_factory=dict,
        description="The fields of the list keyed by name, in source order.",
    )

    def __getitem__(self, key: str) -> TargetFieldDescriptor:
        try:
            return self.fields[key]
        except KeyError as e:
            raise KeyError(
                f"Field '{key}' not found in list '{self.modelName}'."
            ) from e

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def field_names(self) -> list[str]:
        return list(self.fields)

    def to_dict(self) -> dict[str, Any]:
        return {
            "modelName": self.modelName,
            "fields": {
                name: descriptor.to_dict() for name, descriptor in self.fields.items()
            },
        }


class TargetEnumDescriptor(BaseModel):
    """A standalone enum type. Member names are kept verbatim."""

    model_config = ConfigDict(frozen=True)

    name: str
    members: tuple[str, ...] = Field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "members": list(self.members)}


class TranslationResult(BaseModel):
    """
    The output of a translation run: one list descriptor per source model in
    declaration order and, if requested, one enum descriptor per source enum.
    """

    model_config = ConfigDict(frozen=True, ignored_types=(cached_property,))

    lists: tuple[TargetListDescriptor, ...] = Field(default_factory=tuple)
    enums: tuple[TargetEnumDescriptor, ...] = Field(default_factory=tuple)

    def __getitem__(self, key: int | str) -> TargetListDescriptor:
        if isinstance(key, int):
            return self.lists[key]
        try:
            return self._name_index[key]
        except KeyError as e:
            raise KeyError(f"List '{key}' not found in translation result.") from e

    def __len__(self) -> int:
        return len(self.lists)

    @cached_property
    def _name_index(self) -> dict[str, TargetListDescriptor]:
        """Model name to list descriptor, built on first lookup."""
        return {lst.modelName: lst for lst in self.lists}

    @property
    def list_names(self) -> list[str]:
        return list(self._name_index)

    def to_dict(self) -> dict[str, Any]:
        return {
            "lists": [lst.to_dict() for lst in self.lists],
            "enums": [enum.to_dict() for enum in self.enums],
        }
