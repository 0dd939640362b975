from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)

# The implicit identifier field every model carries.
ID_FIELD_NAME = "id"


class FieldKind(str, Enum):
    SCALAR = "scalar"
    ENUM = "enum"
    OBJECT = "object"
    UNSUPPORTED = "unsupported"


class FunctionDefault(BaseModel):
    """A computed default such as `now()` or `autoincrement()`."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="The name of the default function, e.g. 'now'.")
    args: list[Any] = Field(
        default_factory=list,
        description="The arguments the default function is called with.",
    )


DefaultValue = (
    FunctionDefault
    | StrictBool
    | StrictInt
    | StrictFloat
    | StrictStr
    | list[Any]
    | None
)


class SourceField(BaseModel):
    """
    A single field of a source model as handed over by the schema introspection.
    Attribute names follow the DMMF document, so a DMMF field can be validated
    as is.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(description="The name of the field.")
    kind: FieldKind = Field(
        description="The coarse category of the field: scalar, enum or object."
    )
    type: str = Field(
        description=(
            "The scalar type for scalar fields, the enum name for enum fields "
            "and the related model name for relation fields."
        ),
    )
    isList: bool = False
    isRequired: bool = False
    isUnique: bool = False
    isId: bool = False
    isUpdatedAt: bool = False
    hasDefaultValue: bool = False
    default: DefaultValue = Field(
        default=None,
        description=(
            "The default value. Literal defaults keep their JSON type, computed "
            "defaults are given as a function descriptor."
        ),
    )
    relationName: str | None = None
    relationFromFields: list[str] = Field(default_factory=list)
    relationToFields: list[str] = Field(
        default_factory=list,
        description=(
            "The referenced fields on the target model. The order matches the "
            "order in 'relationFromFields'."
        ),
    )

    @field_validator("kind", mode="before")
    @classmethod
    def lower_case_kind(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator("relationFromFields", "relationToFields", mode="before")
    @classmethod
    def transform_none_to_list(cls, value: Any) -> Any:
        """DMMF gives `null` instead of an empty list for non relation fields."""
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @property
    def is_identifier(self) -> bool:
        """Whether this is the implicit identifier field of its model."""
        return self.name == ID_FIELD_NAME
