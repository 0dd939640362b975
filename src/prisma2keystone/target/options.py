from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
)


class OptionsModel(BaseModel):
    """
    Base class for option objects passed to a Keystone field constructor.
    Options that are not set are left out of the rendered object.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """Returns the options as a plain mapping without the unset keys.
        Keys keep the declaration order of the model."""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.to_dict()


class ComputedDefault(OptionsModel):
    """A default computed by the database, rendered as `{ kind: "now" }`."""

    kind: str


class SelectOption(OptionsModel):
    """A label/value pair offered by a select field."""

    label: str = Field(description="The human-readable label shown in the UI.")
    value: str = Field(description="The stored value, i.e. the enum member name.")


class DbOptions(OptionsModel):
    isNullable: bool | None = None
    updatedAt: bool | None = None
    relationName: str | None = Field(
        default=None,
        description=(
            "Disambiguates several relations between the same two lists. Only "
            "set on the many side of a relationship."
        ),
    )


class ValidationOptions(OptionsModel):
    isRequired: bool
    rejectCommon: bool | None = None


FieldDefault = StrictBool | StrictInt | StrictFloat | StrictStr | ComputedDefault


class FieldOptions(OptionsModel):
    """
    The options object of a field constructor call. The attribute order is the
    order in which the keys are rendered: kind specific options first, then
    `isIndexed`, `db` and `validation`. `db` is always rendered, even when it
    holds no options.
    """

    # select
    type: Literal["enum"] | None = None
    options: list[SelectOption] | None = None
    # relationship
    ref: str | None = None
    many: bool | None = None
    # text
    isFilterable: bool | None = None
    isOrderable: bool | None = None

    defaultValue: FieldDefault | None = None
    isIndexed: Literal[True, "unique"] | None = None
    db: DbOptions = Field(default_factory=DbOptions)
    validation: ValidationOptions | None = None

