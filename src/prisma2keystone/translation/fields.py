"""Translation of a single source field into a Keystone field descriptor.

The field kind selects the constructor: scalars by their scalar type, enums
become selects and relations become relationships. Kind specific options are
assembled first, then every field receives the same post-processing: the
index option, the `db` options and, unless the constructor takes none, the
`validation` options.
"""

import logging
from collections.abc import Callable
from typing import Any

from ..source import FieldKind, FunctionDefault, SourceField
from ..target import (
    UNVALIDATED_CONSTRUCTORS,
    ComputedDefault,
    DbOptions,
    FieldConstructor,
    FieldOptions,
    SelectOption,
    TargetFieldDescriptor,
    ValidationOptions,
)
from .enum_table import EnumTable
from .labels import normalize_enum_label
from .relations import resolve_relation

logger = logging.getLogger(__name__)

PASSWORD_FIELD_NAME = "password"

KindOptions = tuple[FieldConstructor, dict[str, Any], DbOptions]


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def _is_number(value: Any) -> bool:
    # bool is a subclass of int but never a numeric default
    return isinstance(value, int | float) and not isinstance(value, bool)


def _is_function(value: Any) -> bool:
    return isinstance(value, FunctionDefault)


def get_default(field: SourceField, accepts: Callable[[Any], bool]) -> Any:
    """Returns the default of the field if it has one of the expected type.

    A default of any other type is dropped rather than rejected.
    TODO: numeric defaults given as strings (e.g. "0") are dropped as well;
    decide whether they should be converted instead.

    Args:
        field (SourceField): The source field.
        accepts (Callable[[Any], bool]): Checks whether the default has the
            type expected for the field.

    Returns:
        Any: The default value, or None if there is none to carry over.
    """
    if not field.hasDefaultValue:
        return None
    if accepts(field.default):
        return field.default
    logger.debug(
        "Dropping default %r of field '%s': unexpected type %s for '%s'.",
        field.default,
        field.name,
        type(field.default).__name__,
        field.type,
    )
    return None


def _nullable_db(field: SourceField) -> DbOptions:
    return DbOptions(isNullable=not field.isRequired)


def _translate_string(field: SourceField) -> KindOptions:
    if field.name.lower() == PASSWORD_FIELD_NAME:
        return FieldConstructor.PASSWORD, {}, _nullable_db(field)
    options = {
        "isFilterable": True,
        "isOrderable": True,
        "defaultValue": get_default(field, _is_string),
    }
    return FieldConstructor.TEXT, options, _nullable_db(field)


def _translate_datetime(field: SourceField) -> KindOptions:
    default = get_default(field, _is_function)
    options = {}
    if default is not None:
        options["defaultValue"] = ComputedDefault(kind=default.name)
    db = DbOptions(isNullable=not field.isRequired, updatedAt=field.isUpdatedAt)
    return FieldConstructor.TIMESTAMP, options, db


def translate_scalar(field: SourceField) -> KindOptions:
    """Returns constructor, kind specific options and `db` options of a scalar
    field. Unknown scalar types fall back to a plain text field."""
    match field.type.lower():
        case "string":
            return _translate_string(field)
        case "boolean":
            options = {"defaultValue": get_default(field, _is_boolean)}
            return FieldConstructor.CHECKBOX, options, DbOptions()
        case "datetime":
            return _translate_datetime(field)
        case "int":
            options = {"defaultValue": get_default(field, _is_number)}
            return FieldConstructor.INTEGER, options, _nullable_db(field)
        case "float":
            options = {"defaultValue": get_default(field, _is_number)}
            return FieldConstructor.FLOAT, options, _nullable_db(field)
        case "json":
            options = {"defaultValue": get_default(field, _is_string)}
            return FieldConstructor.JSON, options, DbOptions()
        case "jsonb":
            options = {"defaultValue": get_default(field, _is_string)}
            return FieldConstructor.JSON, options, _nullable_db(field)
        case _:
            logger.debug(
                "Unsupported scalar type '%s' of field '%s', falling back to text.",
                field.type,
                field.name,
            )
            return FieldConstructor.TEXT, {}, _nullable_db(field)


def translate_enum(field: SourceField, enum_table: EnumTable) -> KindOptions:
    """Returns the select options of an enum field.

    Raises:
        MissingEnumDefinitionError: If the enum is not part of the enum table.
    """
    select_options = [
        SelectOption(label=normalize_enum_label(value), value=value)
        for value in enum_table[field.type]
    ]
    options = {
        "type": "enum",
        "options": select_options,
        "defaultValue": get_default(field, _is_string),
    }
    return FieldConstructor.SELECT, options, _nullable_db(field)


def translate_relation(field: SourceField) -> KindOptions:
    relation = resolve_relation(field)
    options = {"ref": relation.ref, "many": relation.many}
    return FieldConstructor.RELATIONSHIP, options, relation.db


def get_index_option(field: SourceField) -> bool | str | None:
    if field.isUnique:
        return "unique"
    if field.isId:
        return True
    return None


def translate_field(field: SourceField, enum_table: EnumTable) -> TargetFieldDescriptor:
    """Translate a source field into a Keystone field descriptor.

    Args:
        field (SourceField): The field to translate.
        enum_table (EnumTable): The enums of the schema, used to build the
            options of select fields.

    Returns:
        TargetFieldDescriptor: The constructor name and options of the field.

    Raises:
        MissingEnumDefinitionError: If an enum field refers to an enum that is
            not part of the enum table.
    """
    match field.kind:
        case FieldKind.SCALAR:
            constructor, options, db = translate_scalar(field)
        case FieldKind.ENUM:
            constructor, options, db = translate_enum(field, enum_table)
        case FieldKind.OBJECT:
            constructor, options, db = translate_relation(field)
        case _:
            logger.debug(
                "Unsupported field kind '%s' of field '%s', falling back to text.",
                field.kind.value,
                field.name,
            )
            constructor, options, db = FieldConstructor.TEXT, {}, _nullable_db(field)

    options["isIndexed"] = get_index_option(field)
    options["db"] = db
    if constructor not in UNVALIDATED_CONSTRUCTORS:
        options["validation"] = ValidationOptions(
            isRequired=field.isRequired,
            rejectCommon=True if constructor is FieldConstructor.PASSWORD else None,
        )

    return TargetFieldDescriptor(
        fieldName=field.name,
        constructorName=constructor,
        options=FieldOptions(**options),
    )
