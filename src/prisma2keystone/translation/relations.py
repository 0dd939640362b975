from pydantic import BaseModel, ConfigDict

from ..source import ID_FIELD_NAME, SourceField
from ..target import DbOptions


class RelationReference(BaseModel):
    """The resolved reference of a relationship field."""

    model_config = ConfigDict(frozen=True)

    ref: str
    many: bool
    db: DbOptions


def resolve_ref(field: SourceField) -> str:
    """Returns the list a relation points to. A relation onto a field other
    than the identifier is qualified with that field, e.g. `Profile.email`."""
    target_field = field.relationToFields[0] if field.relationToFields else None
    if not target_field or target_field == ID_FIELD_NAME:
        return field.type
    return f"{field.type}.{target_field}"


def resolve_relation(field: SourceField) -> RelationReference:
    """Resolve reference and cardinality of a relation field.

    Relationships carry no nullability option. The many side of a relation
    carries the relation name so that several relations between the same two
    models can be told apart.

    Args:
        field (SourceField): A field of kind `object`. The relation metadata is
            not validated here.

    Returns:
        RelationReference: The `ref`, `many` and `db` options of the field.
    """
    if field.isList:
        db = DbOptions(relationName=field.relationName)
    else:
        db = DbOptions()
    return RelationReference(ref=resolve_ref(field), many=field.isList, db=db)
