"""Source models describe the schema being translated from. They mirror the
`datamodel` section of a Prisma DMMF document: models with their scalar, enum
and relation fields, and enums with their members.

The introspection that produces this document is not part of this package;
the models only validate and expose it to the translation engine.
"""

from .field import ID_FIELD_NAME, FieldKind, FunctionDefault, SourceField
from .model import SourceEnum, SourceModel, SourceSchema

__all__ = [
    "ID_FIELD_NAME",
    "FieldKind",
    "FunctionDefault",
    "SourceField",
    "SourceEnum",
    "SourceModel",
    "SourceSchema",
]
