"""The translation engine maps a Prisma data model onto Keystone lists.

Each non-identifier field of a model becomes a field constructor call whose
options preserve nullability, defaults, uniqueness and relation cardinality.
The engine is a pure function of its input: it performs no I/O and keeps no
state beyond the enum table of a single run.
"""

from .enum_table import EnumTable
from .exceptions import MissingEnumDefinitionError, TranslationError
from .fields import translate_field
from .labels import normalize_enum_label
from .models import translate_model
from .relations import RelationReference, resolve_relation
from .schema import translate_schema

__all__ = [
    "EnumTable",
    "TranslationError",
    "MissingEnumDefinitionError",
    "normalize_enum_label",
    "resolve_relation",
    "RelationReference",
    "translate_field",
    "translate_model",
    "translate_schema",
]
