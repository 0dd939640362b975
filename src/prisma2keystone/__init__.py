"""prisma2keystone translates Prisma data models into Keystone 6 lists."""

from .source import SourceEnum, SourceField, SourceModel, SourceSchema
from .target import (
    TargetEnumDescriptor,
    TargetFieldDescriptor,
    TargetListDescriptor,
    TranslationResult,
)
from .translation import (
    MissingEnumDefinitionError,
    TranslationError,
    normalize_enum_label,
    translate_schema,
)

__version__ = "0.1.0"

__all__ = [
    "SourceSchema",
    "SourceModel",
    "SourceField",
    "SourceEnum",
    "TargetFieldDescriptor",
    "TargetListDescriptor",
    "TargetEnumDescriptor",
    "TranslationResult",
    "TranslationError",
    "MissingEnumDefinitionError",
    "normalize_enum_label",
    "translate_schema",
]
