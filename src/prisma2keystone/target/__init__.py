"""Target descriptors describe what the generated Keystone configuration
consists of: lists with their field constructor calls and option objects, and
optionally standalone enum types.

Descriptors are plain values. Rendering them into concrete syntax is the job of
an emitter (see `prisma2keystone.emitters`).
"""

from .descriptors import (
    UNVALIDATED_CONSTRUCTORS,
    FieldConstructor,
    TargetEnumDescriptor,
    TargetFieldDescriptor,
    TargetListDescriptor,
    TranslationResult,
)
from .options import (
    ComputedDefault,
    DbOptions,
    FieldOptions,
    SelectOption,
    ValidationOptions,
)

__all__ = [
    "FieldConstructor",
    "UNVALIDATED_CONSTRUCTORS",
    "TargetFieldDescriptor",
    "TargetListDescriptor",
    "TargetEnumDescriptor",
    "TranslationResult",
    "ComputedDefault",
    "DbOptions",
    "FieldOptions",
    "SelectOption",
    "ValidationOptions",
]
