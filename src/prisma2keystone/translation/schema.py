from ..source import SourceSchema
from ..target import TargetEnumDescriptor, TranslationResult
from .enum_table import EnumTable
from .models import translate_model


def translate_schema(
    schema: SourceSchema, emit_enums: bool = False
) -> TranslationResult:
    """Translate a source schema into Keystone list descriptors.

    The enum table is built once and shared by all models. Standalone enum
    descriptors keep the canonical member names, whereas the options of select
    fields carry human-readable labels.

    Args:
        schema (SourceSchema): The parsed source schema.
        emit_enums (bool): Whether to emit an enum descriptor for each source
            enum in addition to the lists. Defaults to False.

    Returns:
        TranslationResult: One list per model in declaration order and, if
            requested, one enum per source enum.

    Raises:
        MissingEnumDefinitionError: If any enum field refers to an undefined
            enum. No partial result is returned in that case.
    """
    enum_table = EnumTable.from_enums(schema.enums)

    enums: list[TargetEnumDescriptor] = []
    if emit_enums:
        enums = [
            TargetEnumDescriptor(name=name, members=members)
            for name, members in enum_table.items()
        ]

    lists = [translate_model(model, enum_table) for model in schema.models]

    return TranslationResult(lists=lists, enums=enums)
