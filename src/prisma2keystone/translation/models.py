import logging

from ..source import SourceModel
from ..target import TargetListDescriptor
from .enum_table import EnumTable
from .fields import translate_field

logger = logging.getLogger(__name__)


def translate_model(model: SourceModel, enum_table: EnumTable) -> TargetListDescriptor:
    """Translate a source model into a Keystone list descriptor.

    The identifier field is left out since Keystone adds it to every list
    itself. All other fields keep their source order.

    Args:
        model (SourceModel): The model to translate.
        enum_table (EnumTable): The enums of the schema.

    Returns:
        TargetListDescriptor: The list with one field descriptor per
            non-identifier field.
    """
    fields = {
        field.name: translate_field(field, enum_table)
        for field in model.fields
        if not field.is_identifier
    }
    logger.debug("Translated %d fields of model '%s'.", len(fields), model.name)
    return TargetListDescriptor(modelName=model.name, fields=fields)
