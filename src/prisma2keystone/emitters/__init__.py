"""Emitters turn translation results into concrete syntax. The translation
engine is agnostic of the output format; pick an emitter by its format name
with `get_emitter`."""

from .base import BaseEmitter
from .json_emitter import JsonEmitter
from .keystone import KeystoneEmitter

EMITTERS: dict[str, type[BaseEmitter]] = {
    "keystone": KeystoneEmitter,
    "json": JsonEmitter,
}


def get_emitter(output_format: str) -> BaseEmitter:
    """Returns an emitter instance for the given output format.

    Raises:
        ValueError: If no emitter is registered for the format.
    """
    try:
        return EMITTERS[output_format]()
    except KeyError as e:
        raise ValueError(
            f"Unsupported output format '{output_format}'. "
            f"Choose one of {sorted(EMITTERS)}."
        ) from e


__all__ = [
    "BaseEmitter",
    "KeystoneEmitter",
    "JsonEmitter",
    "EMITTERS",
    "get_emitter",
]
