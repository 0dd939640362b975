import json

from ..target import TranslationResult
from .base import BaseEmitter


class JsonEmitter(BaseEmitter):
    """Emits the descriptors as a JSON document, e.g. for tooling that renders
    the configuration itself."""

    file_suffix = ".json"

    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def render(self, result: TranslationResult) -> str:
        return json.dumps(result.to_dict(), indent=self.indent) + "\n"
