import logging
from abc import ABC, abstractmethod
from pathlib import Path

from ..target import TranslationResult

logger = logging.getLogger(__name__)


class BaseEmitter(ABC):
    """
    Base class for emitters. An emitter renders the descriptors of a
    translation run into the concrete syntax of some output format.
    """

    file_suffix: str = ""

    @abstractmethod
    def render(self, result: TranslationResult) -> str:
        """Returns the rendered output for the translation result."""
        raise NotImplementedError("Subclasses must implement this method.")

    def write(self, result: TranslationResult, file_path: str | Path) -> Path:
        """Render the translation result and write it to a file. An existing
        file is overwritten.

        Args:
            result (TranslationResult): The descriptors to render.
            file_path (str | Path): The path of the output file.

        Returns:
            Path: The path the output was written to.
        """
        file_path = Path(file_path)
        content = self.render(result)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.debug("Wrote %d characters to %s.", len(content), file_path)
        return file_path
