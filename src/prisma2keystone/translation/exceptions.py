class TranslationError(Exception):
    """Base class for errors that abort a translation run."""

    _default_message: str = "The schema could not be translated."

    def __init__(self, message: str | None = None):
        self.message = message or self._default_message
        super().__init__(self.message)


class MissingEnumDefinitionError(TranslationError, KeyError):
    """An enum field refers to an enum that is not part of the schema."""

    _default_message: str = "Enum definition not found."

    def __init__(self, enum_name: str, message: str | None = None):
        self.enum_name = enum_name
        super().__init__(
            message or f"Enum '{enum_name}' is referenced but not defined."
        )

    def __str__(self) -> str:
        # KeyError would otherwise render the message in quotes
        return self.message
