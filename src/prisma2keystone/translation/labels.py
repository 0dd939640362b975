def normalize_enum_label(value: str) -> str:
    """Turn a canonical enum member name into a display label.

    The value is lower-cased, underscores become spaces and every word is
    capitalised, e.g. `SUPER_ADMIN` becomes `Super Admin`. Values of other
    shapes go through the same steps.

    Args:
        value (str): The enum member name.

    Returns:
        str: The human-readable label.
    """
    words = value.lower().replace("_", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)
