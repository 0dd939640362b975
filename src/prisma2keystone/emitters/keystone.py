"""Renders translation results as a Keystone 6 schema module in TypeScript.

The module exports a `lists` object with one `list({ fields: {...} })` call
per translated model, followed by one `enum` declaration per enum descriptor.
"""

import json
import re
from collections.abc import Mapping, Sequence
from typing import Any

from ..target import (
    FieldConstructor,
    TargetEnumDescriptor,
    TargetFieldDescriptor,
    TargetListDescriptor,
    TranslationResult,
)
from .base import BaseEmitter

INDENT = "    "

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Options rendered on a single line, e.g. `defaultValue: { kind: "now" }`.
INLINE_KEYS = frozenset({"defaultValue"})

HEADER = """\
import { list } from '@keystone-6/core';

import {
{field_imports}
} from '@keystone-6/core/fields';

// The Keystone generated `Lists` type refines the lists object to the
// lists of this schema.
import { Lists } from '.keystone/types';"""


def render_key(key: str) -> str:
    """Object keys are quoted only if they are no valid identifiers."""
    if IDENTIFIER_PATTERN.match(key):
        return key
    return json.dumps(key)


def render_value(value: Any, depth: int = 0, inline: bool = False) -> str:
    """Render a Python value as a TypeScript literal.

    Args:
        value (Any): A bool, number, string, mapping or sequence.
        depth (int): The indentation depth of the line the value starts on.
        inline (bool): Whether to render objects and arrays on a single line.

    Returns:
        str: The TypeScript literal.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float | str):
        return json.dumps(value)
    if isinstance(value, Mapping):
        return render_object(value, depth, inline)
    if isinstance(value, Sequence):
        return render_array(value, depth, inline)
    raise TypeError(f"Cannot render value of type {type(value).__name__}.")


def render_object(mapping: Mapping[str, Any], depth: int, inline: bool) -> str:
    if not mapping:
        return "{}"
    if inline:
        items = ", ".join(
            f"{render_key(k)}: {render_value(v, inline=True)}"
            for k, v in mapping.items()
        )
        return f"{{ {items} }}"
    inner = INDENT * (depth + 1)
    lines = [
        f"{inner}{render_key(key)}: "
        f"{render_value(value, depth + 1, inline=key in INLINE_KEYS)}"
        for key, value in mapping.items()
    ]
    return "{\n" + ",\n".join(lines) + "\n" + INDENT * depth + "}"


def render_array(items: Sequence[Any], depth: int, inline: bool) -> str:
    if not items:
        return "[]"
    if inline:
        return "[" + ", ".join(render_value(i, inline=True) for i in items) + "]"
    inner = INDENT * (depth + 1)
    lines = [f"{inner}{render_value(item, depth + 1)}" for item in items]
    return "[\n" + ",\n".join(lines) + "\n" + INDENT * depth + "]"


class KeystoneEmitter(BaseEmitter):
    """Emits the `schema.ts` module of a Keystone 6 project."""

    file_suffix = ".ts"

    def render_header(self) -> str:
        field_imports = ",\n".join(
            f"{INDENT}{constructor.value}" for constructor in FieldConstructor
        )
        return HEADER.replace("{field_imports}", field_imports)

    def render_field(self, field: TargetFieldDescriptor, depth: int) -> str:
        options = field.options.to_dict()
        arguments = render_value(options, depth) if options else ""
        constructor = field.constructorName.value
        return f"{render_key(field.fieldName)}: {constructor}({arguments})"

    def render_list(self, lst: TargetListDescriptor, depth: int) -> str:
        fields_depth = depth + 1
        if lst.fields:
            field_depth = fields_depth + 1
            field_lines = [
                INDENT * field_depth + self.render_field(field, field_depth)
                for field in lst.fields.values()
            ]
            closing = INDENT * fields_depth + "}"
            fields = "{\n" + ",\n".join(field_lines) + "\n" + closing
        else:
            fields = "{}"
        return (
            f"{render_key(lst.modelName)}: list({{\n"
            f"{INDENT * (depth + 1)}fields: {fields}\n"
            f"{INDENT * depth}}})"
        )

    def render_enum(self, enum: TargetEnumDescriptor) -> str:
        if not enum.members:
            return f"enum {enum.name} {{}}"
        members = ",\n".join(f"{INDENT}{member}" for member in enum.members)
        return f"enum {enum.name} {{\n{members}\n}}"

    def render(self, result: TranslationResult) -> str:
        if result.lists:
            list_lines = [INDENT + self.render_list(lst, 1) for lst in result.lists]
            lists = "{\n" + ",\n".join(list_lines) + "\n}"
        else:
            lists = "{}"
        blocks = [self.render_header(), f"export const lists: Lists = {lists};"]
        blocks.extend(self.render_enum(enum) for enum in result.enums)
        return "\n\n".join(blocks) + "\n"
