import pytest

from prisma2keystone.emitters import KeystoneEmitter, get_emitter
from prisma2keystone.emitters.keystone import render_key, render_value
from prisma2keystone.target import TranslationResult
from prisma2keystone.translation import translate_schema


class TestRenderValue:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, "true"),
            (False, "false"),
            (0, "0"),
            (1.5, "1.5"),
            ("USER", '"USER"'),
            ('say "hi"', '"say \\"hi\\""'),
            ({}, "{}"),
            ([], "[]"),
        ],
    )
    def test_literals(self, value, expected):
        assert render_value(value) == expected

    def test_object(self):
        assert render_value({"isNullable": False, "updatedAt": True}, depth=1) == (
            "{\n        isNullable: false,\n        updatedAt: true\n    }"
        )

    def test_inline_object(self):
        assert render_value({"kind": "now"}, inline=True) == '{ kind: "now" }'

    def test_default_value_is_inline(self):
        rendered = render_value({"defaultValue": {"kind": "now"}, "db": {}})
        assert rendered == '{\n    defaultValue: { kind: "now" },\n    db: {}\n}'

    def test_unsupported_value(self):
        with pytest.raises(TypeError):
            render_value(object())

    @pytest.mark.parametrize(
        "key, expected",
        [("email", "email"), ("_private", "_private"), ("first-name", '"first-name"')],
    )
    def test_keys(self, key, expected):
        assert render_key(key) == expected


class TestKeystoneEmitter:
    def test_is_default_format(self):
        assert isinstance(get_emitter("keystone"), KeystoneEmitter)

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unsupported output format"):
            get_emitter("graphql")

    def test_header_imports_all_constructors(self):
        header = KeystoneEmitter().render_header()
        assert "import { list } from '@keystone-6/core';" in header
        assert "    relationship\n} from '@keystone-6/core/fields';" in header
        assert "import { Lists } from '.keystone/types';" in header

    def test_empty_result(self):
        rendered = KeystoneEmitter().render(TranslationResult())
        assert rendered.endswith("export const lists: Lists = {};\n")

    def test_checkbox_field(self, profile_schema):
        rendered = KeystoneEmitter().render(translate_schema(profile_schema))
        expected = (
            "            verifiedEmail: checkbox({\n"
            "                defaultValue: false,\n"
            "                db: {}\n"
            "            }),\n"
        )
        assert expected in rendered

    def test_select_field(self, profile_schema):
        rendered = KeystoneEmitter().render(translate_schema(profile_schema))
        expected = (
            "            tag: select({\n"
            '                type: "enum",\n'
            "                options: [\n"
            "                    {\n"
            '                        label: "Error",\n'
            '                        value: "ERROR"\n'
            "                    },\n"
            "                    {\n"
            '                        label: "Info",\n'
            '                        value: "INFO"\n'
            "                    }\n"
            "                ],\n"
            '                defaultValue: "INFO",\n'
        )
        assert expected in rendered

    def test_lists_structure(self, profile_schema):
        rendered = KeystoneEmitter().render(translate_schema(profile_schema))
        assert "export const lists: Lists = {\n    Profile: list({\n" in rendered
        assert "        fields: {\n            email: text({\n" in rendered
        assert '                defaultValue: { kind: "now" },\n' in rendered
        assert "            })\n        }\n    })\n};\n" in rendered
        assert "            id: " not in rendered

    def test_enums_follow_lists(self, profile_schema):
        result = translate_schema(profile_schema, emit_enums=True)
        rendered = KeystoneEmitter().render(result)
        assert rendered.endswith(
            "};\n\nenum Role {\n    USER,\n    ADMIN,\n    SUPPORT\n}\n\n"
            "enum EventTag {\n    ERROR,\n    INFO\n}\n"
        )

    def test_write(self, tmp_path, profile_schema):
        result = translate_schema(profile_schema)
        path = KeystoneEmitter().write(result, tmp_path / "keystone" / "schema.ts")
        assert path.read_text(encoding="utf-8") == KeystoneEmitter().render(result)
