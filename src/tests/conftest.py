import random

import pytest
from polyfactory.factories.pydantic_factory import ModelFactory
from polyfactory.fields import Use

from prisma2keystone.source import FieldKind, SourceField, SourceSchema


class ScalarFieldFactory(ModelFactory[SourceField]):
    """Scalar fields of the nullable kinds without defaults."""

    __model__ = SourceField

    name = Use(lambda: f"field_{random.randint(0, 10_000)}")
    kind = FieldKind.SCALAR
    type = Use(random.choice, ["String", "Int", "Float", "DateTime", "Decimal"])
    isList = False
    isUnique = False
    isId = False
    hasDefaultValue = False
    default = None
    relationName = None
    relationFromFields = Use(list)
    relationToFields = Use(list)


@pytest.fixture
def scalar_field_factory() -> type[ScalarFieldFactory]:
    return ScalarFieldFactory


@pytest.fixture
def make_field():
    """Create a source field with DMMF defaults for everything not given."""

    def _make_field(
        name: str, type: str, kind: str = "scalar", **kwargs
    ) -> SourceField:
        data = {"name": name, "kind": kind, "type": type, **kwargs}
        return SourceField.model_validate(data)

    return _make_field


@pytest.fixture
def id_field() -> dict:
    return {
        "name": "id",
        "kind": "scalar",
        "isList": False,
        "isRequired": True,
        "isUnique": False,
        "isId": True,
        "isReadOnly": False,
        "hasDefaultValue": True,
        "type": "String",
        "default": {"name": "cuid", "args": []},
        "isGenerated": False,
        "isUpdatedAt": False,
    }


@pytest.fixture
def profile_dmmf(id_field) -> dict:
    """A DMMF datamodel with a Profile and a Log model, as dumped by Prisma."""
    return {
        "enums": [
            {
                "name": "Role",
                "values": [
                    {"name": "USER", "dbName": None},
                    {"name": "ADMIN", "dbName": None},
                    {"name": "SUPPORT", "dbName": None},
                ],
                "dbName": None,
            },
            {
                "name": "EventTag",
                "values": [
                    {"name": "ERROR", "dbName": None},
                    {"name": "INFO", "dbName": None},
                ],
                "dbName": None,
            },
        ],
        "models": [
            {
                "name": "Profile",
                "dbName": None,
                "fields": [
                    id_field,
                    {
                        "name": "email",
                        "kind": "scalar",
                        "isList": False,
                        "isRequired": True,
                        "isUnique": True,
                        "isId": False,
                        "isReadOnly": False,
                        "hasDefaultValue": False,
                        "type": "String",
                        "isGenerated": False,
                        "isUpdatedAt": False,
                    },
                    {
                        "name": "verifiedEmail",
                        "kind": "scalar",
                        "isList": False,
                        "isRequired": True,
                        "isUnique": False,
                        "isId": False,
                        "isReadOnly": False,
                        "hasDefaultValue": True,
                        "type": "Boolean",
                        "default": False,
                        "isGenerated": False,
                        "isUpdatedAt": False,
                    },
                    {
                        "name": "role",
                        "kind": "enum",
                        "isList": False,
                        "isRequired": True,
                        "isUnique": False,
                        "isId": False,
                        "isReadOnly": False,
                        "hasDefaultValue": True,
                        "type": "Role",
                        "default": "USER",
                        "isGenerated": False,
                        "isUpdatedAt": False,
                    },
                    {
                        "name": "logs",
                        "kind": "object",
                        "isList": True,
                        "isRequired": True,
                        "isUnique": False,
                        "isId": False,
                        "isReadOnly": False,
                        "hasDefaultValue": False,
                        "type": "Log",
                        "relationName": "LogToProfile",
                        "relationFromFields": [],
                        "relationToFields": [],
                        "isGenerated": False,
                        "isUpdatedAt": False,
                    },
                ],
                "primaryKey": None,
                "uniqueFields": [],
                "uniqueIndexes": [],
                "isGenerated": False,
            },
            {
                "name": "Log",
                "dbName": None,
                "fields": [
                    id_field,
                    {
                        "name": "tag",
                        "kind": "enum",
                        "isList": False,
                        "isRequired": True,
                        "isUnique": False,
                        "isId": False,
                        "isReadOnly": False,
                        "hasDefaultValue": True,
                        "type": "EventTag",
                        "default": "INFO",
                        "isGenerated": False,
                        "isUpdatedAt": False,
                    },
                    {
                        "name": "createdAt",
                        "kind": "scalar",
                        "isList": False,
                        "isRequired": True,
                        "isUnique": False,
                        "isId": False,
                        "isReadOnly": False,
                        "hasDefaultValue": True,
                        "type": "DateTime",
                        "default": {"name": "now", "args": []},
                        "isGenerated": False,
                        "isUpdatedAt": False,
                    },
                    {
                        "name": "profile",
                        "kind": "object",
                        "isList": False,
                        "isRequired": False,
                        "isUnique": False,
                        "isId": False,
                        "isReadOnly": False,
                        "hasDefaultValue": False,
                        "type": "Profile",
                        "relationName": "LogToProfile",
                        "relationFromFields": ["profileId"],
                        "relationToFields": ["id"],
                        "isGenerated": False,
                        "isUpdatedAt": False,
                    },
                    {
                        "name": "profileId",
                        "kind": "scalar",
                        "isList": False,
                        "isRequired": False,
                        "isUnique": False,
                        "isId": False,
                        "isReadOnly": True,
                        "hasDefaultValue": False,
                        "type": "String",
                        "isGenerated": False,
                        "isUpdatedAt": False,
                    },
                ],
                "primaryKey": None,
                "uniqueFields": [],
                "uniqueIndexes": [],
                "isGenerated": False,
            },
        ],
        "types": [],
    }


@pytest.fixture
def profile_schema(profile_dmmf) -> SourceSchema:
    return SourceSchema.from_dmmf(profile_dmmf)
