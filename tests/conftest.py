"""Общие фикстуры: каталог тестового сервера и собранный движок генерации"""

import copy

import pytest

from axios_client.internal.generator.interface_emitter import InterfaceEmitter
from axios_client.internal.generator.type_mapper import TypeMapper
from axios_client.internal.types.descriptors import (
    FieldDeclaration,
    TypeDeclaration,
    TypeDescriptor,
    TypeKind,
)
from axios_client.internal.types.models import Project
from axios_client.internal.types.registry import EmittedRegistry, ScanFilter

PACKAGES = ["com.acme"]

NAMESPACE = "com.acme.dto"

CATALOG = {
    "operations": {
        "UserController#getUser": {
            "method": "GET",
            "url": "/users/{id}",
            "function_name": "getUser",
            "parameters": [
                {"name": "id", "source": "path", "type": {"kind": "number"}},
                {"name": "active", "source": "query", "type": {"kind": "boolean"}},
            ],
            "return_type": {"$ref": "#/shared/user"},
        },
        "UserController#listUsers": {
            "method": "GET",
            "url": "/users",
            "function_name": "listUsers",
            "parameters": [{"name": "pageable", "source": "paged"}],
            "return_type": {
                "kind": "parameterized",
                "raw_kind": "other",
                "raw": {"kind": "composite", "name": "Page", "namespace": NAMESPACE},
                "arguments": [{"$ref": "#/shared/user"}],
            },
        },
        "UserController#createUser": {
            "method": "POST",
            "url": "/users",
            "function_name": "createUser",
            "parameters": [
                {"name": "user", "source": "body", "type": {"$ref": "#/shared/user"}}
            ],
            "return_type": {"$ref": "#/shared/user"},
        },
        "HealthController#ping": {
            "url": "/ping",
            "function_name": "ping",
            "return_type": {
                "kind": "composite",
                "name": "Health",
                "namespace": "org.springframework.boot.actuate",
            },
        },
    },
    "declarations": {
        "com.acme.dto.User": {
            "name": "User",
            "namespace": NAMESPACE,
            "fields": [
                {"name": "id", "type": {"kind": "number"}},
                {"name": "name", "type": {"kind": "string"}},
                {
                    "name": "role",
                    "type": {"kind": "enum", "name": "Role", "namespace": NAMESPACE},
                },
                {"name": "manager", "type": {"$ref": "#/shared/user"}},
                {"name": "password", "type": {"kind": "string"}, "ignored": True},
            ],
        },
        "com.acme.dto.Role": {
            "name": "Role",
            "namespace": NAMESPACE,
            "kind": "enum",
            "constants": ["ADMIN", "USER"],
        },
        "com.acme.dto.Page": {
            "name": "Page",
            "namespace": NAMESPACE,
            "type_parameters": ["T"],
            "fields": [
                {
                    "name": "content",
                    "type": {
                        "kind": "parameterized",
                        "raw_kind": "collection",
                        "arguments": [{"kind": "type_variable", "name": "T"}],
                    },
                },
                {"name": "totalElements", "type": {"kind": "number"}},
            ],
        },
    },
    "shared": {
        "user": {"kind": "composite", "name": "User", "namespace": NAMESPACE},
    },
}


def declare(name, *fields, type_parameters=(), namespace=NAMESPACE):
    """Декларация composite типа: fields - пары (имя, дескриптор)"""
    return TypeDeclaration(
        name=name,
        namespace=namespace,
        type_parameters=list(type_parameters),
        fields=[FieldDeclaration(name=n, type=t) for n, t in fields],
    )


def dto(name):
    return TypeDescriptor.composite(name, NAMESPACE)


STRING = TypeDescriptor.of(TypeKind.STRING)
NUMBER = TypeDescriptor.of(TypeKind.NUMBER)
BOOLEAN = TypeDescriptor.of(TypeKind.BOOLEAN)


@pytest.fixture
def catalog_dict():
    return copy.deepcopy(CATALOG)


class Engine:
    """Mapper + emitter с общим реестром, как их связывает ClientGenerator"""

    def __init__(self, declarations=None, packages=PACKAGES):
        self.declarations = {d.qualified_name: d for d in (declarations or [])}
        self.registry = EmittedRegistry()
        self.project = Project(name="test")
        self.mapper = TypeMapper(ScanFilter(packages), self.declarations)
        self.emitter = InterfaceEmitter(
            self.mapper, self.registry, self.project, self.declarations
        )
        self.mapper.emitter = self.emitter

    def text(self, file_name):
        return str(self.project.get_file(file_name))


@pytest.fixture
def engine_factory():
    return Engine
