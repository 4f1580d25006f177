"""
Тесты маппинга серверных типов в TypeScript
"""

import pytest
from pydantic import ValidationError

from axios_client.internal.generator.type_mapper import TypeMapper
from axios_client.internal.types.descriptors import RawKind, TypeDescriptor, TypeKind
from axios_client.internal.types.registry import ScanFilter

from conftest import BOOLEAN, NUMBER, PACKAGES, STRING, declare, dto


@pytest.fixture
def mapper():
    declarations = [declare("Page", ("content", STRING), type_parameters=["T"])]
    return TypeMapper(
        ScanFilter(PACKAGES), {d.qualified_name: d for d in declarations}
    )


class TestScalars:
    """Примитивы и строки"""

    def test_string(self, mapper):
        target = mapper.resolve(STRING)
        assert target.ts_type == "string"
        assert target.contributing == [STRING]
        assert target.import_names() == []

    def test_boolean(self, mapper):
        assert mapper.resolve(BOOLEAN).ts_type == "boolean"

    def test_number_and_primitive(self, mapper):
        assert mapper.resolve(NUMBER).ts_type == "number"
        assert mapper.resolve(TypeDescriptor.of(TypeKind.PRIMITIVE, "char")).ts_type == "number"

    def test_void(self, mapper):
        assert mapper.resolve(TypeDescriptor.of(TypeKind.VOID)).ts_type == "void"


class TestComposites:
    def test_scanned_composite(self, mapper):
        user = dto("User")
        target = mapper.resolve(user)

        assert target.ts_type == "User"
        assert target.contributing == [user]
        assert target.discovered == [user]
        assert target.import_names() == ["User"]

    def test_generic_declaration_keeps_parameter_names(self, mapper):
        """Page<T> рендерится по декларации, без подстановки аргументов"""
        assert mapper.resolve(dto("Page")).ts_type == "Page<T>"

    def test_out_of_filter_composite(self, mapper):
        """Тип вне фильтра пакетов - any без импортов и генерации"""
        health = TypeDescriptor.composite("Health", "org.springframework.boot")
        target = mapper.resolve(health)

        assert target.ts_type == "any"
        assert target.contributing == []
        assert target.discovered == []

    def test_composite_without_namespace(self, mapper):
        assert mapper.resolve(TypeDescriptor.composite("Local")).ts_type == "any"

    def test_enum(self, mapper):
        role = TypeDescriptor.enum("Role", "java.time")
        target = mapper.resolve(role)

        assert target.ts_type == "Role"
        assert target.contributing == [role]
        assert target.discovered == [role]


class TestContainers:
    def test_array(self, mapper):
        target = mapper.resolve(TypeDescriptor.array(dto("User")))

        assert target.ts_type == "Array<User>"
        assert target.import_names() == ["User"]

    def test_collection(self, mapper):
        target = mapper.resolve(TypeDescriptor.collection_of(dto("User")))

        assert target.ts_type == "Array<User>"
        assert target.contributing == [dto("User")]

    def test_map(self, mapper):
        target = mapper.resolve(TypeDescriptor.map_of(STRING, dto("User")))

        assert target.ts_type == "Map<string, User>"
        assert target.contributing == [STRING, dto("User")]

    def test_nested_collection_of_map(self, mapper):
        descriptor = TypeDescriptor.collection_of(TypeDescriptor.map_of(STRING, NUMBER))
        assert mapper.resolve(descriptor).ts_type == "Array<Map<string, number>>"

    def test_scanned_generic_uses_actual_arguments(self, mapper):
        descriptor = TypeDescriptor.generic(dto("Page"), dto("User"))
        target = mapper.resolve(descriptor)

        assert target.ts_type == "Page<User>"
        # Сырой тип генерируется, но не импортируется
        assert target.import_names() == ["User"]
        assert [d.name for d in target.discovered] == ["Page", "User"]

    def test_unscanned_generic(self, mapper):
        raw = TypeDescriptor.composite("ResponseEntity", "org.springframework.http")
        descriptor = TypeDescriptor.generic(raw, dto("User"))
        target = mapper.resolve(descriptor)

        assert target.ts_type == "any"
        assert target.contributing == []


class TestVariablesAndUnknown:
    def test_type_variable(self, mapper):
        target = mapper.resolve(TypeDescriptor.variable("T"))

        assert target.ts_type == "T"
        assert target.contributing == []
        assert target.discovered == []

    def test_wildcard_is_any_but_walks_bounds(self, mapper):
        wildcard = TypeDescriptor(kind=TypeKind.WILDCARD, bounds=(dto("User"),))
        target = mapper.resolve(wildcard)

        assert target.ts_type == "any"
        assert target.contributing == []
        assert target.discovered == [dto("User")]

    def test_unknown(self, mapper):
        assert mapper.resolve(TypeDescriptor()).ts_type == "any"


class TestDescriptorValidation:
    """Параметризованный тип без аргументов - ошибка вызывающей стороны"""

    def test_parameterized_without_arguments(self):
        with pytest.raises(ValidationError):
            TypeDescriptor(kind=TypeKind.PARAMETERIZED, raw_kind=RawKind.COLLECTION)

    def test_map_needs_two_arguments(self):
        with pytest.raises(ValidationError):
            TypeDescriptor(
                kind=TypeKind.PARAMETERIZED, raw_kind=RawKind.MAP, arguments=(STRING,)
            )

    def test_array_needs_component(self):
        with pytest.raises(ValidationError):
            TypeDescriptor(kind=TypeKind.ARRAY)


def test_map_without_emitter_does_not_emit(mapper):
    target = mapper.map(dto("User"))
    assert target.ts_type == "User"
    assert mapper.emitter is None
