"""Описание серверной стороны: типы, декларации и операции каталога"""

from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator


class TypeKind(str, Enum):
    VOID = "void"
    PRIMITIVE = "primitive"
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    ARRAY = "array"
    ENUM = "enum"
    COMPOSITE = "composite"
    PARAMETERIZED = "parameterized"
    TYPE_VARIABLE = "type_variable"
    WILDCARD = "wildcard"
    UNKNOWN = "unknown"


class RawKind(str, Enum):
    MAP = "map"
    COLLECTION = "collection"
    OTHER = "other"


class ParameterSource(str, Enum):
    PATH = "path"
    QUERY = "query"
    BODY = "body"
    PAGED = "paged"
    NONE = "none"


class TypeDescriptor(BaseModel):
    """Неизменяемая ссылка на серверный тип.

    Для composite/enum хранит только имя и пространство имен, поля и
    параметры-дженерики лежат в таблице деклараций каталога.
    """

    model_config = ConfigDict(frozen=True)

    kind: TypeKind = TypeKind.UNKNOWN
    name: Optional[str] = None
    namespace: Optional[str] = None

    component: Optional["TypeDescriptor"] = None

    raw_kind: Optional[RawKind] = None
    raw: Optional["TypeDescriptor"] = None
    arguments: Tuple["TypeDescriptor", ...] = ()

    bounds: Tuple["TypeDescriptor", ...] = ()

    @model_validator(mode="after")
    def shape_check(self):
        if self.kind == TypeKind.ARRAY and self.component is None:
            raise ValueError("array descriptor requires a component type")

        if self.kind in (TypeKind.ENUM, TypeKind.COMPOSITE, TypeKind.TYPE_VARIABLE):
            if not self.name:
                raise ValueError(f"{self.kind.value} descriptor requires a name")

        if self.kind == TypeKind.PARAMETERIZED:
            if self.raw_kind is None:
                raise ValueError("parameterized descriptor requires raw_kind")
            if not self.arguments:
                raise ValueError("parameterized descriptor requires type arguments")
            if self.raw_kind == RawKind.MAP and len(self.arguments) != 2:
                raise ValueError("map descriptor requires exactly two type arguments")
            if self.raw_kind == RawKind.COLLECTION and len(self.arguments) != 1:
                raise ValueError("collection descriptor requires one type argument")
            if self.raw_kind == RawKind.OTHER and self.raw is None:
                raise ValueError("parameterized descriptor requires its raw type")

        return self

    @property
    def qualified_name(self) -> str:
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name or ""

    # Фабрики для ручной сборки дескрипторов (адаптеры, тесты)

    @classmethod
    def of(cls, kind: TypeKind, name: Optional[str] = None) -> "TypeDescriptor":
        return cls(kind=kind, name=name)

    @classmethod
    def composite(cls, name: str, namespace: Optional[str] = None) -> "TypeDescriptor":
        return cls(kind=TypeKind.COMPOSITE, name=name, namespace=namespace)

    @classmethod
    def enum(cls, name: str, namespace: Optional[str] = None) -> "TypeDescriptor":
        return cls(kind=TypeKind.ENUM, name=name, namespace=namespace)

    @classmethod
    def array(cls, component: "TypeDescriptor") -> "TypeDescriptor":
        return cls(kind=TypeKind.ARRAY, component=component)

    @classmethod
    def map_of(cls, key: "TypeDescriptor", value: "TypeDescriptor") -> "TypeDescriptor":
        return cls(
            kind=TypeKind.PARAMETERIZED, raw_kind=RawKind.MAP, arguments=(key, value)
        )

    @classmethod
    def collection_of(cls, item: "TypeDescriptor") -> "TypeDescriptor":
        return cls(
            kind=TypeKind.PARAMETERIZED, raw_kind=RawKind.COLLECTION, arguments=(item,)
        )

    @classmethod
    def generic(
        cls, raw: "TypeDescriptor", *arguments: "TypeDescriptor"
    ) -> "TypeDescriptor":
        return cls(
            kind=TypeKind.PARAMETERIZED,
            raw_kind=RawKind.OTHER,
            raw=raw,
            arguments=arguments,
        )

    @classmethod
    def variable(cls, name: str) -> "TypeDescriptor":
        return cls(kind=TypeKind.TYPE_VARIABLE, name=name)


TypeDescriptor.model_rebuild()


class FieldDeclaration(BaseModel):
    name: str
    type: TypeDescriptor
    # @JsonIgnore / @Transient на сервере
    ignored: bool = False


class TypeDeclaration(BaseModel):
    """Декларация composite или enum типа"""

    name: str
    namespace: Optional[str] = None
    kind: TypeKind = TypeKind.COMPOSITE

    type_parameters: List[str] = []
    fields: List[FieldDeclaration] = []
    constants: List[str] = []

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}" if self.namespace else self.name


class ParameterDescriptor(BaseModel):
    name: str
    type: TypeDescriptor = TypeDescriptor(kind=TypeKind.UNKNOWN)
    source: ParameterSource = ParameterSource.NONE

    # value / name из аннотации привязки (@PathVariable, @RequestParam)
    binding_value: Optional[str] = None
    binding_name: Optional[str] = None


class OperationDescriptor(BaseModel):
    method: Optional[str] = None
    url: str
    function_name: str
    parameters: List[ParameterDescriptor] = []
    return_type: TypeDescriptor = TypeDescriptor(kind=TypeKind.VOID)


class ServerCatalog(BaseModel):
    operations: Dict[str, OperationDescriptor] = {}
    declarations: Dict[str, TypeDeclaration] = {}


def find_declaration(
    declarations: Mapping[str, TypeDeclaration], descriptor: TypeDescriptor
) -> Optional[TypeDeclaration]:
    """Поиск декларации по полному имени, затем по простому имени и namespace"""
    declaration = declarations.get(descriptor.qualified_name)
    if declaration is not None:
        return declaration

    for candidate in declarations.values():
        if (
            candidate.name == descriptor.name
            and candidate.namespace == descriptor.namespace
        ):
            return candidate

    return None
