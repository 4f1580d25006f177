import logging
from typing import List, Mapping, Optional, TYPE_CHECKING

from ..types.descriptors import (
    RawKind,
    TypeDeclaration,
    TypeDescriptor,
    TypeKind,
    find_declaration,
)
from ..types.models import ANY, TargetType, TypeExpression
from ..types.registry import ScanFilter

if TYPE_CHECKING:
    from .interface_emitter import InterfaceEmitter

logger = logging.getLogger(__name__)


SCALAR_TYPES = {
    TypeKind.STRING: "string",
    TypeKind.BOOLEAN: "boolean",
    TypeKind.NUMBER: "number",
    TypeKind.PRIMITIVE: "number",
    TypeKind.VOID: "void",
}


class TypeMapper:
    """Маппинг серверных типов в TypeScript выражения.

    resolve() чистый: только строит TargetType и собирает типы, которые нужно
    сгенерировать. map() дополнительно передает найденные типы в emitter,
    реестр которого не дает генерировать тип дважды.
    """

    def __init__(
        self,
        scan_filter: ScanFilter,
        declarations: Optional[Mapping[str, TypeDeclaration]] = None,
        emitter: Optional["InterfaceEmitter"] = None,
    ):
        self.scan_filter = scan_filter
        self.declarations = declarations or {}
        self.emitter = emitter

    def map(self, descriptor: TypeDescriptor) -> TargetType:
        target = self.resolve(descriptor)

        if self.emitter is not None:
            for discovered in target.discovered:
                self.emitter.ensure_emitted(discovered)

        return target

    def resolve(self, descriptor: TypeDescriptor) -> TargetType:
        kind = descriptor.kind

        if kind in SCALAR_TYPES:
            return TargetType(
                expression=TypeExpression(value=SCALAR_TYPES[kind]),
                contributing=[descriptor],
            )

        if kind == TypeKind.ARRAY:
            component = self.resolve(descriptor.component)
            return TargetType(
                expression=TypeExpression(value=component.expression, wrap_name="Array"),
                contributing=component.contributing,
                discovered=component.discovered,
            )

        if kind == TypeKind.ENUM:
            return TargetType(
                expression=TypeExpression(value=descriptor.name),
                contributing=[descriptor],
                discovered=[descriptor],
            )

        if kind == TypeKind.COMPOSITE:
            return self._resolve_composite(descriptor)

        if kind == TypeKind.PARAMETERIZED:
            return self._resolve_parameterized(descriptor)

        if kind == TypeKind.TYPE_VARIABLE:
            return TargetType(expression=TypeExpression(value=descriptor.name))

        if kind == TypeKind.WILDCARD:
            # Сам wildcard нетипизирован, но границы нужно сгенерировать
            discovered = []
            for bound in descriptor.bounds:
                discovered.extend(self.resolve(bound).discovered)
            return TargetType(expression=TypeExpression(value=ANY), discovered=discovered)

        return TargetType(expression=TypeExpression(value=ANY))

    def _resolve_composite(self, descriptor: TypeDescriptor) -> TargetType:
        if not self.scan_filter.should_scan(descriptor.namespace):
            logger.debug("%s is outside scanned packages", descriptor.qualified_name)
            return TargetType(expression=TypeExpression(value=ANY))

        declaration = find_declaration(self.declarations, descriptor)
        type_parameters = declaration.type_parameters if declaration else []

        if type_parameters:
            expression = TypeExpression(value=type_parameters, wrap_name=descriptor.name)
        else:
            expression = TypeExpression(value=descriptor.name)

        return TargetType(
            expression=expression,
            contributing=[descriptor],
            discovered=[descriptor],
        )

    def _resolve_parameterized(self, descriptor: TypeDescriptor) -> TargetType:
        raw_kind = descriptor.raw_kind

        if raw_kind == RawKind.MAP:
            return self._join(descriptor.arguments, "Map")

        if raw_kind == RawKind.COLLECTION:
            return self._join(descriptor.arguments, "Array")

        raw = descriptor.raw
        if raw is not None and self.scan_filter.should_scan(raw.namespace):
            target = self._join(descriptor.arguments, raw.name)
            # Сырой тип тоже нужен клиенту, но в import'ы он не попадает
            raw_descriptor = TypeDescriptor.composite(raw.name, raw.namespace)
            target.discovered.insert(0, raw_descriptor)
            return target

        return TargetType(expression=TypeExpression(value=ANY))

    def _join(self, arguments, wrap_name: str) -> TargetType:
        resolved = [self.resolve(argument) for argument in arguments]

        contributing: List[TypeDescriptor] = []
        discovered: List[TypeDescriptor] = []
        for target in resolved:
            contributing.extend(target.contributing)
            discovered.extend(target.discovered)

        return TargetType(
            expression=TypeExpression(
                value=[target.expression for target in resolved], wrap_name=wrap_name
            ),
            contributing=contributing,
            discovered=discovered,
        )
