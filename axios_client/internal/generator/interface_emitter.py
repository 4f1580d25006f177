import logging
from typing import List, Mapping, Optional

from ..types.descriptors import (
    TypeDeclaration,
    TypeDescriptor,
    TypeKind,
    find_declaration,
)
from ..types.models import Argument, CodeFile, Enumeration, Interface, Project
from ..types.registry import EmittedRegistry
from .templates import templates
from .type_mapper import TypeMapper

logger = logging.getLogger(__name__)


class InterfaceEmitter:
    """Генерация TypeScript интерфейсов и enum'ов, по одному файлу на тип"""

    def __init__(
        self,
        mapper: TypeMapper,
        registry: EmittedRegistry,
        project: Project,
        declarations: Optional[Mapping[str, TypeDeclaration]] = None,
    ):
        self.mapper = mapper
        self.registry = registry
        self.project = project
        self.declarations = (
            declarations if declarations is not None else mapper.declarations
        )

    def ensure_emitted(self, descriptor: TypeDescriptor):
        if descriptor.kind == TypeKind.ENUM:
            self.emit_enum(descriptor)
        elif descriptor.kind == TypeKind.COMPOSITE:
            self.emit_interface(descriptor)

    def emit_interface(self, descriptor: TypeDescriptor) -> Optional[CodeFile]:
        name = descriptor.name
        # Регистрация до обхода полей: рекурсивные ссылки не генерируются повторно
        if not self.registry.register(name, descriptor.qualified_name):
            self._log_collision(descriptor)
            return None

        code_file = self.project.add_file(templates.declaration_file_name(name))

        declaration = find_declaration(self.declarations, descriptor)
        if declaration is None:
            logger.warning(
                "No declaration for %s, emitting an empty interface",
                descriptor.qualified_name,
            )
            declaration = TypeDeclaration(name=name, namespace=descriptor.namespace)

        interface = Interface(name=name, type_parameters=declaration.type_parameters)
        imported: List[str] = []

        for field in declaration.fields:
            if field.ignored:
                continue

            target = self.mapper.map(field.type)
            interface.members.append(Argument(name=field.name, var_type=target.expression))

            for import_name in target.import_names(exclude=name):
                if import_name not in imported:
                    imported.append(import_name)

        for import_name in imported:
            code_file.add_import(templates.type_import(import_name))

        code_file.add_declaration(interface)
        logger.debug("Emitted interface %s (%d members)", name, len(interface.members))
        return code_file

    def emit_enum(self, descriptor: TypeDescriptor) -> Optional[CodeFile]:
        name = descriptor.name
        if not self.registry.register(name, descriptor.qualified_name):
            self._log_collision(descriptor)
            return None

        declaration = find_declaration(self.declarations, descriptor)
        constants = declaration.constants if declaration else []

        code_file = self.project.add_file(templates.declaration_file_name(name))
        code_file.add_declaration(Enumeration(name=name, constants=constants))
        logger.debug("Emitted enum %s (%d constants)", name, len(constants))
        return code_file

    def _log_collision(self, descriptor: TypeDescriptor):
        origin = self.registry.origin_of(descriptor.name)
        if origin != descriptor.qualified_name:
            logger.warning(
                "%s shares the simple name with already emitted %s, skipping",
                descriptor.qualified_name,
                origin,
            )
