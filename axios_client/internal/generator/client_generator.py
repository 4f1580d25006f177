import logging
from typing import Iterable, List, Optional

from ..types.descriptors import OperationDescriptor, ParameterSource, ServerCatalog
from ..types.models import CodeBlock, Project
from ..types.registry import EmittedRegistry, ScanFilter
from .client_function import ClientFunctionGenerator
from .interface_emitter import InterfaceEmitter
from .templates import templates
from .type_mapper import TypeMapper

logger = logging.getLogger(__name__)


class ClientGenerator:
    """Генератор TypeScript клиента из каталога операций сервера"""

    def __init__(self, catalog: ServerCatalog, packages: Iterable[str] = ()):
        self.catalog = catalog
        self.scan_filter = ScanFilter(packages)
        self.project = Project(name="api")
        self.registry = EmittedRegistry()  # Свой реестр на каждый запуск

        self.mapper = TypeMapper(self.scan_filter, catalog.declarations)
        self.emitter = InterfaceEmitter(
            self.mapper, self.registry, self.project, catalog.declarations
        )
        self.mapper.emitter = self.emitter
        self.functions = ClientFunctionGenerator(self.mapper)

        self.default_functions: List[str] = list(templates.default_functions)

    def add_default_function(self, function: str):
        self.default_functions.append(function)

    def generate(self) -> Project:
        """Основная генерация"""
        self._discover_types()
        api_file = self._generate_functions()
        self._finalize_api_file(api_file)
        logger.info(
            "Generated %d operations and %d declarations",
            len(self.catalog.operations),
            len(self.registry),
        )
        return self.project

    def _discover_types(self):
        """Генерация интерфейсов для всех типов, встречающихся в операциях"""
        for operation in self.catalog.operations.values():
            self.mapper.map(operation.return_type)

            for parameter in operation.parameters:
                if parameter.source == ParameterSource.PAGED:
                    continue
                self.mapper.map(parameter.type)

    def _generate_functions(self):
        api_file = self.project.add_file(templates.api_file_name)
        seen = {}

        for key, operation in self.catalog.operations.items():
            logger.debug("Generating %s for %s", operation.function_name, key)
            if operation.function_name in seen:
                logger.warning(
                    "%s and %s both generate %s",
                    seen[operation.function_name],
                    key,
                    operation.function_name,
                )
            seen.setdefault(operation.function_name, key)
            api_file.add_function(self._build_function(operation))

        return api_file

    def _build_function(self, operation: OperationDescriptor):
        return self.functions.build(
            operation.method,
            operation.url,
            operation.function_name,
            operation.parameters,
            operation.return_type,
        )

    def _finalize_api_file(self, api_file):
        api_file.imports.append(templates.header)
        for name in self.registry.names:
            api_file.add_import(templates.api_import(name))

        for function in self.default_functions:
            api_file.add_code_block(CodeBlock(code=function))

        # api.ts последним
        self.project.files.remove(api_file)
        self.project.files.append(api_file)

    def get_file_text(self, file_name: str) -> Optional[str]:
        code_file = self.project.get_file(file_name)
        return str(code_file) if code_file else None
