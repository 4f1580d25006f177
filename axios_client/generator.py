"""
Главный модуль генератора - чистый интерфейс
"""

from typing import Any, Dict, Iterable, Union

from .internal.generator.client_generator import ClientGenerator
from .internal.parser.catalog import CatalogParser
from .internal.types.descriptors import ServerCatalog
from .internal.types.models import Project


class ApiClientGenerator:
    """Чистый интерфейс для генерации TypeScript клиентов"""

    def __init__(
        self,
        catalog: Union[ServerCatalog, Dict[str, Any]],
        packages: Iterable[str] = (),
        source_url: str = None,
    ):
        if not isinstance(catalog, ServerCatalog):
            catalog = CatalogParser(catalog, source_url).parse()

        self.catalog = catalog
        self.packages = list(packages)

    def generate(self) -> Project:
        """Генерация проекта клиента. Каждый вызов начинается с пустого реестра"""
        return ClientGenerator(self.catalog, self.packages).generate()


def generate_client(
    catalog: Union[ServerCatalog, Dict[str, Any]], packages: Iterable[str] = ()
) -> Project:
    """Создание TypeScript клиента из каталога операций"""
    generator = ApiClientGenerator(catalog, packages)
    return generator.generate()
