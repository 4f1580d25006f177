import json
import logging
import os
from typing import Any, Dict

import httpx
import jsonref
from pydantic import ValidationError

from ..exc import ConfigurationError
from ..types.descriptors import ServerCatalog

logger = logging.getLogger(__name__)

CATALOG_FILE_NAME = "catalog.json"


class CatalogParser:
    """Парсер каталога операций сервера"""

    def __init__(self, catalog_dict: Dict[str, Any], source_url: str = None):
        self.catalog_dict = catalog_dict
        self.source_url = source_url

    def parse(self) -> ServerCatalog:
        """Разрешение $ref и валидация каталога в ServerCatalog"""
        try:
            resolved = jsonref.replace_refs(self.catalog_dict, proxies=False)
        except jsonref.JsonRefError as e:
            raise ConfigurationError(
                f"Unresolved reference in catalog {self.source_url or ''}: {e}"
            ) from e

        try:
            return ServerCatalog.model_validate(resolved)
        except ValidationError as e:
            raise ConfigurationError(
                f"Malformed catalog {self.source_url or ''}: {e}"
            ) from e


def load_catalog_dict(url: str) -> Dict[str, Any]:
    """Загрузка каталога по URL или из локального файла"""
    if url.startswith(("http://", "https://")):
        if not url.endswith(".json"):
            url = url + ("" if url.endswith("/") else "/") + CATALOG_FILE_NAME

        logger.info("Fetching catalog from %s", url)
        try:
            response = httpx.get(url=url)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Unable to fetch catalog from {url}: {e}") from e

    if os.path.exists(url):
        logger.info("Reading catalog from %s", url)
        try:
            with open(url, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Unable to read catalog {url}: {e}") from e

    raise ConfigurationError(
        f"Unable to load catalog from {url}. Check the URL or the file path."
    )


def load_catalog(url: str) -> ServerCatalog:
    return CatalogParser(load_catalog_dict(url), source_url=url).parse()
