"""
Конфигурация для генерации TypeScript клиента
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import toml

from .internal.exc import ConfigurationError
from .internal.generator.templates import templates

CONFIG_FILE_NAME = "axios_client.toml"


@dataclass
class AxiosClientConfig:
    """Конфигурация генератора TypeScript клиента"""

    url: Optional[str] = None
    dirname: Optional[str] = None
    packages: List[str] = field(default_factory=list)

    git_url: Optional[str] = None
    git_username: Optional[str] = None
    git_token: Optional[str] = None
    commit_message: str = templates.commit_message

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE_NAME, search_dir: str = None
    ) -> Optional["AxiosClientConfig"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_FILE_NAME)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (OSError, toml.TomlDecodeError) as e:
            raise ConfigurationError(f"Unable to read {config_path}: {e}") from e

        packages = config_data.get("packages", [])
        if isinstance(packages, str):
            packages = [packages]

        return cls(
            url=config_data.get("url"),
            dirname=config_data.get("dirname", "ts"),
            packages=list(packages),
            git_url=config_data.get("git_url"),
            git_username=config_data.get("git_username"),
            git_token=config_data.get("git_token"),
            commit_message=config_data.get("commit_message", templates.commit_message),
        )

    def save_to_file(self, config_path: str = CONFIG_FILE_NAME) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            "url": self.url,
            "dirname": self.dirname,
            "packages": self.packages,
            "git_url": self.git_url,
            "git_username": self.git_username,
            "commit_message": self.commit_message,
        }
        # Токен в файл не пишем
        config_data = {k: v for k, v in config_data.items() if v is not None}

        with open(config_path, "w") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "AxiosClientConfig":
        """Объединение с аргументами командной строки"""
        return AxiosClientConfig(
            url=args.url or self.url,
            dirname=args.dirname or self.dirname,
            packages=args.package or self.packages,
            git_url=args.git_url or self.git_url,
            git_username=args.git_username or self.git_username,
            git_token=args.git_token or self.git_token,
            commit_message=self.commit_message,
        )

    @property
    def git_enabled(self) -> bool:
        return bool(self.git_url)

    def validate(self) -> None:
        """Проверка до начала генерации"""
        if not self.url:
            raise ConfigurationError("Catalog url is not set")

        if not self.dirname:
            raise ConfigurationError("Output directory is not set")

        if os.path.exists(self.dirname) and not os.path.isdir(self.dirname):
            raise ConfigurationError(f"Output path {self.dirname} is not a directory")
