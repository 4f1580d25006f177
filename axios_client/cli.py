import argparse
import logging
import os
import sys
from typing import Optional

from axios_client.config import AxiosClientConfig, CONFIG_FILE_NAME
from axios_client.generator import ApiClientGenerator
from axios_client.internal.exc import GeneratorError
from axios_client.internal.output.writer import save_project_files
from axios_client.internal.parser.catalog import load_catalog
from axios_client.internal.sync.git import GitSynchronizer
from axios_client.internal.types.models import Project


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Генерация TypeScript клиента на axios из каталога операций сервера"
    )
    parser.add_argument("--url", type=str, help="URL или путь к catalog.json")
    parser.add_argument("--dirname", type=str, help="Директория для генерации клиента")
    parser.add_argument(
        "--package",
        action="append",
        help="Префикс пакета серверных типов для генерации (можно несколько)",
    )
    parser.add_argument("--git-url", type=str, help="Git репозиторий для клиента")
    parser.add_argument("--git-username", type=str, help="Пользователь git")
    parser.add_argument("--git-token", type=str, help="Токен git")
    parser.add_argument(
        "--no-git", action="store_true", help="Не синхронизировать с git"
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help=f"Создать конфиг файл {CONFIG_FILE_NAME}",
    )
    parser.add_argument("--verbose", action="store_true", help="Подробный лог")
    return parser


def _resolve_config(args) -> AxiosClientConfig:
    """Конфиг из файла, дополненный аргументами командной строки"""
    file_config = AxiosClientConfig.from_file(search_dir=args.dirname)

    if file_config:
        print(f"📋 Используется конфиг {CONFIG_FILE_NAME}")
        return file_config.merge_with_args(args)

    return AxiosClientConfig(dirname="ts").merge_with_args(args)


def _generate_client_core(config: AxiosClientConfig) -> Project:
    """Ядро генерации клиента - только генерация без сохранения"""
    print(f"🚀 Генерация клиента из {config.url}")

    print("📥 Загрузка каталога операций...")
    catalog = load_catalog(config.url)

    print("⚙️ Генерация кода...")
    generator = ApiClientGenerator(catalog, packages=config.packages)
    return generator.generate()


def run(config: AxiosClientConfig, use_git: bool = True) -> Project:
    config.validate()

    synchronizer: Optional[GitSynchronizer] = None
    if use_git and config.git_enabled:
        synchronizer = GitSynchronizer(
            config.dirname, config.git_url, config.git_username, config.git_token
        )
        synchronizer.prepare()

    project = _generate_client_core(config)

    print(f"💾 Сохранение {len(project.files)} файлов...")
    save_project_files(project, config.dirname)
    print("✅ Генерация завершена успешно!")
    print(f"📦 Клиент создан в: {os.path.abspath(config.dirname)}")

    if synchronizer is not None:
        if synchronizer.sync(config.commit_message):
            print("🔄 Изменения отправлены в git")
        else:
            print("⚠️ Не удалось синхронизировать с git, подробности в логе")

    return project


def generate():
    """Команда генерации TypeScript клиента"""
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.init_config:
        config = AxiosClientConfig(
            url=args.url,
            dirname=args.dirname or "ts",
            packages=args.package or [],
            git_url=args.git_url,
            git_username=args.git_username,
        )
        config.save_to_file()
        print(f"✅ Создан конфиг файл {CONFIG_FILE_NAME}")
        return

    try:
        config = _resolve_config(args)
        run(config, use_git=not args.no_git)
    except GeneratorError as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)


if __name__ == "__main__":
    generate()
