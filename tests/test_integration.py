"""
Интеграционные тесты для генератора
"""

import json

import pytest

from axios_client.cli import run
from axios_client.config import AxiosClientConfig
from axios_client.internal.exc import ConfigurationError, ResolutionError

from conftest import PACKAGES


@pytest.fixture
def catalog_file(tmp_path, catalog_dict):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_dict))
    return path


class TestIntegration:
    """Интеграционные тесты"""

    def test_complete_generation_workflow(self, tmp_path, catalog_file):
        """Тест полного процесса генерации: каталог -> файлы на диске"""
        target = tmp_path / "frontend" / "api"
        config = AxiosClientConfig(
            url=str(catalog_file), dirname=str(target), packages=PACKAGES
        )

        project = run(config, use_git=False)

        assert sorted(p.name for p in target.iterdir()) == [
            "Page.ts",
            "Role.ts",
            "User.ts",
            "api.ts",
        ]
        for code_file in project.files:
            assert (target / code_file.file_name).read_text() == str(code_file)

        api = (target / "api.ts").read_text()
        assert "export const getUser = (id: number, active: string): Promise<User>" in api
        assert "export const setBaseUrl" in api
        assert "password" not in (target / "User.ts").read_text()

    def test_regeneration_overwrites_files(self, tmp_path, catalog_file):
        target = tmp_path / "ts"
        target.mkdir()
        (target / "api.ts").write_text("stale")

        run(AxiosClientConfig(url=str(catalog_file), dirname=str(target), packages=PACKAGES), use_git=False)

        assert (target / "api.ts").read_text().startswith("import axios from 'axios';")

    def test_nothing_written_on_resolution_error(self, tmp_path, catalog_dict):
        catalog_dict["operations"]["UserController#getUser"]["url"] = "/users/{userId}"
        catalog_file = tmp_path / "catalog.json"
        catalog_file.write_text(json.dumps(catalog_dict))
        target = tmp_path / "ts"

        with pytest.raises(ResolutionError):
            run(AxiosClientConfig(url=str(catalog_file), dirname=str(target), packages=PACKAGES), use_git=False)

        assert not target.exists()

    def test_invalid_config(self, tmp_path):
        with pytest.raises(ConfigurationError):
            run(AxiosClientConfig(dirname=str(tmp_path)), use_git=False)
