import logging
import os

from ..exc import PersistenceError
from ..types.models import Project

logger = logging.getLogger(__name__)


def save_project_files(project: Project, target_path: str):
    """Сохранение файлов проекта. Любая ошибка записи прерывает генерацию"""
    logger.info("Saving %d files to %s", len(project.files), target_path)

    for code_model in project.files:
        path = os.path.join(target_path, code_model.file_name)
        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(str(code_model))
        except OSError as e:
            raise PersistenceError(str(e), path) from e

    return [os.path.join(target_path, f.file_name) for f in project.files]
