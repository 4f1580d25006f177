"""Исключения генератора"""

from typing import Optional


class GeneratorError(Exception):
    """Базовая ошибка генерации"""


class ResolutionError(GeneratorError):
    """Плейсхолдер пути не связан ни с одним параметром операции"""

    def __init__(self, placeholder: str, function_name: Optional[str] = None):
        self.placeholder = placeholder
        self.function_name = function_name
        super().__init__(
            f"{function_name or '<anonymous>'}: path variable "
            f"'{{{placeholder}}}' has no bound parameter"
        )


class PersistenceError(GeneratorError):
    def __init__(self, message, path):
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}")


class ConfigurationError(GeneratorError):
    """Некорректная конфигурация (директория вывода, каталог, файл настроек)"""


class GitSyncError(GeneratorError):
    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
