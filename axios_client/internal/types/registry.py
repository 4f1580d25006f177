from typing import Iterable, List, Optional


class EmittedRegistry:
    """Реестр уже сгенерированных интерфейсов и enum'ов за один запуск"""

    def __init__(self):
        self._names = {}

    def register(self, name: str, qualified_name: Optional[str] = None) -> bool:
        """Регистрация имени. False если имя уже занято"""
        if name in self._names:
            return False

        self._names[name] = qualified_name or name
        return True

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def origin_of(self, name: str) -> Optional[str]:
        """Полное имя типа, под которым было зарегистрировано простое имя"""
        return self._names.get(name)

    @property
    def names(self) -> List[str]:
        return sorted(self._names)


class ScanFilter:
    """Фильтр пакетов: тип генерируется только если его namespace начинается с префикса"""

    def __init__(self, packages: Iterable[str] = ()):
        self.packages = [p for p in packages if p]

    def should_scan(self, namespace: Optional[str]) -> bool:
        if not namespace:
            return False

        return any(namespace.startswith(prefix) for prefix in self.packages)

    def __repr__(self) -> str:
        return f"ScanFilter({self.packages!r})"
