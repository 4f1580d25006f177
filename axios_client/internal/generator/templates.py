class Templates:
    """Шаблоны для генерации файлов"""

    api_file_name = "api.ts"

    header = "import axios from 'axios';"

    pageable_name = "pageable"

    pageable_type = "{ page: number, size: number, sort: string }"

    pageable_query = (
        ("page", "pageable.page"),
        ("size", "pageable.size"),
        ("sort", "pageable.sort"),
    )

    default_functions = (
        "export const setDefaultHeader = (header: string, value: string) => axios.defaults.headers.common[header] = value;",
        "export const setBaseUrl = (url: string) => axios.defaults.baseURL = url;",
    )

    commit_message = "Updated typescript interfaces"

    @staticmethod
    def declaration_file_name(name: str) -> str:
        return f"{name}.ts"

    @staticmethod
    def type_import(name: str) -> str:
        """import внутри файла интерфейса"""
        return f"import type {{{name}}} from './{name}';"

    @staticmethod
    def api_import(name: str) -> str:
        """import в api.ts"""
        return f"import type {{ {name} }} from './{name}';"


templates = Templates()
