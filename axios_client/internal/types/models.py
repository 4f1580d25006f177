import re
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, field_validator

from .descriptors import ParameterSource, TypeDescriptor, TypeKind

ANY = "any"

PLACEHOLDER_PATTERN = re.compile(r"\{(.*?)}")


class TypeExpression(BaseModel):
    value: List[Union["TypeExpression", str]] = []
    wrap_name: Optional[str] = None

    @field_validator("value", mode="before")
    def value_check(cls, value):
        _value = value

        if not isinstance(value, (list, tuple)):
            _value = [value]

        return list(_value)

    def __str__(self):
        _value = ", ".join([_.__str__() for _ in self.value])

        if self.wrap_name is None:
            return _value

        return self.__wrap(_value, self.wrap_name)

    @classmethod
    def __wrap(cls, value: str, wrap_name: str):
        return f"{wrap_name}<{value}>" if value else ANY


TypeExpression.model_rebuild()


class TargetType(BaseModel):
    """Результат маппинга серверного типа в TypeScript"""

    expression: TypeExpression
    # Типы, участвующие в выражении (источник import'ов)
    contributing: List[TypeDescriptor] = []
    # Типы, которые нужно сгенерировать, чтобы выражение разрешилось
    discovered: List[TypeDescriptor] = []

    @property
    def ts_type(self) -> str:
        return str(self.expression)

    def __str__(self):
        return self.ts_type

    def import_names(self, exclude: Optional[str] = None) -> List[str]:
        """Имена composite/enum типов для import, без повторов"""
        names = []
        for descriptor in self.contributing:
            if descriptor.kind not in (TypeKind.COMPOSITE, TypeKind.ENUM):
                continue
            if descriptor.name == exclude or descriptor.name in names:
                continue
            names.append(descriptor.name)

        return names


class Argument(BaseModel):
    name: str
    var_type: Optional[Union[TypeExpression, str]] = None
    source: ParameterSource = ParameterSource.NONE

    def __str__(self):
        return self.name + (f": {self.var_type}" if self.var_type else "")


class UrlTemplate(BaseModel):
    """URL операции: путь с {плейсхолдерами} и query-компоненты"""

    path: str
    query: List[Tuple[str, str]] = []

    def placeholders(self) -> List[str]:
        return PLACEHOLDER_PATTERN.findall(self.path)

    def add_query(self, key: str, placeholder: Optional[str] = None) -> "UrlTemplate":
        self.query.append((key, placeholder or key))
        return self

    def render(self) -> str:
        url = self.path
        for key, placeholder in self.query:
            url += ("&" if "?" in url else "?") + f"{key}={{{placeholder}}}"

        return url

    def interpolated(self) -> str:
        """URL для template literal: {name} -> ${name}"""
        return PLACEHOLDER_PATTERN.sub(r"${\1}", self.render())


class ClientFunction(BaseModel):
    name: str
    method: str = "GET"
    url: UrlTemplate
    arguments: List[Argument] = []
    body: Optional[str] = None
    response: Union[TypeExpression, str] = ANY

    @field_validator("method", mode="before")
    def method_check(cls, value):
        return value or "GET"

    def __str__(self) -> str:
        return (
            f"export const {self.name} = ("
            + ", ".join(map(str, self.arguments))
            + f"): Promise<{self.response}> => "
            + f"axios.{self.method.lower()}(`{self.url.interpolated()}`"
            + (f", {self.body}" if self.body else "")
            + ").then(response => response.data).catch(error => { throw error });"
        )


class Interface(BaseModel):
    name: str
    type_parameters: List[str] = []
    members: List[Argument] = []

    @property
    def signature(self) -> str:
        if self.type_parameters:
            return f"{self.name}<{', '.join(self.type_parameters)}>"
        return self.name

    def __str__(self) -> str:
        return (
            f"export interface {self.signature} {{\n"
            + "".join(f"\t{member};\n" for member in self.members)
            + "}"
        )


class Enumeration(BaseModel):
    name: str
    constants: List[str] = []

    def __str__(self) -> str:
        return (
            f"export enum {self.name} {{\n"
            + "".join(f'\t{constant} = "{constant}",\n' for constant in self.constants)
            + "}"
        )


class CodeBlock(BaseModel):
    code: str = ""

    def __str__(self):
        return self.code.replace("\t", "    ")


class CodeFile(BaseModel):
    file_name: str

    imports: List[str] = []
    declarations: List[Union[Interface, Enumeration]] = []
    functions: List[ClientFunction] = []
    code_blocks: List[CodeBlock] = []

    def __str__(self):
        return (
            "\n\n".join(
                filter(
                    bool,
                    [
                        "\n".join(self.imports),
                        "\n\n".join(map(str, self.declarations)),
                        "\n".join(map(str, self.functions)),
                        "\n".join(map(str, self.code_blocks)),
                    ],
                )
            ).replace("\t", "    ")
            + "\n"
        )

    def add_import(self, statement: str) -> "CodeFile":
        if statement not in self.imports:
            self.imports.append(statement)
        return self

    def add_declaration(
        self, declaration: Union[Interface, Enumeration]
    ) -> Union[Interface, Enumeration]:
        self.declarations.append(declaration)
        return declaration

    def add_function(self, function: ClientFunction) -> ClientFunction:
        self.functions.append(function)
        return function

    def add_code_block(self, code_block: Union[CodeBlock, str]) -> "CodeFile":
        if isinstance(code_block, str):
            code_block = CodeBlock(code=code_block)

        self.code_blocks.append(code_block)
        return self


class Project(BaseModel):
    name: str
    files: List[CodeFile] = []

    def add_file(self, file_name: Union[CodeFile, str], **kwargs) -> CodeFile:
        code_file = file_name
        if isinstance(file_name, str):
            code_file = CodeFile(file_name=file_name, **kwargs)

        self.files.append(code_file)
        return code_file

    def get_file(self, file_name: str) -> Optional[CodeFile]:
        for code_file in self.files:
            if code_file.file_name == file_name:
                return code_file
        return None

    @property
    def file_names(self) -> List[str]:
        return [f.file_name for f in self.files]
