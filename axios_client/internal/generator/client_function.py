from typing import List, Optional, Sequence

from ..exc import ResolutionError
from ..types.descriptors import ParameterDescriptor, ParameterSource, TypeDescriptor
from ..types.models import Argument, ClientFunction, UrlTemplate
from .templates import templates
from .type_mapper import TypeMapper


class ClientFunctionGenerator:
    """Генерация axios функции для одной операции сервера"""

    def __init__(self, mapper: TypeMapper):
        self.mapper = mapper

    def generate(
        self,
        method: Optional[str],
        url_template: str,
        function_name: str,
        parameters: Sequence[ParameterDescriptor],
        return_type: TypeDescriptor,
    ) -> str:
        return str(
            self.build(method, url_template, function_name, parameters, return_type)
        )

    def build(
        self,
        method: Optional[str],
        url_template: str,
        function_name: str,
        parameters: Sequence[ParameterDescriptor],
        return_type: TypeDescriptor,
    ) -> ClientFunction:
        """Сборка функции в виде структуры; текст получается через str()

        Порядок аргументов: path, pageable, query, body.

        Raises:
            ResolutionError: плейсхолдер пути без связанного параметра
        """
        url = UrlTemplate(path=url_template)
        arguments: List[Argument] = []

        for placeholder in dict.fromkeys(url.placeholders()):
            parameter = self._find_path_parameter(placeholder, parameters)
            if parameter is None:
                raise ResolutionError(placeholder, function_name)

            arguments.append(
                Argument(
                    name=placeholder,
                    var_type=self.mapper.map(parameter.type).expression,
                    source=ParameterSource.PATH,
                )
            )

        body = None
        body_parameter = next(
            (p for p in parameters if p.source == ParameterSource.BODY), None
        )
        if body_parameter is not None:
            body = Argument(
                name=body_parameter.name,
                var_type=self.mapper.map(body_parameter.type).expression,
                source=ParameterSource.BODY,
            )

        if any(p.source == ParameterSource.PAGED for p in parameters):
            arguments.append(
                Argument(
                    name=templates.pageable_name,
                    var_type=templates.pageable_type,
                    source=ParameterSource.PAGED,
                )
            )
            for key, placeholder in templates.pageable_query:
                url.add_query(key, placeholder)

        for parameter in parameters:
            if parameter.source != ParameterSource.QUERY:
                continue

            key = self.query_key(parameter)
            # query значения передаются строкой, объявленный тип не используется
            arguments.append(
                Argument(name=key, var_type="string", source=ParameterSource.QUERY)
            )
            url.add_query(key)

        if body is not None:
            arguments.append(body)

        return ClientFunction(
            name=function_name,
            method=method,
            url=url,
            arguments=arguments,
            body=body.name if body else None,
            response=self.mapper.map(return_type).expression,
        )

    @staticmethod
    def query_key(parameter: ParameterDescriptor) -> str:
        return parameter.binding_value or parameter.binding_name or parameter.name

    @staticmethod
    def _find_path_parameter(
        placeholder: str, parameters: Sequence[ParameterDescriptor]
    ) -> Optional[ParameterDescriptor]:
        for parameter in parameters:
            if parameter.source != ParameterSource.PATH:
                continue

            if placeholder in (
                parameter.name,
                parameter.binding_value,
                parameter.binding_name,
            ):
                return parameter

        return None
