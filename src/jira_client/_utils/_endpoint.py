import re
from typing import Any, List, Mapping, Optional
from urllib.parse import quote

from ..models.errors import MissingPathParameterError
from ._query import stringify

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


class Endpoint(str):
    """A path template relative to the Jira site.

    Placeholders use braces, e.g. ``/rest/api/3/resolution/{id}``.

    Examples:
        ```python
        Endpoint("/rest/agile/1.0/sprint/{sprintId}").resolve({"sprintId": 37})
        # '/rest/agile/1.0/sprint/37'
        ```
    """

    def __new__(cls, value: str) -> "Endpoint":
        if not value.startswith("/"):
            value = f"/{value}"
        return super().__new__(cls, value)

    @property
    def placeholders(self) -> List[str]:
        return _PLACEHOLDER.findall(self)

    def resolve(self, path_params: Optional[Mapping[str, Any]] = None) -> str:
        return resolve_path(self, path_params)


def resolve_path(template: str, path_params: Optional[Mapping[str, Any]]) -> str:
    """Substitute every ``{name}`` in ``template`` with its encoded value.

    Raises:
        MissingPathParameterError: A placeholder has no value (or ``None``).
    """
    params = path_params or {}

    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        value = params.get(name)
        if value is None:
            raise MissingPathParameterError(name, template)
        return quote(stringify(value), safe="")

    return _PLACEHOLDER.sub(substitute, template)
