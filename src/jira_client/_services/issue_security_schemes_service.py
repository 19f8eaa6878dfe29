from typing import Any, Dict, List, Optional, Unpack

from .._config import Config
from .._utils import Endpoint, RequestSpec, expect_json, expect_no_content
from .._utils.constants import PLATFORM_API
from ..models import (
    PageBean,
    SecurityLevel,
    SecurityScheme,
    SecuritySchemeId,
    SecuritySchemes,
    SecuritySchemeWithProjects,
)
from ..models.results import JiraResult
from ._base_service import BaseService, RequestOptions

_SCHEMES = f"{PLATFORM_API}/issuesecurityschemes"


class IssueSecuritySchemesService(BaseService):
    """Service for issue security schemes and their levels.

    All operations need the *Administer Jira* global permission.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def create_issue_security_scheme(
        self,
        name: str,
        *,
        description: Optional[str] = None,
        levels: Optional[List[Dict[str, Any]]] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[SecuritySchemeId]:
        """Create an issue security scheme.

        Args:
            name (str): The name of the scheme. Must be unique.
            description (Optional[str]): The description of the scheme.
            levels (Optional[List[Dict[str, Any]]]): Levels to create with the
                scheme, each a mapping with ``name``, ``description``,
                ``isDefault`` and ``members``.

        Returns:
            JiraResult[SecuritySchemeId]: The ID of the created scheme.

        Examples:
            ```python
            from jira_client import JiraClient

            client = JiraClient()

            result = client.issue_security_schemes.create_issue_security_scheme(
                "New security scheme",
                levels=[
                    {
                        "name": "New level",
                        "isDefault": True,
                        "members": [{"type": "group", "parameter": "administrators"}],
                    }
                ],
            )
            ```
        """
        spec = self._create_issue_security_scheme_spec(
            name, description=description, levels=levels
        )
        return self.execute(spec, **options)

    async def create_issue_security_scheme_async(
        self,
        name: str,
        *,
        description: Optional[str] = None,
        levels: Optional[List[Dict[str, Any]]] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[SecuritySchemeId]:
        spec = self._create_issue_security_scheme_spec(
            name, description=description, levels=levels
        )
        return await self.execute_async(spec, **options)

    def get_issue_security_scheme(
        self, id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[SecurityScheme]:
        """Retrieve an issue security scheme with its levels."""
        return self.execute(self._get_issue_security_scheme_spec(id), **options)

    async def get_issue_security_scheme_async(
        self, id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[SecurityScheme]:
        return await self.execute_async(
            self._get_issue_security_scheme_spec(id), **options
        )

    def get_issue_security_schemes(
        self, **options: Unpack[RequestOptions]
    ) -> JiraResult[SecuritySchemes]:
        return self.execute(self._get_issue_security_schemes_spec(), **options)

    async def get_issue_security_schemes_async(
        self, **options: Unpack[RequestOptions]
    ) -> JiraResult[SecuritySchemes]:
        return await self.execute_async(
            self._get_issue_security_schemes_spec(), **options
        )

    def search_security_schemes(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        ids: Optional[List[str]] = None,
        project_ids: Optional[List[str]] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[SecuritySchemeWithProjects]]:
        """Return a page of issue security schemes with the projects using them.

        Args:
            start_at (Optional[int]): Index of the first item to return.
            max_results (Optional[int]): Maximum number of items per page.
            ids (Optional[List[str]]): Only return these schemes.
            project_ids (Optional[List[str]]): Only return schemes used by
                these projects.
        """
        spec = self._search_security_schemes_spec(
            start_at=start_at,
            max_results=max_results,
            ids=ids,
            project_ids=project_ids,
        )
        return self.execute(spec, **options)

    async def search_security_schemes_async(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        ids: Optional[List[str]] = None,
        project_ids: Optional[List[str]] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[SecuritySchemeWithProjects]]:
        spec = self._search_security_schemes_spec(
            start_at=start_at,
            max_results=max_results,
            ids=ids,
            project_ids=project_ids,
        )
        return await self.execute_async(spec, **options)

    def get_security_levels(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        ids: Optional[List[str]] = None,
        scheme_ids: Optional[List[str]] = None,
        only_default: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[SecurityLevel]]:
        """Return a page of security levels, optionally filtered by scheme."""
        spec = self._get_security_levels_spec(
            start_at=start_at,
            max_results=max_results,
            ids=ids,
            scheme_ids=scheme_ids,
            only_default=only_default,
        )
        return self.execute(spec, **options)

    async def get_security_levels_async(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        ids: Optional[List[str]] = None,
        scheme_ids: Optional[List[str]] = None,
        only_default: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[SecurityLevel]]:
        spec = self._get_security_levels_spec(
            start_at=start_at,
            max_results=max_results,
            ids=ids,
            scheme_ids=scheme_ids,
            only_default=only_default,
        )
        return await self.execute_async(spec, **options)

    def add_security_level(
        self,
        scheme_id: str,
        levels: List[Dict[str, Any]],
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Add levels to an issue security scheme.

        Args:
            scheme_id (str): The ID of the scheme.
            levels (List[Dict[str, Any]]): The levels to add.
        """
        spec = self._add_security_level_spec(scheme_id, levels)
        return self.execute(spec, **options)

    async def add_security_level_async(
        self,
        scheme_id: str,
        levels: List[Dict[str, Any]],
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._add_security_level_spec(scheme_id, levels)
        return await self.execute_async(spec, **options)

    def update_security_level(
        self,
        scheme_id: str,
        level_id: str,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Rename or redescribe a security level."""
        spec = self._update_security_level_spec(
            scheme_id, level_id, name=name, description=description
        )
        return self.execute(spec, **options)

    async def update_security_level_async(
        self,
        scheme_id: str,
        level_id: str,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._update_security_level_spec(
            scheme_id, level_id, name=name, description=description
        )
        return await self.execute_async(spec, **options)

    def remove_level(
        self,
        scheme_id: str,
        level_id: str,
        *,
        replace_with: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Remove a security level from a scheme.

        Runs as an asynchronous task in Jira; ``result.location`` points at it.

        Args:
            scheme_id (str): The ID of the scheme.
            level_id (str): The ID of the level to remove.
            replace_with (Optional[str]): The level that replaces it on issues.
        """
        spec = self._remove_level_spec(scheme_id, level_id, replace_with=replace_with)
        return self.execute(spec, **options)

    async def remove_level_async(
        self,
        scheme_id: str,
        level_id: str,
        *,
        replace_with: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._remove_level_spec(scheme_id, level_id, replace_with=replace_with)
        return await self.execute_async(spec, **options)

    def delete_security_scheme(
        self, scheme_id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        """Delete an issue security scheme that no project uses."""
        return self.execute(self._delete_security_scheme_spec(scheme_id), **options)

    async def delete_security_scheme_async(
        self, scheme_id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return await self.execute_async(
            self._delete_security_scheme_spec(scheme_id), **options
        )

    def _create_issue_security_scheme_spec(
        self,
        name: str,
        *,
        description: Optional[str],
        levels: Optional[List[Dict[str, Any]]],
    ) -> RequestSpec:
        body: Dict[str, Any] = {"name": name}
        if description is not None:
            body["description"] = description
        if levels is not None:
            body["levels"] = levels
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(_SCHEMES),
            json=body,
            expectations=expect_json(SecuritySchemeId),
        )

    def _get_issue_security_scheme_spec(self, id: str) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_SCHEMES}/{{id}}"),
            path_params={"id": id},
            expectations=expect_json(SecurityScheme, statuses=(200,)),
        )

    def _get_issue_security_schemes_spec(self) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(_SCHEMES),
            expectations=expect_json(SecuritySchemes, statuses=(200,)),
        )

    def _search_security_schemes_spec(
        self,
        *,
        start_at: Optional[int],
        max_results: Optional[int],
        ids: Optional[List[str]],
        project_ids: Optional[List[str]],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_SCHEMES}/search"),
            params={
                "startAt": start_at,
                "maxResults": max_results,
                "id": ids,
                "projectId": project_ids,
            },
            expectations=expect_json(
                PageBean[SecuritySchemeWithProjects], statuses=(200,)
            ),
        )

    def _get_security_levels_spec(
        self,
        *,
        start_at: Optional[int],
        max_results: Optional[int],
        ids: Optional[List[str]],
        scheme_ids: Optional[List[str]],
        only_default: Optional[bool],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_SCHEMES}/level"),
            params={
                "startAt": start_at,
                "maxResults": max_results,
                "id": ids,
                "schemeId": scheme_ids,
                "onlyDefault": only_default,
            },
            expectations=expect_json(PageBean[SecurityLevel], statuses=(200,)),
        )

    def _add_security_level_spec(
        self, scheme_id: str, levels: List[Dict[str, Any]]
    ) -> RequestSpec:
        return RequestSpec(
            method="PUT",
            endpoint=Endpoint(f"{_SCHEMES}/{{schemeId}}/level"),
            path_params={"schemeId": scheme_id},
            json={"levels": levels},
            expectations=expect_no_content(),
        )

    def _update_security_level_spec(
        self,
        scheme_id: str,
        level_id: str,
        *,
        name: Optional[str],
        description: Optional[str],
    ) -> RequestSpec:
        body: Dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if description is not None:
            body["description"] = description
        return RequestSpec(
            method="PUT",
            endpoint=Endpoint(f"{_SCHEMES}/{{schemeId}}/level/{{levelId}}"),
            path_params={"schemeId": scheme_id, "levelId": level_id},
            json=body,
            expectations=expect_no_content(),
        )

    def _remove_level_spec(
        self, scheme_id: str, level_id: str, *, replace_with: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint(f"{_SCHEMES}/{{schemeId}}/level/{{levelId}}"),
            path_params={"schemeId": scheme_id, "levelId": level_id},
            params={"replaceWith": replace_with},
            expectations=expect_no_content(statuses=(204, 303)),
        )

    def _delete_security_scheme_spec(self, scheme_id: str) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint(f"{_SCHEMES}/{{schemeId}}"),
            path_params={"schemeId": scheme_id},
            expectations=expect_no_content(statuses=(204, 303)),
        )
