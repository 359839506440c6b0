"""Remote data gateway for projects and users.

Every operation builds its validated variables, attaches the credential for
that single request and performs one round trip. Credentials are never
stored on the shared HTTP client, so concurrent calls made with different
tokens cannot leak headers into each other.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from ..clients import server
from ..clients.auth import ApiKeyCredentials, BearerCredentials, Credentials
from ..clients.graphql import execute_graphql_query
from ..config import GatewayConfig
from ..exceptions import ImageUploadError
from ..models import (
    CreateProjectVariables,
    CreateUserVariables,
    DeleteProjectVariables,
    OperationVariables,
    ProjectForm,
    ProjectIdVariables,
    ProjectsQueryVariables,
    UpdateProjectVariables,
    UserEmailVariables,
    UserProjectsVariables,
)

logger = logging.getLogger(__name__)

FormInput = Union[ProjectForm, Mapping[str, Any]]


class RemoteDataGateway:
    """Async gateway to the project showcase GraphQL API and app server."""

    def __init__(
        self,
        config: GatewayConfig,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            config: Configuration assembled at process start
            client: Optional pre-built HTTP client; the gateway only closes
                clients it created itself
        """
        self.config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(config.timeout, connect=10.0))

    async def aclose(self) -> None:
        """Close the underlying HTTP client if the gateway created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> RemoteDataGateway:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Credentials and transport
    # ------------------------------------------------------------------

    def _api_key(self) -> ApiKeyCredentials:
        return ApiKeyCredentials(api_key=self.config.api_key)

    async def _execute(self, variables: OperationVariables, credentials: Credentials) -> Dict[str, Any]:
        logger.debug("Executing %s with %s credentials", variables.operation_name, credentials.kind)
        return await execute_graphql_query(
            self._client,
            self.config.graphql_url,
            query=variables.document,
            variables=variables.to_variables(),
            credentials=credentials,
        )

    async def upload_image(self, image_path: Optional[str]) -> Any:
        """Send an image (data URL or path) to the upload endpoint."""
        return await server.upload_image(self._client, self.config.server_url, image_path)

    async def fetch_token(self) -> Any:
        """Fetch the current session token from the app server."""
        return await server.fetch_token(self._client, self.config.server_url)

    async def _upload_or_raise(self, image: Optional[str]) -> str:
        result = await self.upload_image(image)
        image_url = result.get("url") if isinstance(result, Mapping) else None
        if not image_url:
            raise ImageUploadError(response=result)
        return image_url

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def fetch_all_projects(
        self,
        category: Optional[str] = None,
        endcursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Return one page of projects, optionally filtered by category."""
        try:
            variables = ProjectsQueryVariables.build(category=category or "", endcursor=endcursor)
            return await self._execute(variables, self._api_key())
        except Exception as e:
            logger.error("Error fetching projects: %s", e)
            raise

    async def create_new_project(self, form: FormInput, creator_id: str, token: str) -> Dict[str, Any]:
        """Upload the form's image, then create the project linked to its creator.

        The whole payload is validated before the image is uploaded.

        Raises:
            ImageUploadError: If the upload response carries no ``url``;
                no mutation is sent in that case
        """
        try:
            project_form = ProjectForm.coerce(form)
            credentials = BearerCredentials.from_token(token)

            project_input = project_form.to_input()
            project_input["createdBy"] = {"link": creator_id}
            variables = CreateProjectVariables.build(input=project_input)

            image_url = await self._upload_or_raise(project_form.image)
            variables = variables.model_copy(update={"input": variables.input.with_image(image_url)})

            return await self._execute(variables, credentials)
        except Exception as e:
            logger.error("Error creating a new project: %s", e)
            raise

    async def update_project(self, form: FormInput, project_id: str, token: str) -> Dict[str, Any]:
        """Update a project, uploading the image first when it is an inline data URL.

        A hosted image URL is passed through untouched and nothing is uploaded.
        """
        try:
            project_form = ProjectForm.coerce(form)
            credentials = BearerCredentials.from_token(token)

            variables = UpdateProjectVariables.build(id=project_id, input=project_form)

            if project_form.has_inline_image:
                image_url = await self._upload_or_raise(project_form.image)
                variables = variables.model_copy(update={"input": project_form.with_image(image_url)})

            return await self._execute(variables, credentials)
        except Exception as e:
            logger.error("Error updating project %s: %s", project_id, e)
            raise

    async def delete_project(self, project_id: str, token: str) -> Dict[str, Any]:
        try:
            credentials = BearerCredentials.from_token(token)
            return await self._execute(DeleteProjectVariables.build(id=project_id), credentials)
        except Exception as e:
            logger.error("Error deleting project %s: %s", project_id, e)
            raise

    async def get_project_details(self, project_id: str) -> Dict[str, Any]:
        try:
            return await self._execute(ProjectIdVariables.build(id=project_id), self._api_key())
        except Exception as e:
            logger.error("Error fetching project %s: %s", project_id, e)
            raise

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def create_user(self, name: str, email: str, avatar_url: str) -> Dict[str, Any]:
        try:
            variables = CreateUserVariables.build(input={"name": name, "email": email, "avatarUrl": avatar_url})
            return await self._execute(variables, self._api_key())
        except Exception as e:
            logger.error("Error creating user: %s", e)
            raise

    async def get_user_projects(self, user_id: str, last: Optional[int] = None) -> Dict[str, Any]:
        """Return a user with their most recent projects (server default when ``last`` is None)."""
        try:
            variables = UserProjectsVariables.build(id=user_id, last=last)
            return await self._execute(variables, self._api_key())
        except Exception as e:
            logger.error("Error fetching projects of user %s: %s", user_id, e)
            raise

    async def get_user(self, email: str) -> Dict[str, Any]:
        try:
            return await self._execute(UserEmailVariables.build(email=email), self._api_key())
        except Exception as e:
            logger.error("Error fetching user: %s", e)
            raise
