"""Pydantic models for GraphQL request variables.

One model per named operation replaces a free-form variables dictionary.
Each model knows the GraphQL document it belongs to and is validated
before anything goes over the wire.
"""

from __future__ import annotations

import re
from typing import Any, ClassVar, Dict, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import PayloadValidationError
from ..graphql import operations

BASE64_IMAGE_PATTERN = re.compile(r"^data:image/[a-z]+;base64,")

VariablesT = TypeVar("VariablesT", bound="OperationVariables")


def is_base64_data_url(value: Optional[str]) -> bool:
    """True when ``value`` is an inline ``data:image/<type>;base64,`` payload."""
    if not value:
        return False
    return BASE64_IMAGE_PATTERN.match(value) is not None


def _null_category_to_empty(value: Optional[str]) -> str:
    return "" if value is None else value


# ============================================================================
# Input objects
# ============================================================================


class ProjectForm(BaseModel):
    """Project fields as entered by the user.

    Every field is optional so that partial update forms validate; only the
    fields the caller actually set are transmitted.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    live_site_url: Optional[str] = Field(default=None, alias="liveSiteUrl")
    github_url: Optional[str] = Field(default=None, alias="githubUrl")
    category: Optional[str] = None

    @field_validator("category")
    @classmethod
    def normalize_category(cls, value: Optional[str]) -> str:
        return _null_category_to_empty(value)

    @classmethod
    def coerce(cls, form: Union[ProjectForm, Mapping[str, Any]]) -> ProjectForm:
        if isinstance(form, ProjectForm):
            return form
        try:
            return cls.model_validate(dict(form))
        except ValidationError as e:
            raise PayloadValidationError(f"Invalid project form: {e}", details=e.errors()) from e

    @property
    def has_inline_image(self) -> bool:
        return is_base64_data_url(self.image)

    def with_image(self, image_url: str) -> ProjectForm:
        return self.model_copy(update={"image": image_url})

    def to_input(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class CreatorLink(BaseModel):
    """Relation link from a new project to its creator."""

    link: str = Field(min_length=1)


class UserCreateInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: str = Field(min_length=3)
    avatar_url: str = Field(alias="avatarUrl")


# ============================================================================
# Operation variables
# ============================================================================


class OperationVariables(BaseModel):
    """Base class for per-operation variables.

    Subclasses set ``document`` to the GraphQL text they are sent with and
    ``operation_name`` for logging.
    """

    model_config = ConfigDict(populate_by_name=True)

    document: ClassVar[str]
    operation_name: ClassVar[str]

    @classmethod
    def build(cls: Type[VariablesT], **data: Any) -> VariablesT:
        """Validate ``data`` into variables, raising PayloadValidationError on failure."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise PayloadValidationError(
                f"Invalid variables for {cls.operation_name}: {e}",
                details=e.errors(),
            ) from e

    def to_variables(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class ProjectsQueryVariables(OperationVariables):
    document: ClassVar[str] = operations.PROJECTS_QUERY
    operation_name: ClassVar[str] = "getProjects"

    category: Optional[str] = ""
    endcursor: Optional[str] = None

    @field_validator("category")
    @classmethod
    def normalize_category(cls, value: Optional[str]) -> str:
        return _null_category_to_empty(value)


class ProjectIdVariables(OperationVariables):
    document: ClassVar[str] = operations.GET_PROJECT_BY_ID_QUERY
    operation_name: ClassVar[str] = "GetProjectById"

    id: str = Field(min_length=1)


class DeleteProjectVariables(ProjectIdVariables):
    document: ClassVar[str] = operations.DELETE_PROJECT_MUTATION
    operation_name: ClassVar[str] = "DeleteProject"


class ProjectCreateInput(ProjectForm):
    created_by: CreatorLink = Field(alias="createdBy")


class CreateProjectVariables(OperationVariables):
    document: ClassVar[str] = operations.CREATE_PROJECT_MUTATION
    operation_name: ClassVar[str] = "CreateProject"

    input: ProjectCreateInput

    def to_variables(self) -> Dict[str, Any]:
        return {"input": self.input.to_input()}


class UpdateProjectVariables(OperationVariables):
    document: ClassVar[str] = operations.UPDATE_PROJECT_MUTATION
    operation_name: ClassVar[str] = "UpdateProject"

    id: str = Field(min_length=1)
    input: ProjectForm

    def to_variables(self) -> Dict[str, Any]:
        return {"id": self.id, "input": self.input.to_input()}


class CreateUserVariables(OperationVariables):
    document: ClassVar[str] = operations.CREATE_USER_MUTATION
    operation_name: ClassVar[str] = "CreateUser"

    input: UserCreateInput


class UserProjectsVariables(OperationVariables):
    document: ClassVar[str] = operations.GET_PROJECTS_OF_USER_QUERY
    operation_name: ClassVar[str] = "getUserProjects"

    id: str = Field(min_length=1)
    last: Optional[int] = Field(default=None, ge=1)

    def to_variables(self) -> Dict[str, Any]:
        # Omitted ``last`` lets the query's own default apply.
        return self.model_dump(by_alias=True, exclude_none=True)


class UserEmailVariables(OperationVariables):
    document: ClassVar[str] = operations.GET_USER_QUERY
    operation_name: ClassVar[str] = "GetUser"

    email: str = Field(min_length=3)
