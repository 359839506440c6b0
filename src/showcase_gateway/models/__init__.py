"""Request payload models for the showcase gateway."""

from .requests import (
    CreateProjectVariables,
    CreateUserVariables,
    CreatorLink,
    DeleteProjectVariables,
    OperationVariables,
    ProjectCreateInput,
    ProjectForm,
    ProjectIdVariables,
    ProjectsQueryVariables,
    UpdateProjectVariables,
    UserCreateInput,
    UserEmailVariables,
    UserProjectsVariables,
    is_base64_data_url,
)

__all__ = [
    "CreateProjectVariables",
    "CreateUserVariables",
    "CreatorLink",
    "DeleteProjectVariables",
    "OperationVariables",
    "ProjectCreateInput",
    "ProjectForm",
    "ProjectIdVariables",
    "ProjectsQueryVariables",
    "UpdateProjectVariables",
    "UserCreateInput",
    "UserEmailVariables",
    "UserProjectsVariables",
    "is_base64_data_url",
]
