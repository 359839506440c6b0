"""Named GraphQL operations consumed by the gateway."""

from .operations import (
    CREATE_PROJECT_MUTATION,
    CREATE_USER_MUTATION,
    DELETE_PROJECT_MUTATION,
    GET_PROJECT_BY_ID_QUERY,
    GET_PROJECTS_OF_USER_QUERY,
    GET_USER_QUERY,
    PROJECTS_QUERY,
    UPDATE_PROJECT_MUTATION,
)

__all__ = [
    "CREATE_PROJECT_MUTATION",
    "CREATE_USER_MUTATION",
    "DELETE_PROJECT_MUTATION",
    "GET_PROJECT_BY_ID_QUERY",
    "GET_PROJECTS_OF_USER_QUERY",
    "GET_USER_QUERY",
    "PROJECTS_QUERY",
    "UPDATE_PROJECT_MUTATION",
]
