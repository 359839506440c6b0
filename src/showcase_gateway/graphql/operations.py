"""GraphQL documents for the project showcase API.

The schema is owned by the remote service; these are the named operations
the gateway sends.
"""

PROJECTS_QUERY = """
query getProjects($category: String, $endcursor: String) {
  projectSearch(first: 8, after: $endcursor, filter: {category: {eq: $category}}) {
    pageInfo {
      hasNextPage
      hasPreviousPage
      startCursor
      endCursor
    }
    edges {
      node {
        title
        githubUrl
        description
        liveSiteUrl
        id
        image
        category
        createdBy {
          id
          email
          name
          avatarUrl
        }
      }
    }
  }
}
"""

GET_PROJECT_BY_ID_QUERY = """
query GetProjectById($id: ID!) {
  project(by: { id: $id }) {
    id
    title
    description
    image
    liveSiteUrl
    githubUrl
    category
    createdBy {
      id
      name
      email
      avatarUrl
    }
  }
}
"""

CREATE_PROJECT_MUTATION = """
mutation CreateProject($input: ProjectCreateInput!) {
  projectCreate(input: $input) {
    project {
      id
      title
      description
      createdBy {
        email
        name
      }
    }
  }
}
"""

UPDATE_PROJECT_MUTATION = """
mutation UpdateProject($id: ID!, $input: ProjectUpdateInput!) {
  projectUpdate(by: { id: $id }, input: $input) {
    project {
      id
      title
      description
      createdBy {
        email
        name
      }
    }
  }
}
"""

DELETE_PROJECT_MUTATION = """
mutation DeleteProject($id: ID!) {
  projectDelete(by: { id: $id }) {
    deletedId
  }
}
"""

CREATE_USER_MUTATION = """
mutation CreateUser($input: UserCreateInput!) {
  userCreate(input: $input) {
    user {
      id
      name
      email
      avatarUrl
      description
      githubUrl
      linkedinUrl
    }
  }
}
"""

GET_USER_QUERY = """
query GetUser($email: String!) {
  user(by: { email: $email }) {
    id
    name
    email
    avatarUrl
    description
    githubUrl
    linkedinUrl
  }
}
"""

GET_PROJECTS_OF_USER_QUERY = """
query getUserProjects($id: ID!, $last: Int = 4) {
  user(by: { id: $id }) {
    id
    name
    email
    description
    avatarUrl
    githubUrl
    linkedinUrl
    projects(last: $last) {
      edges {
        node {
          id
          title
          image
        }
      }
    }
  }
}
"""
