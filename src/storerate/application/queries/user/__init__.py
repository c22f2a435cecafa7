from storerate.application.queries.user.list_users_query import (
    GetUserQuery,
    ListUsersQuery,
)

__all__ = ["GetUserQuery", "ListUsersQuery"]
