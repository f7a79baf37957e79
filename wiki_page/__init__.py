from .query_block import (  # noqa: F401
    QueryNotFoundError,
    fetch_query,
    find_query,
)
