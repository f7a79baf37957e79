from .dispatcher import (  # noqa: F401
    QueryExecutionError,
    SPARQLQueryDispatcher,
)
