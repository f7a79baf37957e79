import requests
from urllib.parse import quote
from utils import logger

sparql_json_type = "application/sparql-results+json"


class QueryExecutionError(Exception):
    pass


class SPARQLQueryDispatcher(object):
    """GET a query against a SPARQL endpoint and hand back the JSON result set"""

    def __init__(self, endpoint: str, session: requests.Session, timeout: int = 120):
        self.endpoint = endpoint
        self.session = session
        self.timeout = timeout

    def query_url(self, sparql: str) -> str:
        # same reserved set as encodeURIComponent, which the query service expects
        encoded = quote(sparql, safe="!*'()")
        return f"{self.endpoint}?query={encoded}"

    def query(self, sparql: str) -> dict:
        full_url = self.query_url(sparql)
        headers = {"Accept": sparql_json_type}
        logger.debug("Querying %s", full_url)
        try:
            response = self.session.get(full_url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise QueryExecutionError(f"SPARQL query execution failed: {e}") from e
