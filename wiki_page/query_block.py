# Pulls the SPARQL query out of the wiki page that documents it
from bs4 import BeautifulSoup
import requests
from utils import logger


class QueryNotFoundError(Exception):
    """The page came back, but there was no <pre> block holding a query"""


def find_query(html: str | bytes) -> str | None:
    """Text of the first <pre> element, or None when the page has none"""
    soup = BeautifulSoup(html, "html.parser")
    block = soup.find("pre")
    if block is None:
        return None
    return block.get_text()


def fetch_query(page_url: str, session: requests.Session, timeout: int = 120) -> str:
    logger.info("Fetching query page %s", page_url)
    response = session.get(page_url, timeout=timeout)
    response.raise_for_status()
    query = find_query(response.content)
    if query is None:
        raise QueryNotFoundError(f"{page_url} contains *no* <pre> block with a query")
    logger.debug("Query found on page:\n%s", query)
    return query
