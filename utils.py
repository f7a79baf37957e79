# For general helpers and shared logic (logging, http session, dataframes).
import logging
import polars
import requests

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.addHandler(logging.StreamHandler())

session = requests.Session()
session.headers.update({"User-Agent": "BDIJ-Tables/1.0 (Wikitext table export)"})


def convert_to_dataframe(rows: list, fieldnames: list) -> polars.DataFrame:
    """table rows to dataframe"""
    # https://docs.pola.rs/api/python/stable/reference/api/polars.from_dicts.html
    df = polars.from_dicts(rows, schema={k: polars.String for k in fieldnames})
    logger.debug("Dataframe: %s", df)
    logger.debug("All header fields: %s", fieldnames)
    return df
