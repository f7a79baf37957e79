import copy
import datetime
from query_service import SPARQLQueryDispatcher
import requests
from schemas import (
    run_schema,
    table_profiles,
)
import time
from utils import logger
from wiki_page import fetch_query
from .entities import link_entities
from .table import (
    binding_to_row,
    is_result_set,
    transform_to_wikitext_table,
)


def build_table_wrapper(config: dict, session: requests.Session) -> dict:
    """page -> query -> query service -> wikitext table, once, in that order"""
    start_time = time.time()
    profile = table_profiles[config["profile"]]
    run_data = copy.deepcopy(run_schema)
    run_data["fetched_date"] = datetime.datetime.now(datetime.UTC)
    run_data["page_url"] = config["page_url"]
    run_data["endpoint"] = config["endpoint"]
    run_data["profile"] = config["profile"]

    query = fetch_query(config["page_url"], session, timeout=config["timeout"])
    run_data["query"] = query

    logger.info("Running query against %s...", config["endpoint"])
    dispatcher = SPARQLQueryDispatcher(config["endpoint"], session, timeout=config["timeout"])
    query_result = dispatcher.query(query)

    if profile["link_entities"]:
        query_result = link_entities(query_result, config["entity_base"])

    if is_result_set(query_result):
        run_data["rows"] = [binding_to_row(b, profile["missing"]) for b in query_result["results"]["bindings"]]
    else:
        logger.warning("  Query service returned no usable result set")
    run_data["table"] = transform_to_wikitext_table(query_result, profile)
    run_data["query_runtime"] = time.time() - start_time
    logger.info("Built table with %s rows", len(run_data["rows"]))
    return run_data
