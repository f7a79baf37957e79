import copy
import re
from schemas import default_entity_base


def _entity_re(entity_base: str) -> re.Pattern:
    return re.compile(rf"^{re.escape(entity_base)}([A-Za-z]\d+)$")


def link_entities(query_result: dict, entity_base: str = default_entity_base, namespace: str = "Item") -> dict:
    """
    Swap full entity URIs in the `item` column for internal wiki links,
    e.g. https://web.bdij.com.br/entity/Q1 -> [[Item:Q1|Q1]]

    Returns a new result set, the one passed in is left alone.
    Anything that doesn't look like a result set is copied through as-is.
    """
    linked = copy.deepcopy(query_result)
    try:
        bindings = linked["results"]["bindings"]
    except (KeyError, TypeError):
        return linked
    if not isinstance(bindings, list):
        return linked
    entity_re = _entity_re(entity_base)
    for binding in bindings:
        if not isinstance(binding, dict) or not isinstance(binding.get("item"), dict):
            continue
        match = entity_re.match(str(binding["item"].get("value", "")))
        if not match:
            continue
        entity_id = match.group(1)
        binding["item"]["value"] = f"[[{namespace}:{entity_id}|{entity_id}]]"
    return linked
