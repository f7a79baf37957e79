from schemas import (
    no_results_text,
    table_caption,
    table_columns,
    table_headers,
    table_profiles,
)


def is_result_set(query_result) -> bool:
    """results.bindings must be a list of mappings for us to build a table at all"""
    if not isinstance(query_result, dict):
        return False
    results = query_result.get("results")
    if not isinstance(results, dict):
        return False
    bindings = results.get("bindings")
    if not isinstance(bindings, list):
        return False
    return all(isinstance(b, dict) for b in bindings)


def binding_to_row(binding: dict, missing: str = "N/A") -> dict:
    """One query result -> one table row. Absent or empty values become `missing`"""
    row = {}
    for var, key in table_columns.items():
        field = binding.get(var)
        value = field.get("value") if isinstance(field, dict) else None
        row[key] = value or missing
    return row


def _table_header(table_attributes: str) -> list:
    lines = [f"{{| {table_attributes}", f"|+ {table_caption}"]
    lines.extend(f"! {header}" for header in table_headers)
    return lines


def transform_to_wikitext_table(query_result: dict | None, profile: dict = table_profiles["plain"]) -> str:
    if not is_result_set(query_result):
        return no_results_text

    lines = _table_header(profile["table_attributes"])
    for binding in query_result["results"]["bindings"]:  # type: ignore [index]
        row = binding_to_row(binding, profile["missing"])
        lines.append("|-")
        lines.extend(f"| {row[key]}" for key in table_columns.values())
    lines.append("|}")
    return "\n".join(lines)
