import datetime

default_page_url = "https://web.bdij.com.br/wiki/Project_talk:Minist%C3%A9rios"
default_endpoint = "https://web.bdij.com.br/query/sparql"
default_entity_base = "https://web.bdij.com.br/entity/"

# what the stages are given, instead of reaching for module globals
run_config_schema: dict = {
    "endpoint": default_endpoint,
    "entity_base": default_entity_base,
    "page_url": default_page_url,
    "profile": "plain",
    "timeout": 120,
}

# the two flavours of the table the wiki has used
table_profiles: dict = {
    "plain": {
        "link_entities": False,
        "missing": "N/A",
        "table_attributes": 'class="wikitable"',
    },
    "linked": {
        "link_entities": True,
        "missing": "",
        "table_attributes": 'class="wikitable sortable" style="width:100%"',
    },
}

# query variable -> table row key, in column order
table_columns = {
    "item": "entity",
    "itemLabel": "label",
    "itemDescription": "description",
    "itemAltLabel": "alias",
}
table_caption = "Resultados da Consulta"
table_headers = ["Entidade", "Rótulo", "Descrição", "Alias"]
no_results_text = "Nenhum resultado encontrado"

run_schema: dict = {
    "endpoint": "",
    "fetched_date": datetime.datetime.now(datetime.UTC),
    "page_url": "",
    "profile": "",
    "query": "",
    "query_runtime": 0,
    "rows": [],
    "table": "",
}

supported_output_types = ["wikitext", "csv", "json", "xlsx"]
output_suffixes = {
    "csv": "csv",
    "json": "json",
    "wikitext": "txt",
    "xlsx": "xlsx",
}
