import copy
from unittest.mock import MagicMock

import pytest
import requests


def _make_response(content: bytes = b"", json_data=None, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.text = content.decode("utf-8")
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Client Error")
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


QUERY_PAGE = """<html><body>
<h1>Ministérios</h1>
<pre>SELECT ?item ?itemLabel WHERE {
  ?item wdt:P1 wd:Q5 .
}</pre>
<pre>not this one</pre>
</body></html>"""

QUERY_RESULT = {
    "head": {"vars": ["item", "itemLabel", "itemDescription", "itemAltLabel"]},
    "results": {
        "bindings": [
            {
                "item": {"type": "uri", "value": "https://web.bdij.com.br/entity/Q1"},
                "itemLabel": {"type": "literal", "value": "Foo"},
            },
            {
                "item": {"type": "uri", "value": "https://web.bdij.com.br/entity/Q22"},
                "itemLabel": {"type": "literal", "value": "Bar"},
                "itemDescription": {"type": "literal", "value": "a ministry"},
                "itemAltLabel": {"type": "literal", "value": "B"},
            },
        ]
    },
}


@pytest.fixture
def fake_session():
    """A session whose GETs return the query page, then the query result"""
    session = MagicMock()
    session.get.side_effect = [
        _make_response(QUERY_PAGE.encode("utf-8")),
        _make_response(json_data=QUERY_RESULT),
    ]
    return session


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def query_result():
    return copy.deepcopy(QUERY_RESULT)
