"""
Import order here is a touch weird, but we need it so
the formatters exist before the wrapper that calls them
"""

from .entities import link_entities  # noqa: F401
from .table import (  # noqa: F401
    binding_to_row,
    is_result_set,
    transform_to_wikitext_table,
)
from .general import build_table_wrapper  # noqa: F401,E402
