from pageswap.snapshot.snapshot import (
    Snapshot,
    get_permanent_element_by_id,
    query_autofocusable_element,
    query_permanent_elements_all,
)

__all__ = [
    "Snapshot",
    "get_permanent_element_by_id",
    "query_autofocusable_element",
    "query_permanent_elements_all",
]
