from typing import Any, Iterable, List, Mapping, Optional, Tuple

from httpx import QueryParams


def stringify(value: Any) -> str:
    """Render a scalar the way Jira expects it in URLs."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def query_items(params: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """Flatten query parameters into ordered key/value pairs.

    ``None`` values are dropped, lists and tuples repeat the key once per
    element (in order) and booleans are rendered in lowercase.
    """
    items: List[Tuple[str, str]] = []
    if not params:
        return items

    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            items.extend(
                (key, stringify(element)) for element in value if element is not None
            )
        else:
            items.append((key, stringify(value)))
    return items


def serialize_query(params: Optional[Mapping[str, Any]]) -> str:
    """Encode query parameters, returning ``""`` when nothing is left."""
    items = query_items(params)
    if not items:
        return ""
    return str(QueryParams(items))


def comma_separated(values: Optional[Iterable[Any]]) -> Optional[str]:
    # for parameters such as expand or fields that take a single csv value
    if values is None:
        return None
    if isinstance(values, str):
        return values or None
    joined = ",".join(stringify(v) for v in values if v is not None)
    return joined or None
