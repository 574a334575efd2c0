"""
OData query construction for the Tweede Kamer data warehouse.

Builds request URLs with ``$filter``, ``$expand``, pagination and
``$format`` clauses. Expressions are percent-encoded but not validated;
a malformed filter or expand only shows up as an error response from the
service.

Responsibility: Translate logical query parts into OData URLs
"""

import logging
from typing import Any, Iterable, Mapping, Optional, List
from urllib.parse import quote

from ..models.attendance import FilterParameters

logger = logging.getLogger(__name__)

# Characters left as-is in query values; everything else is percent-encoded
_QUERY_SAFE = "$(),';=/:"

RESERVED_OPTIONS = ("filter", "expand", "format")


NOT_DELETED_FILTER = "verwijderd eq false"

ATTENDANCE_EXPAND = "ActiviteitActor($expand=Persoon,Fractie)"


def participant_expand(relation: str = "Deelnemer") -> str:
    """Expansion restricted to actors with the given relation."""
    return (
        f"ActiviteitActor($filter=relatie eq {quote_literal(relation)};"
        f"$expand=Persoon,Fractie)"
    )


def quote_literal(value: str) -> str:
    """Render a string as an OData literal (single quotes doubled)."""
    return "'" + value.replace("'", "''") + "'"


def _render_option(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _param(key: str, value: str) -> str:
    return f"${key}={quote(value, safe=_QUERY_SAFE)}"


def build_query(
    entity_set: str,
    filters: Iterable[str] = (),
    expands: Iterable[str] = (),
    options: Optional[Mapping[str, Any]] = None,
    base_url: str = "",
) -> str:
    """
    Build an OData request URL.

    Args:
        entity_set: Entity set or key path (e.g., "Activiteit" or
            "Activiteit(<id>)")
        filters: Filter expressions, AND-ed in the given order
        expands: Navigation paths, may carry nested ``$filter``/``$expand``
        options: Other system query options (top, skip, orderby, count);
            ``None`` values are skipped
        base_url: Service root prepended to the entity set

    Returns:
        URL ending in ``$format=json``, with clause values percent-encoded

    Example:
        >>> build_query("Activiteit", ["verwijderd eq false"], [], {"top": 10})
        'Activiteit?$filter=verwijderd%20eq%20false&$top=10&$format=json'
    """
    filters = list(filters)
    expands = list(expands)
    params: List[str] = []

    if filters:
        params.append(_param("filter", " and ".join(filters)))

    if expands:
        params.append(_param("expand", ",".join(expands)))

    for key, value in (options or {}).items():
        if value is None:
            continue
        if key in RESERVED_OPTIONS:
            logger.debug(f"Ignoring option '{key}'; the ${key} clause comes from its own argument")
            continue
        params.append(_param(key, _render_option(value)))

    params.append("$format=json")

    prefix = f"{base_url}/{entity_set}" if base_url else entity_set
    return f"{prefix}?{'&'.join(params)}"


def build_activity_filters(params: Optional[FilterParameters] = None) -> List[str]:
    """
    Translate logical filter parameters into activity filter expressions.

    Deleted activities are always excluded. Date bounds cover whole days
    in UTC; the subject match is case-insensitive.
    """
    filters = [NOT_DELETED_FILTER]
    if params is None:
        return filters

    if params.date_from:
        filters.append(f"aanvangstijd ge {params.date_from.isoformat()}T00:00:00Z")

    if params.date_to:
        filters.append(f"aanvangstijd le {params.date_to.isoformat()}T23:59:59Z")

    if params.activity_type:
        filters.append(
            f"contains(tolower(onderwerp), tolower({quote_literal(params.activity_type)}))"
        )

    return filters
