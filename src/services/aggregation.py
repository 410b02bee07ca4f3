"""
Row aggregation - fold flat group/unit/person join rows into nested groups
"""

from typing import Any, Callable, Dict, Iterable, List, Mapping

from services.mappers import map_group, map_unit_summary

UnitMapper = Callable[[Mapping[str, Any]], Dict[str, Any]]


def aggregate_groups(
    rows: Iterable[Mapping[str, Any]],
    unit_mapper: UnitMapper = map_unit_summary
) -> List[Dict[str, Any]]:
    """
    Group left-joined rows by groupe_id

    Groups come out in order of first appearance. A row without a unit_id
    (group with no units) only registers the group. Every row carrying a
    unit_id becomes one unit entry; nothing is deduplicated.

    Args:
        rows: Rows from groupe LEFT JOIN unit LEFT JOIN "Person"
        unit_mapper: Projection applied to each unit (summary or full)

    Returns:
        List of group dicts, each with a "units" list
    """
    groups: Dict[Any, Dict[str, Any]] = {}

    for row in rows:
        group_id = row["groupe_id"]
        group = groups.get(group_id)
        if group is None:
            group = map_group(row, units=[])
            groups[group_id] = group

        if row.get("unit_id") is not None:
            group["units"].append(unit_mapper(row))

    return list(groups.values())
