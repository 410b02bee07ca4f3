"""
Entity mappers - project raw database rows into stable API shapes

Read-path mappers always emit every key (missing columns become None) so
responses keep one shape regardless of which query produced the row.
Write-path helpers turn request payloads into bound SQL parameters.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

# Person columns as selected from the "Person" table
PERSON_FIELDS = [
    "Person_id",
    "first_name",
    "last_name",
    "job_title",
    "email",
    "phone_number",
    "role",
    "zone_name",
]

GROUP_FIELDS = ["groupe_id", "groupe_name", "Description"]

# Boolean attributes normalized on write
UNIT_FLAG_FIELDS = {
    "key_account",
    "copy_billing",
    "confidentiality_agreement",
    "quality_agreement",
    "terms_purshase",
    "logistics_agreement",
}

UNIT_BUSINESS_FIELDS = [
    # Account Information
    "account_name",
    "parent_account",
    "key_account",
    "ke_account_manager",
    "avo_carbon_main_contact",
    "avo_carbon_tech_lead",
    "type",
    "industry",
    "account_owner",
    "phone",
    "website",
    "employees",
    "useful_information",
    "billing_account_number",
    "product_family",
    "account_currency",
    # Company Information
    "start_year",
    "solvent_customer",
    "solvency_info",
    "budget_avo_carbon",
    "avo_carbon_potential_buisness",
    # Address Information
    "billing_address_search",
    "billing_street",
    "billing_city",
    "billing_state",
    "billing_zip",
    "billing_country",
    "shippping_address_search",
    "shipping_street",
    "shipping_city",
    "shipping_state",
    "shipping_zip",
    "shipping_country",
    "copy_billing",
    # Agreements
    "confidentiality_agreement",
    "quality_agreement",
    "terms_purshase",
    "logistics_agreement",
    "payment_conditions",
    "tech_key_account",
]

UNIT_SUMMARY_FIELDS = ["unit_id", "unit_name", "city", "country", "zone_name"]

UNIT_FULL_FIELDS = [
    "unit_id",
    "groupe_id",
    "unit_name",
    "city",
    "country",
    "zone_name",
    "com_person_id",
] + UNIT_BUSINESS_FIELDS

# Column order used by INSERT and UPDATE statements
UNIT_WRITABLE_FIELDS = [
    "groupe_id",
    "unit_name",
    "city",
    "country",
    "com_person_id",
    "zone_name",
] + UNIT_BUSINESS_FIELDS

# Foreign keys of the unit table
UNIT_REFERENCE_FIELDS = {"groupe_id", "com_person_id"}


def normalize_flag(value: Any) -> bool:
    """Only the string "true" or a native True count as set"""
    return value is True or value == "true"


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def unit_write_value(field: str, value: Any) -> Any:
    """Normalize one unit column value before it is bound"""
    if field in UNIT_FLAG_FIELDS:
        return normalize_flag(value)
    if field in UNIT_REFERENCE_FIELDS:
        # 0 never names a row
        return value or None
    return _blank_to_none(value)


def unit_write_values(payload: Mapping[str, Any]) -> List[Any]:
    """
    Build the bound parameter list for unit inserts

    Args:
        payload: Request fields keyed by column name (missing keys allowed)

    Returns:
        Values ordered like UNIT_WRITABLE_FIELDS
    """
    return [unit_write_value(field, payload.get(field)) for field in UNIT_WRITABLE_FIELDS]


def unit_update_assignments(payload: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    """
    Columns and values for a unit update, limited to the fields the client sent

    A null groupe_id is skipped so the unit stays in its current group.

    Args:
        payload: Only the fields present in the request body

    Returns:
        (column, value) pairs in UNIT_WRITABLE_FIELDS order
    """
    assignments = []
    for field in UNIT_WRITABLE_FIELDS:
        if field not in payload:
            continue
        value = unit_write_value(field, payload[field])
        if field == "groupe_id" and value is None:
            continue
        assignments.append((field, value))
    return assignments


def _project(row: Mapping[str, Any], fields: List[str]) -> Dict[str, Any]:
    return {field: row.get(field) for field in fields}


def map_person(row: Mapping[str, Any], zone_column: str = "zone_name") -> Dict[str, Any]:
    """
    Map a Person row

    Args:
        row: Row holding the Person columns
        zone_column: Column carrying the person's zone. Joined queries alias it
            to person_zone_name so it does not clash with the unit's zone.
    """
    person = _project(row, PERSON_FIELDS)
    person["zone_name"] = row.get(zone_column)
    return person


def map_responsible(row: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """Responsible person of a joined unit row, or None when the join missed"""
    if row.get("Person_id") is None:
        return None
    return map_person(row, zone_column="person_zone_name")


def map_unit_summary(row: Mapping[str, Any]) -> Dict[str, Any]:
    """List view of a unit: identity, location and contact"""
    unit = _project(row, UNIT_SUMMARY_FIELDS)
    unit["responsible"] = map_responsible(row)
    return unit


def map_unit_full(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Detail view of a unit with every business attribute"""
    unit = _project(row, UNIT_FULL_FIELDS)
    unit["responsible"] = map_responsible(row)
    return unit


def map_unit_detail(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Full unit view plus the owning group's name"""
    unit = map_unit_full(row)
    unit["groupe_name"] = row.get("groupe_name")
    return unit


def map_group(row: Mapping[str, Any], units: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    group = _project(row, GROUP_FIELDS)
    if units is not None:
        group["units"] = units
    return group
