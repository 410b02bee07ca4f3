"""
Unit-related Pydantic models
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, field_validator

class UnitWriteRequest(BaseModel):
    """
    Body of unit create and update

    Required fields are checked by the routes so that a missing field is a
    400 rather than a schema error. Flag fields are kept raw here; they are
    normalized to booleans by the unit mapper before persistence.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    groupe_id: Optional[int] = None
    unit_name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    com_person_id: Optional[int] = None
    zone_name: Optional[str] = None

    # Account Information
    account_name: Optional[str] = None
    parent_account: Optional[str] = None
    key_account: Optional[Any] = None
    ke_account_manager: Optional[str] = None
    avo_carbon_main_contact: Optional[str] = None
    avo_carbon_tech_lead: Optional[str] = None
    type: Optional[str] = None
    industry: Optional[str] = None
    account_owner: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    employees: Optional[int] = None
    useful_information: Optional[str] = None
    billing_account_number: Optional[str] = None
    product_family: Optional[str] = None
    account_currency: Optional[str] = None

    # Company Information
    start_year: Optional[int] = None
    solvent_customer: Optional[str] = None
    solvency_info: Optional[str] = None
    budget_avo_carbon: Optional[str] = None
    avo_carbon_potential_buisness: Optional[str] = None

    # Address Information
    billing_address_search: Optional[str] = None
    billing_street: Optional[str] = None
    billing_city: Optional[str] = None
    billing_state: Optional[str] = None
    billing_zip: Optional[str] = None
    billing_country: Optional[str] = None
    shippping_address_search: Optional[str] = None
    shipping_street: Optional[str] = None
    shipping_city: Optional[str] = None
    shipping_state: Optional[str] = None
    shipping_zip: Optional[str] = None
    shipping_country: Optional[str] = None
    copy_billing: Optional[Any] = None

    # Agreements
    confidentiality_agreement: Optional[Any] = None
    quality_agreement: Optional[Any] = None
    terms_purshase: Optional[Any] = None
    logistics_agreement: Optional[Any] = None
    payment_conditions: Optional[str] = None
    tech_key_account: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        # Forms submit empty inputs as "", which must not reach integer columns
        if isinstance(value, str) and not value.strip():
            return None
        return value
