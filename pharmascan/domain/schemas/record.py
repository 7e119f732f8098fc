from __future__ import annotations

from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict


# Canonical column/tag order for every serializer.
FIELD_NAMES: Tuple[str, ...] = (
    "ImageName",
    "RecordNo",
    "ConfidenceScore",
    "CustomerName",
    "EmailAddress",
    "ResAddress",
    "City_1",
    "State_1",
    "Zip_1",
    "PhNo_1",
    "Country_1",
    "Sex_1",
    "D_Birth",
    "Height",
    "Weight",
    "Blood_Group",
    "Alcoholic",
    "Smoker",
    "PastSug",
    "Diabetic",
    "Allergiesd",
    "BillingName",
    "ShipperName",
    "City_2",
    "State_2",
    "Zip_2",
    "Country_2",
    "PhNo_2",
    "CardName",
    "ShippingCost",
    "TotalAmount",
    "Remarks",
    "PloicyNo",
    "D_B_Life_Assure",
    "P_Inst",
    "Name_P_Holder",
    "STM_Name",
    "STM_Code",
    "Medicine",
    "Dosage",
    "Tablets",
    "PillRate",
    "Cost",
    "DOB",
    "Sex_2",
    "UserID",
    "CreateDate",
    "UpdateDate",
)

# Duplicate columns kept for downstream compatibility: alias -> field it mirrors.
FIELD_ALIASES: Dict[str, str] = {
    "DOB": "D_Birth",
    "BillingName": "CustomerName",
    "ShipperName": "CustomerName",
    "Name_P_Holder": "CustomerName",
    "Sex_2": "Sex_1",
}

DEFAULT_CONFIDENCE = "0%"


def aliases_of(field: str) -> List[str]:
    """Return the alias columns that carry the same meaning as `field`."""
    return [alias for alias, target in FIELD_ALIASES.items() if target == field]


class ParsedRecord(BaseModel):
    """One order-form row. Every field is a string; absence is ``""``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ImageName: str = ""
    RecordNo: str = ""
    ConfidenceScore: str = ""
    CustomerName: str = ""
    EmailAddress: str = ""
    ResAddress: str = ""
    City_1: str = ""
    State_1: str = ""
    Zip_1: str = ""
    PhNo_1: str = ""
    Country_1: str = ""
    Sex_1: str = ""
    D_Birth: str = ""
    Height: str = ""
    Weight: str = ""
    Blood_Group: str = ""
    Alcoholic: str = ""
    Smoker: str = ""
    PastSug: str = ""
    Diabetic: str = ""
    Allergiesd: str = ""
    BillingName: str = ""
    ShipperName: str = ""
    City_2: str = ""
    State_2: str = ""
    Zip_2: str = ""
    Country_2: str = ""
    PhNo_2: str = ""
    CardName: str = ""
    ShippingCost: str = ""
    TotalAmount: str = ""
    Remarks: str = ""
    PloicyNo: str = ""
    D_B_Life_Assure: str = ""
    P_Inst: str = ""
    Name_P_Holder: str = ""
    STM_Name: str = ""
    STM_Code: str = ""
    Medicine: str = ""
    Dosage: str = ""
    Tablets: str = ""
    PillRate: str = ""
    Cost: str = ""
    DOB: str = ""
    Sex_2: str = ""
    UserID: str = ""
    CreateDate: str = ""
    UpdateDate: str = ""

    def as_row(self) -> List[str]:
        return [getattr(self, name) for name in FIELD_NAMES]

    def with_updates(self, **changes: Any) -> "ParsedRecord":
        """Return an edited copy; the original record is left untouched."""
        unknown = sorted(set(changes) - set(FIELD_NAMES))
        if unknown:
            raise ValueError(f"unknown record field(s): {', '.join(unknown)}")
        data = self.model_dump()
        data.update({k: "" if v is None else str(v) for k, v in changes.items()})
        return ParsedRecord(**data)


def empty_record_fields(image_name: str, record_no: int) -> Dict[str, str]:
    """Mutable field map used while a record is being extracted."""
    fields = {name: "" for name in FIELD_NAMES}
    fields["ImageName"] = image_name
    fields["RecordNo"] = str(record_no)
    fields["ConfidenceScore"] = DEFAULT_CONFIDENCE
    return fields


def create_empty_record(image_name: str, record_no: int) -> ParsedRecord:
    return ParsedRecord(**empty_record_fields(image_name, record_no))
