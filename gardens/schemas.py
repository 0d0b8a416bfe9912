# gardens/schemas.py
from pydantic import BaseModel, field_validator
from typing import Any

from gardens.utils import parse_float, parse_int, parse_text

TEXT_FIELDS = (
    "name",
    "type",
    "neighborhood",
    "address",
    "contact",
    "year_created",
    "food_tree_varieties",
    "jurisdiction",
    "steward",
    "public_email",
    "website",
    "geo_local_area",
)


class GardenIn(BaseModel):
    """
    Payload for create/update. Every field is optional; missing or
    unparseable values fall back to "" for text and 0 for numbers.
    """
    name: str = ""
    type: str = ""
    neighborhood: str = ""
    address: str = ""
    longitude: float = 0.0
    latitude: float = 0.0
    contact: str = ""
    plots_available: int = 0
    year_created: str = ""
    food_tree_varieties: str = ""
    jurisdiction: str = ""
    steward: str = ""
    public_email: str = ""
    website: str = ""
    geo_local_area: str = ""

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return parse_text(v)

    @field_validator("longitude", "latitude", mode="before")
    @classmethod
    def _coord(cls, v: Any) -> float:
        return parse_float(v, 0.0)

    @field_validator("plots_available", mode="before")
    @classmethod
    def _plots(cls, v: Any) -> int:
        return parse_int(v, 0)


class GardenOut(GardenIn):
    id: int

    class Config:
        from_attributes = True


class DeleteResult(BaseModel):
    changes: int
