# gardens/models.py
from sqlalchemy import Column, Integer, String, Float
from .db import Base

# Columns written on every insert/update, in table order
GARDEN_FIELDS = (
    "name",
    "type",
    "neighborhood",
    "address",
    "longitude",
    "latitude",
    "contact",
    "plots_available",
    "year_created",
    "food_tree_varieties",
    "jurisdiction",
    "steward",
    "public_email",
    "website",
    "geo_local_area",
)


class Garden(Base):
    __tablename__ = "gardens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String)
    type = Column(String)
    neighborhood = Column(String)
    address = Column(String)

    longitude = Column(Float)
    latitude = Column(Float)

    contact = Column(String)
    plots_available = Column(Integer)
    year_created = Column(String)
    food_tree_varieties = Column(String)
    jurisdiction = Column(String)
    steward = Column(String)
    public_email = Column(String)
    website = Column(String)
    geo_local_area = Column(String)

    def __repr__(self) -> str:
        return f"<Garden id={self.id} name={self.name!r}>"
