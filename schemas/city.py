from typing import List, Optional
from fastapi import Query
from pydantic import BaseModel, ConfigDict, Field, field_validator

# API name -> column name, in column order
CITY_FIELDS = {
    "id": "id",
    "cityName": "city_name",
    "stateName": "state_name",
    "countryName": "country_name",
    "population": "population",
    "latitude": "latitude",
    "longitude": "longitude",
}
CITY_COLUMNS = list(CITY_FIELDS.values())

SORT_DIRECTIONS = {"asc": "ASC", "desc": "DESC"}


def resolve_projection(projection: Optional[str]) -> list[str]:
    """Map a comma separated projection onto known column names.

    Accepts API names (``cityName``) or column names (``city_name``).
    ``*``, empty or missing means every column. Raises ValueError on
    anything outside the allow-list.
    """
    if projection is None or projection.strip() in ("", "*"):
        return list(CITY_COLUMNS)

    columns: list[str] = []
    for item in projection.split(","):
        name = item.strip()
        if not name:
            continue
        if name in CITY_FIELDS:
            column = CITY_FIELDS[name]
        elif name in CITY_COLUMNS:
            column = name
        else:
            raise ValueError(f"unknown projection field '{name}'")
        if column not in columns:
            columns.append(column)

    if not columns:
        return list(CITY_COLUMNS)
    return columns


class CityQuery(BaseModel):
    page: int = Query(1, description="Page Number, 5 cities per page")
    sort: str = Query("ASC", description="Population order, ASC or DESC")
    search: Optional[str] = Query(None, description="Substring matched against every field")
    filter: Optional[str] = Query(None, description="Exact value matched against every field")
    projection: Optional[str] = Query(
        None, description="Comma separated fields to return, * for all"
    )

    @field_validator("page")
    @classmethod
    def normalize_page(cls, value: int) -> int:
        return value if value > 0 else 1

    @field_validator("sort")
    @classmethod
    def validate_sort(cls, value: str) -> str:
        direction = SORT_DIRECTIONS.get(value.strip().lower())
        if direction is None:
            raise ValueError("sort must be ASC or DESC")
        return direction

    @field_validator("projection")
    @classmethod
    def validate_projection(cls, value: Optional[str]) -> Optional[str]:
        resolve_projection(value)
        return value


class CityCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    city_name: str = Field(alias="cityName")
    state_name: str = Field(alias="stateName")
    country_name: str = Field(alias="countryName")
    population: int
    latitude: float
    longitude: float


class CityUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    city_name: Optional[str] = Field(None, alias="cityName")
    state_name: Optional[str] = Field(None, alias="stateName")
    country_name: Optional[str] = Field(None, alias="countryName")
    population: Optional[int] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class CityResponseItem(BaseModel):
    id: int
    city_name: Optional[str] = None
    state_name: Optional[str] = None
    country_name: Optional[str] = None
    population: Optional[int] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class CityUpdateResponse(BaseModel):
    message: str
    city: CityResponseItem


CityListResponse = List[CityResponseItem]
