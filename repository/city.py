from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from core.store import RecordStore
from schemas.city import SORT_DIRECTIONS, resolve_projection

CITY_PAGE_SIZE = 5

TEXT_COLUMNS = ["city_name", "state_name", "country_name"]
NUMERIC_COLUMNS = ["population", "latitude", "longitude"]

SELECT_CITY_BY_NAME = "SELECT * FROM city WHERE city_name = :city_name"

# insert only when the name is free, so the uniqueness check and the write
# are a single statement
INSERT_CITY_IF_ABSENT = """
INSERT INTO city (city_name, state_name, country_name, population, latitude, longitude)
SELECT :city_name, :state_name, :country_name, :population, :latitude, :longitude
WHERE NOT EXISTS (SELECT 1 FROM city WHERE city_name = :city_name)
"""

# touches the row only when at least one value differs
UPDATE_CITY_BY_NAME = """
UPDATE city
SET city_name = :city_name,
    state_name = :state_name,
    country_name = :country_name,
    population = :population,
    latitude = :latitude,
    longitude = :longitude
WHERE city_name = :old_city_name
  AND (
    city_name IS NOT :city_name
    OR state_name IS NOT :state_name
    OR country_name IS NOT :country_name
    OR population IS NOT :population
    OR latitude IS NOT :latitude
    OR longitude IS NOT :longitude
  )
"""

DELETE_CITY_BY_NAME = "DELETE FROM city WHERE city_name = :city_name"

SEARCH_CLAUSE = " OR ".join(
    f"CAST({column} AS TEXT) LIKE :search ESCAPE '\\'"
    for column in TEXT_COLUMNS + NUMERIC_COLUMNS
)
FILTER_CLAUSE = " OR ".join(
    [f"{column} = :filter" for column in TEXT_COLUMNS]
    + [f"{column} = :filter_number" for column in NUMERIC_COLUMNS]
)


class CityQueryShape(Enum):
    PLAIN = "plain"
    SEARCH = "search"
    FILTER = "filter"
    SEARCH_AND_FILTER = "search_and_filter"


WHERE_CLAUSES = {
    CityQueryShape.PLAIN: "",
    CityQueryShape.SEARCH: f"WHERE ({SEARCH_CLAUSE})",
    CityQueryShape.FILTER: f"WHERE ({FILTER_CLAUSE})",
    CityQueryShape.SEARCH_AND_FILTER: f"WHERE ({SEARCH_CLAUSE}) AND ({FILTER_CLAUSE})",
}


@dataclass
class CityListQuery:
    shape: CityQueryShape
    statement: str
    params: dict[str, Any] = field(default_factory=dict)


def select_query_shape(search: Optional[str], filter: Optional[str]) -> CityQueryShape:
    if search and filter:
        return CityQueryShape.SEARCH_AND_FILTER
    if search:
        return CityQueryShape.SEARCH
    if filter:
        return CityQueryShape.FILTER
    return CityQueryShape.PLAIN


def escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def parse_number(value: str) -> Optional[float]:
    """Numeric reading of a filter token, None when it is not a number."""
    try:
        number = float(value)
    except ValueError:
        return None
    if number != number or number in (float("inf"), float("-inf")):
        return None
    if number.is_integer():
        return int(number)
    return number


def build_city_list_query(
    page: int = 1,
    sort: str = "ASC",
    search: Optional[str] = None,
    filter: Optional[str] = None,
    projection: Optional[str] = None,
) -> CityListQuery:
    """Build the paginated SELECT for the city collection.

    Columns come from the projection allow-list and the direction from a
    fixed mapping; every client value ends up as a bound parameter.
    """
    if page is None or page < 1:
        page = 1
    direction = SORT_DIRECTIONS.get(str(sort).strip().lower())
    if direction is None:
        raise ValueError(f"invalid sort direction '{sort}'")
    columns = ", ".join(resolve_projection(projection))

    shape = select_query_shape(search, filter)
    params: dict[str, Any] = {
        "limit": CITY_PAGE_SIZE,
        "offset": (page - 1) * CITY_PAGE_SIZE,
    }
    if shape in (CityQueryShape.SEARCH, CityQueryShape.SEARCH_AND_FILTER):
        params["search"] = f"%{escape_like(search)}%"
    if shape in (CityQueryShape.FILTER, CityQueryShape.SEARCH_AND_FILTER):
        params["filter"] = filter
        params["filter_number"] = parse_number(filter)

    statement = " ".join(
        part
        for part in (
            f"SELECT {columns} FROM city",
            WHERE_CLAUSES[shape],
            f"ORDER BY population {direction}, id ASC",
            "LIMIT :limit OFFSET :offset",
        )
        if part
    )
    return CityListQuery(shape=shape, statement=statement, params=params)


def get_cities_per_page(
    store: RecordStore,
    page: int = 1,
    sort: str = "ASC",
    search: Optional[str] = None,
    filter: Optional[str] = None,
    projection: Optional[str] = None,
) -> list[dict]:
    query = build_city_list_query(
        page=page, sort=sort, search=search, filter=filter, projection=projection
    )
    return store.fetch_many(query.statement, query.params)


def get_city_by_name(store: RecordStore, city_name: str) -> Optional[dict]:
    return store.fetch_one(SELECT_CITY_BY_NAME, {"city_name": city_name})


def insert_city_if_absent(
    store: RecordStore,
    city_name: str,
    state_name: str,
    country_name: str,
    population: int,
    latitude: float,
    longitude: float,
) -> bool:
    """Insert a city unless the name is taken. Returns False on conflict."""
    changes = store.execute(
        INSERT_CITY_IF_ABSENT,
        {
            "city_name": city_name,
            "state_name": state_name,
            "country_name": country_name,
            "population": population,
            "latitude": latitude,
            "longitude": longitude,
        },
    )
    return changes > 0


def merge_city(existing: dict, changes: dict) -> dict:
    """Overlay the non-null values of ``changes`` on the stored row."""
    return {
        column: changes[column] if changes.get(column) is not None else existing.get(column)
        for column in TEXT_COLUMNS + NUMERIC_COLUMNS
    }


def update_city_by_name(store: RecordStore, old_city_name: str, city: dict) -> int:
    return store.execute(
        UPDATE_CITY_BY_NAME, {**city, "old_city_name": old_city_name}
    )


def delete_city_by_name(store: RecordStore, city_name: str) -> int:
    return store.execute(DELETE_CITY_BY_NAME, {"city_name": city_name})
