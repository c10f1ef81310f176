from core.store import RecordStore
from repository import city as cityRepo

INITIAL_CITIES = [
    {
        "city_name": "Lyon",
        "state_name": "Auvergne-Rhone-Alpes",
        "country_name": "France",
        "population": 513275,
        "latitude": 45.75,
        "longitude": 4.85,
    },
    {
        "city_name": "Paris",
        "state_name": "Ile-de-France",
        "country_name": "France",
        "population": 2148000,
        "latitude": 48.85,
        "longitude": 2.35,
    },
    {
        "city_name": "Hyderabad",
        "state_name": "Telangana",
        "country_name": "India",
        "population": 6809970,
        "latitude": 17.385,
        "longitude": 78.4867,
    },
    {
        "city_name": "Mumbai",
        "state_name": "Maharashtra",
        "country_name": "India",
        "population": 12442373,
        "latitude": 19.076,
        "longitude": 72.8777,
    },
    {
        "city_name": "Chennai",
        "state_name": "Tamil Nadu",
        "country_name": "India",
        "population": 4646732,
        "latitude": 13.0827,
        "longitude": 80.2707,
    },
    {
        "city_name": "Austin",
        "state_name": "Texas",
        "country_name": "United States",
        "population": 961855,
        "latitude": 30.2672,
        "longitude": -97.7431,
    },
    {
        "city_name": "Seattle",
        "state_name": "Washington",
        "country_name": "United States",
        "population": 737015,
        "latitude": 47.6062,
        "longitude": -122.3321,
    },
]


def initial_city(store: RecordStore) -> int:
    """Upsert the sample cities by name, returns how many rows were written."""
    written = 0
    for city in INITIAL_CITIES:
        existing = cityRepo.get_city_by_name(store=store, city_name=city["city_name"])
        if existing is None:
            if cityRepo.insert_city_if_absent(store=store, **city):
                written += 1
        else:
            written += cityRepo.update_city_by_name(
                store=store, old_city_name=city["city_name"], city=city
            )
    return written
