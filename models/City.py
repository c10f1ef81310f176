from models import Base
from sqlalchemy import REAL, Integer, Text
from sqlalchemy.orm import mapped_column, Mapped


class City(Base):
    __tablename__ = "city"

    id: Mapped[int] = mapped_column("id", Integer, primary_key=True)
    city_name: Mapped[str] = mapped_column("city_name", Text, nullable=True)
    state_name: Mapped[str] = mapped_column("state_name", Text, nullable=True)
    country_name: Mapped[str] = mapped_column("country_name", Text, nullable=True)
    population: Mapped[int] = mapped_column("population", Integer, nullable=True)
    latitude: Mapped[float] = mapped_column("latitude", REAL, nullable=True)
    longitude: Mapped[float] = mapped_column("longitude", REAL, nullable=True)
