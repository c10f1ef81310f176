from fastapi import APIRouter, Depends

from core.log import logger
from core.responses import (
    BadRequest,
    Conflict,
    Created,
    InternalServerError,
    NotFound,
    Ok,
    common_response,
)
from core.store import RecordStore, StorageError
from models import get_store
from repository import city as cityRepo
from schemas.city import (
    CityCreateRequest,
    CityListResponse,
    CityQuery,
    CityUpdateRequest,
    CityUpdateResponse,
)
from schemas.common import (
    BadRequestResponse,
    ConflictResponse,
    InternalServerErrorResponse,
    NotFoundResponse,
    ValidationErrorResponse,
)

router = APIRouter(tags=["City"])


@router.post(
    "/create_city",
    responses={
        "201": {"content": {"text/plain": {}}},
        "409": {"model": ConflictResponse},
        "500": {"model": InternalServerErrorResponse},
    },
)
def create_city(
    request: CityCreateRequest,
    store: RecordStore = Depends(get_store),
):
    try:
        created = cityRepo.insert_city_if_absent(
            store=store,
            city_name=request.city_name,
            state_name=request.state_name,
            country_name=request.country_name,
            population=request.population,
            latitude=request.latitude,
            longitude=request.longitude,
        )
        if not created:
            return common_response(
                Conflict(message=f'City "{request.city_name}" already exists.')
            )

        logger.info(f"City created: {request.city_name}")
        return common_response(
            Created(data=f"{request.city_name} city created successfully")
        )
    except StorageError as e:
        logger.error(f"Error while creating city: {e}")
        return common_response(InternalServerError(error=str(e)))


@router.put(
    "/update_city/{old_city_name}",
    responses={
        "200": {"model": CityUpdateResponse},
        "400": {"model": BadRequestResponse},
        "404": {"model": NotFoundResponse},
        "409": {"model": ConflictResponse},
        "500": {"model": InternalServerErrorResponse},
    },
)
def update_city(
    old_city_name: str,
    request: CityUpdateRequest,
    store: RecordStore = Depends(get_store),
):
    try:
        existing = cityRepo.get_city_by_name(store=store, city_name=old_city_name)
        if existing is None:
            return common_response(
                NotFound(message=f"{old_city_name} city resource is not found in server")
            )

        city = cityRepo.merge_city(existing, request.model_dump())
        if city["city_name"] != old_city_name:
            taken = cityRepo.get_city_by_name(store=store, city_name=city["city_name"])
            if taken is not None:
                return common_response(
                    Conflict(message=f'City "{city["city_name"]}" already exists.')
                )

        changes = cityRepo.update_city_by_name(
            store=store, old_city_name=old_city_name, city=city
        )
        if changes == 0:
            return common_response(
                BadRequest(message=f"No changes were made to city '{old_city_name}'.")
            )

        updated = cityRepo.get_city_by_name(store=store, city_name=city["city_name"])
        if updated is None:
            return common_response(
                NotFound(message=f"{city['city_name']} city resource is not found in server")
            )

        logger.info(f"City updated: {old_city_name} -> {city['city_name']}")
        return common_response(
            Ok(
                data={
                    "message": f"City '{old_city_name}' has been successfully updated.",
                    "city": updated,
                }
            )
        )
    except StorageError as e:
        logger.error(f"Error while update city related data: {e}")
        return common_response(InternalServerError(error=str(e)))


@router.delete(
    "/delete_city/{old_city_name}",
    responses={
        "200": {"content": {"text/plain": {}}},
        "404": {"model": NotFoundResponse},
        "500": {"model": InternalServerErrorResponse},
    },
)
def delete_city(
    old_city_name: str,
    store: RecordStore = Depends(get_store),
):
    try:
        existing = cityRepo.get_city_by_name(store=store, city_name=old_city_name)
        if existing is None:
            return common_response(
                NotFound(message=f"{old_city_name} city resource is not found in server")
            )

        cityRepo.delete_city_by_name(store=store, city_name=existing["city_name"])
        logger.info(f"City deleted: {old_city_name}")
        return common_response(Ok(data=f'City "{old_city_name}" deleted successfully'))
    except StorageError as e:
        logger.error(f"Error while delete city related data: {e}")
        return common_response(InternalServerError(error=str(e)))


@router.get(
    "/city",
    responses={
        "200": {"model": CityListResponse},
        "404": {"model": NotFoundResponse},
        "422": {"model": ValidationErrorResponse},
        "500": {"model": InternalServerErrorResponse},
    },
)
def list_cities(
    query: CityQuery = Depends(),
    store: RecordStore = Depends(get_store),
):
    try:
        cities = cityRepo.get_cities_per_page(
            store=store,
            page=query.page,
            sort=query.sort,
            search=query.search,
            filter=query.filter,
            projection=query.projection,
        )
        if not cities:
            return common_response(NotFound(message="No city resource found"))

        return common_response(Ok(data=cities))
    except StorageError as e:
        logger.error(f"Error while fetching cities: {e}")
        return common_response(InternalServerError(error=str(e)))
