from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from src.application.use_cases.animals import (
    add_animal,
    delete_animal,
    get_animal,
    list_animals,
    search_animals,
    update_animal,
)
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.animals import (
    AnimalCreate,
    AnimalResponse,
    AnimalsListResponse,
    AnimalUpdate,
)

router = APIRouter(prefix="/animals", tags=["animals"])


def _to_list_response(items) -> AnimalsListResponse:
    return AnimalsListResponse(
        items=[AnimalResponse.model_validate(item) for item in items],
        total=len(items),
    )


@router.get("/", response_model=AnimalsListResponse)
async def list_animals_endpoint(uow=Depends(get_uow)) -> AnimalsListResponse:
    items = await list_animals.execute(uow)
    return _to_list_response(items)


@router.get("/search", response_model=AnimalsListResponse)
async def search_animals_endpoint(
    animal_type: str = Query(..., alias="type", description="Exact, case-sensitive type"),
    uow=Depends(get_uow),
) -> AnimalsListResponse:
    items = await search_animals.execute(uow, animal_type)
    return _to_list_response(items)


@router.post("/", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal_endpoint(payload: AnimalCreate, uow=Depends(get_uow)) -> AnimalResponse:
    created = await add_animal.execute(uow, payload.to_domain())
    return AnimalResponse.model_validate(created)


@router.get("/{catalog_number}", response_model=AnimalResponse)
async def get_animal_endpoint(catalog_number: str, uow=Depends(get_uow)) -> AnimalResponse:
    animal = await get_animal.execute(uow, catalog_number)
    return AnimalResponse.model_validate(animal)


@router.put("/{catalog_number}", response_model=AnimalResponse)
async def update_animal_endpoint(
    catalog_number: str,
    payload: AnimalUpdate,
    uow=Depends(get_uow),
) -> AnimalResponse:
    updated = await update_animal.execute(uow, payload.to_domain(catalog_number))
    return AnimalResponse.model_validate(updated)


@router.delete("/{catalog_number}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animal_endpoint(catalog_number: str, uow=Depends(get_uow)) -> Response:
    await delete_animal.execute(uow, catalog_number)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
