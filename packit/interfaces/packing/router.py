"""
FastAPI router for the packing bounded context.

All routes delegate to handlers. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from packit.application.packing.add_packing_item import AddPackingItemHandler
from packit.application.packing.create_packing_list_with_items import (
    CreatePackingListWithItemsHandler,
)
from packit.application.packing.dtos import (
    AddPackingItemCommand,
    CreatePackingListWithItemsCommand,
    GetPackingListQuery,
    LocalizationWriteModel,
    PackingListDto,
    PackItemCommand,
    RemovePackingItemCommand,
    RemovePackingListCommand,
    SearchPackingListsQuery,
)
from packit.application.packing.get_packing_list import GetPackingListHandler
from packit.application.packing.pack_item import PackItemHandler
from packit.application.packing.remove_packing_item import RemovePackingItemHandler
from packit.application.packing.remove_packing_list import RemovePackingListHandler
from packit.application.packing.search_packing_lists import SearchPackingListsHandler
from packit.interfaces.packing.dependencies import (
    get_add_packing_item_handler,
    get_create_packing_list_with_items_handler,
    get_pack_item_handler,
    get_packing_list_handler,
    get_remove_packing_item_handler,
    get_remove_packing_list_handler,
    get_search_packing_lists_handler,
)
from packit.interfaces.packing.schemas import (
    AddPackingItemRequest,
    CreatePackingListRequest,
    CreatePackingListResponse,
    ErrorResponse,
    LocalizationSchema,
    PackingItemSchema,
    PackingListResponse,
)

router = APIRouter(prefix="/packing-lists", tags=["packing"])


def _to_response(dto: PackingListDto) -> PackingListResponse:
    return PackingListResponse(
        id=dto.id,
        name=dto.name,
        days=dto.days,
        gender=dto.gender,
        temperature=dto.temperature,
        localization=LocalizationSchema(
            city=dto.localization.city,
            country=dto.localization.country,
        ),
        items=[
            PackingItemSchema(
                name=item.name,
                quantity=item.quantity,
                is_packed=item.is_packed,
            )
            for item in dto.items
        ],
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatePackingListResponse,
    responses={
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Create a packing list",
    description="Create a packing list pre-filled with items for the trip and its weather.",
)
async def create_packing_list(
    request: CreatePackingListRequest,
    handler: CreatePackingListWithItemsHandler = Depends(
        get_create_packing_list_with_items_handler
    ),
) -> CreatePackingListResponse:
    """Create a packing list with default items."""
    localization = None
    if request.localization is not None:
        localization = LocalizationWriteModel(
            city=request.localization.city,
            country=request.localization.country,
        )
    command = CreatePackingListWithItemsCommand(
        id=request.id,
        name=request.name,
        days=request.days,
        gender=request.gender,
        localization=localization,
    )
    await handler.handle(command)
    return CreatePackingListResponse(id=command.id)


@router.get(
    "/{packing_list_id}",
    response_model=PackingListResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a packing list",
)
async def get_packing_list(
    packing_list_id: UUID,
    handler: GetPackingListHandler = Depends(get_packing_list_handler),
) -> PackingListResponse:
    result = await handler.handle(GetPackingListQuery(id=packing_list_id))
    return _to_response(result)


@router.get(
    "",
    response_model=list[PackingListResponse],
    summary="Search packing lists",
    description="Case-insensitive search by list name. Without a phrase, returns all lists.",
)
async def search_packing_lists(
    search_phrase: str | None = Query(default=None, max_length=200),
    handler: SearchPackingListsHandler = Depends(get_search_packing_lists_handler),
) -> list[PackingListResponse]:
    results = await handler.handle(SearchPackingListsQuery(search_phrase=search_phrase))
    return [_to_response(r) for r in results]


@router.put(
    "/{packing_list_id}/items",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Add an item to a packing list",
)
async def add_packing_item(
    packing_list_id: UUID,
    request: AddPackingItemRequest,
    handler: AddPackingItemHandler = Depends(get_add_packing_item_handler),
) -> None:
    await handler.handle(
        AddPackingItemCommand(
            packing_list_id=packing_list_id,
            name=request.name,
            quantity=request.quantity,
        )
    )


@router.put(
    "/{packing_list_id}/items/{name}/pack",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Mark an item as packed",
)
async def pack_item(
    packing_list_id: UUID,
    name: str,
    handler: PackItemHandler = Depends(get_pack_item_handler),
) -> None:
    await handler.handle(PackItemCommand(packing_list_id=packing_list_id, name=name))


@router.delete(
    "/{packing_list_id}/items/{name}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Remove an item from a packing list",
)
async def remove_packing_item(
    packing_list_id: UUID,
    name: str,
    handler: RemovePackingItemHandler = Depends(get_remove_packing_item_handler),
) -> None:
    await handler.handle(
        RemovePackingItemCommand(packing_list_id=packing_list_id, name=name)
    )


@router.delete(
    "/{packing_list_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a packing list",
)
async def remove_packing_list(
    packing_list_id: UUID,
    handler: RemovePackingListHandler = Depends(get_remove_packing_list_handler),
) -> None:
    await handler.handle(RemovePackingListCommand(id=packing_list_id))
