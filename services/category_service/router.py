from fastapi import APIRouter, Depends, HTTPException, Request, status
from shared.config.database import session_scope
from shared.exceptions import NotFoundError
from shared.params import parse_identity
from .repository import CategoryRepository
from .schemas import CategoryCreate, CategoryResponse, MessageResponse
from .service import CategoryService

CATEGORY_NOT_FOUND = "Kategori tidak ditemukan"

router = APIRouter(prefix="/api/categories", tags=["categories"])


def category_id_param(category_id: str) -> int:
    return parse_identity(category_id)


async def get_category_service(request: Request):
    store = request.app.state.stores.get("categories")
    if store is not None:
        yield CategoryService(store)
        return
    async with session_scope() as db:
        yield CategoryService(CategoryRepository(db))


@router.get("", response_model=list[CategoryResponse], summary="Get all categories")
async def list_categories(service: CategoryService = Depends(get_category_service)):
    return await service.list_categories()


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new category",
)
async def create_category(
    category: CategoryCreate,
    service: CategoryService = Depends(get_category_service)
):
    return await service.create_category(category)


@router.get("/{category_id:path}", response_model=CategoryResponse, summary="Get category by ID")
async def get_category(
    record_id: int = Depends(category_id_param),
    service: CategoryService = Depends(get_category_service)
):
    try:
        return await service.get_category_by_id(record_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=CATEGORY_NOT_FOUND)


@router.put("/{category_id:path}", response_model=CategoryResponse, summary="Update category")
async def update_category(
    category: CategoryCreate,
    record_id: int = Depends(category_id_param),
    service: CategoryService = Depends(get_category_service)
):
    try:
        return await service.update_category(record_id, category)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=CATEGORY_NOT_FOUND)


@router.delete("/{category_id:path}", response_model=MessageResponse, summary="Delete category")
async def delete_category(
    record_id: int = Depends(category_id_param),
    service: CategoryService = Depends(get_category_service)
):
    try:
        await service.delete_category(record_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=CATEGORY_NOT_FOUND)
    return {"message": "Kategori berhasil dihapus"}
