from fastapi import APIRouter, Depends, HTTPException, Request, status
from shared.config.database import session_scope
from shared.exceptions import NotFoundError
from shared.params import parse_identity
from .repository import ProductRepository
from .schemas import MessageResponse, ProductCreate, ProductResponse
from .service import ProductService

PRODUCT_NOT_FOUND = "Produk tidak ditemukan"

router = APIRouter(prefix="/api/produk", tags=["produk"])


def product_id_param(product_id: str) -> int:
    # Taken as a string so an empty or multi-segment id is a 400, not a 404/405
    return parse_identity(product_id)


async def get_product_service(request: Request):
    """Memory store when the app holds one, otherwise a per-request DB session."""
    store = request.app.state.stores.get("products")
    if store is not None:
        yield ProductService(store)
        return
    async with session_scope() as db:
        yield ProductService(ProductRepository(db))


@router.get("", response_model=list[ProductResponse], summary="Get all products")
async def list_products(service: ProductService = Depends(get_product_service)):
    return await service.list_products()


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new product",
)
async def create_product(
    product: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    return await service.create_product(product)


@router.get("/{product_id:path}", response_model=ProductResponse, summary="Get product by ID")
async def get_product(
    record_id: int = Depends(product_id_param),
    service: ProductService = Depends(get_product_service)
):
    try:
        return await service.get_product_by_id(record_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)


@router.put("/{product_id:path}", response_model=ProductResponse, summary="Update product")
async def update_product(
    product: ProductCreate,
    record_id: int = Depends(product_id_param),
    service: ProductService = Depends(get_product_service)
):
    try:
        return await service.update_product(record_id, product)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)


@router.delete("/{product_id:path}", response_model=MessageResponse, summary="Delete product")
async def delete_product(
    record_id: int = Depends(product_id_param),
    service: ProductService = Depends(get_product_service)
):
    try:
        await service.delete_product(record_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)
    return {"message": "Produk berhasil dihapus"}
