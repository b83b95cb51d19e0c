from shared.repository import Repository
from .models import Product
from .schemas import ProductCreate

class ProductService:
    """
    Seam between the router and whichever product store is configured.
    Business rules (e.g. stock checks) belong here, not in the router.
    """

    def __init__(self, repository: Repository):
        self.repository = repository

    async def list_products(self):
        return await self.repository.get_all()

    async def get_product_by_id(self, product_id: int):
        return await self.repository.get_by_id(product_id)

    async def create_product(self, data: ProductCreate):
        product = Product(
            name=data.name,
            price=data.price,
            stock=data.stock
        )
        return await self.repository.create(product)

    async def update_product(self, product_id: int, data: ProductCreate):
        # Path identity wins over whatever id the body carried
        product = Product(
            id=product_id,
            name=data.name,
            price=data.price,
            stock=data.stock
        )
        return await self.repository.update(product)

    async def delete_product(self, product_id: int):
        await self.repository.delete(product_id)
