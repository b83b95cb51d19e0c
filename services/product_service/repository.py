from shared.repository import InMemoryRepository, SqlRepository
from .models import Product

PRODUCT_FIELDS = ("name", "price", "stock")

# Initial contents of the in-memory store
DEFAULT_PRODUCTS = [
    Product(id=1, name="Indomie Goreng", price=3500, stock=100),
    Product(id=2, name="Teh Botol", price=3000, stock=50),
    Product(id=3, name="Kecap Bango", price=12000, stock=20),
]


class ProductRepository(SqlRepository):
    resource = "product"
    model = Product
    fields = PRODUCT_FIELDS


class InMemoryProductRepository(InMemoryRepository):
    resource = "product"
    model = Product
    fields = PRODUCT_FIELDS
