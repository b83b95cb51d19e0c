from shared.repository import InMemoryRepository, SqlRepository
from .models import Category

CATEGORY_FIELDS = ("name", "description")


class CategoryRepository(SqlRepository):
    resource = "category"
    model = Category
    fields = CATEGORY_FIELDS


class InMemoryCategoryRepository(InMemoryRepository):
    resource = "category"
    model = Category
    fields = CATEGORY_FIELDS
