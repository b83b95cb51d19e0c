from shared.repository import Repository
from .models import Category
from .schemas import CategoryCreate

class CategoryService:

    def __init__(self, repository: Repository):
        self.repository = repository

    async def list_categories(self):
        return await self.repository.get_all()

    async def get_category_by_id(self, category_id: int):
        return await self.repository.get_by_id(category_id)

    async def create_category(self, data: CategoryCreate):
        category = Category(name=data.name, description=data.description)
        return await self.repository.create(category)

    async def update_category(self, category_id: int, data: CategoryCreate):
        category = Category(id=category_id, name=data.name, description=data.description)
        return await self.repository.update(category)

    async def delete_category(self, category_id: int):
        await self.repository.delete(category_id)
