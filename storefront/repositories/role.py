from storefront.domain.role import Role
from storefront.repositories.base import BaseRepository


class RoleRepository(BaseRepository[Role]):
    model = Role
