from storefront.domain.user import User
from storefront.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User
