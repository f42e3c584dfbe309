"""User repository.

Users are keyed by the identity-provider subject; there is no generated
business id.
"""

from typing import Any, Dict

from domain.user.entity import Role, User
from infrastructure.persistence.repositories.base import DocumentRepository


class UserRepository(DocumentRepository[User]):
    collection_name = "users"
    id_field = "user_id"

    def to_document(self, user: User) -> Dict[str, Any]:
        return {
            "user_id": user.user_id,
            "role": user.role.value,
            "associated_restaurants": list(user.associated_restaurants),
        }

    def from_document(self, doc: Dict[str, Any]) -> User:
        return User(
            user_id=doc["user_id"],
            role=Role.from_claim(doc.get("role")),
            associated_restaurants=doc.get("associated_restaurants") or [],
        )
