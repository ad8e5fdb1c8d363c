"""Domain entity for the signed-in user's profile card."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class UserProfile:
    first_name: str
    last_name: str
    email: str
    phone: str
    photo: str  # data URI or URL

    @classmethod
    def default(cls) -> "UserProfile":
        return cls(
            first_name="Admin",
            last_name="User",
            email="admin@prms.com",
            phone="+971 00 000 0000",
            photo="https://picsum.photos/seed/admin/150/150",
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise with the camelCase keys used in persisted storage."""
        data = asdict(self)
        return {
            "firstName": data["first_name"],
            "lastName": data["last_name"],
            "email": data["email"],
            "phone": data["phone"],
            "photo": data["photo"],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserProfile":
        """Inverse of :meth:`to_dict`. Raises KeyError/TypeError on bad shape."""
        return cls(
            first_name=str(data["firstName"]),
            last_name=str(data["lastName"]),
            email=str(data["email"]),
            phone=str(data["phone"]),
            photo=str(data["photo"]),
        )
