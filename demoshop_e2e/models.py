# demoshop_e2e/models.py

from dataclasses import asdict, dataclass, field, replace
from decimal import Decimal
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Credentials":
        return cls(email=data["email"], password=data["password"])

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class RegistrationData:
    gender: str
    first_name: str
    last_name: str
    email: str
    password: str
    confirm_password: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RegistrationData":
        return cls(
            gender=data.get("gender", "M"),
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data.get("email", ""),
            password=data["password"],
            confirm_password=data.get("confirm_password", data["password"]),
        )

    def credentials(self) -> Credentials:
        return Credentials(email=self.email, password=self.password)


@dataclass(frozen=True)
class Address:
    """Mailing/contact fields, used identically for billing and shipping."""

    first_name: str
    last_name: str
    email: str
    country: str
    city: str
    address1: str
    zip_code: str
    phone: str
    company: str = ""
    address2: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Address":
        return cls(
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data.get("email", ""),
            country=data["country"],
            city=data["city"],
            address1=data["address1"],
            zip_code=data["zip_code"],
            phone=data["phone"],
            company=data.get("company", ""),
            address2=data.get("address2", ""),
        )

    def with_email(self, email: str) -> "Address":
        return replace(self, email=email)


@dataclass(frozen=True)
class CartItem:
    """Snapshot of one rendered cart row."""

    name: str
    unit_price: Decimal
    quantity: int
    subtotal: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "unit_price": str(self.unit_price),
            "quantity": self.quantity,
            "subtotal": str(self.subtotal),
        }


@dataclass(frozen=True)
class ProductDetails:
    name: str
    price: str


@dataclass(frozen=True)
class OrderConfirmation:
    order_number: str
    message: str


@dataclass
class OrderDetails:
    order_number: str
    email: str
    order_date: str
    items: List[CartItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "order_number": self.order_number,
            "email": self.email,
            "order_date": self.order_date,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class Product:
    name: str
    category: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        return cls(name=data["name"], category=data.get("category"))
