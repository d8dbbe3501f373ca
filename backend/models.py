"""
Pydantic models for the JSON payloads served by the API.
"""
from pydantic import BaseModel, TypeAdapter


class HealthStatus(BaseModel):
    status: str = "UP"


class ErrorBody(BaseModel):
    error: str


class Order(BaseModel):
    id: int
    product: str
    price: float


# ----- Fixed payloads -----

ORDERS: tuple[Order, ...] = (
    Order(id=1, product="Laptop", price=1200.0),
    Order(id=2, product="Mouse", price=25.0),
)

_orders_adapter = TypeAdapter(list[Order])


def health_json() -> str:
    return HealthStatus().model_dump_json()


def orders_json() -> str:
    """Serialize the fixed order list as a compact JSON array."""
    return _orders_adapter.dump_json(list(ORDERS)).decode("utf-8")


def method_not_allowed_json() -> str:
    return ErrorBody(error="Method Not Allowed").model_dump_json()
