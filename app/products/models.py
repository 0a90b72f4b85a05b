from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Iterator, List, Union

# Specification values are heterogeneous; only the str variant is searchable
SpecValue = Union[str, int, float, bool]


class ProductCondition(Enum):
    NEW = "new"
    USED = "used"
    REFURBISHED = "refurbished"


class ProductStatus(Enum):
    ACTIVE = "active"
    SOLD = "sold"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class Location:
    city: str
    region: str
    country: str


@dataclass(frozen=True)
class Product:
    id: str
    title: str
    description: str
    price: float
    condition: ProductCondition
    status: ProductStatus
    category: str
    subcategory: str
    brand: str
    location: Location
    seller_id: str
    created_at: datetime
    updated_at: datetime
    specifications: Dict[str, SpecValue] = field(default_factory=dict)
    images: List[str] = field(default_factory=list)
    views: int = 0
    favorites: int = 0

    def __hash__(self) -> int:
        # Field-wise hashing would fail on the dict/list fields; equal
        # products always share an id
        return hash(self.id)

    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE

    def string_specifications(self) -> Iterator[str]:
        """Specification values that text search is allowed to look at"""
        for value in self.specifications.values():
            if isinstance(value, str):
                yield value
