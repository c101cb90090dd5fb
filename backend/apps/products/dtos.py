from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List


@dataclass
class CreateProductVariationDTO:
    size_name: str
    price: Decimal
    description: str = ""
    available: bool = True

    @staticmethod
    def from_raw(raw: Dict[str, Any]) -> "CreateProductVariationDTO":
        return CreateProductVariationDTO(
            size_name=raw["size_name"],
            price=Decimal(str(raw["price"])),
            description=raw.get("description") or "",
            available=raw.get("available", True),
        )


@dataclass
class CreateProductDTO:
    name: str
    category: str
    description: str = ""
    available: bool = True
    variations: List[CreateProductVariationDTO] = field(default_factory=list)

    @staticmethod
    def from_raw(payload: Dict[str, Any]) -> "CreateProductDTO":
        if not isinstance(payload, dict):
            raise ValueError("Payload must be a dict")
        return CreateProductDTO(
            name=payload["name"],
            category=payload["category"],
            description=payload.get("description") or "",
            available=payload.get("available", True),
            variations=[
                CreateProductVariationDTO.from_raw(v)
                for v in payload.get("variations") or []
            ],
        )


@dataclass
class RecoveryProductVariationDTO:
    id: int
    size_name: str
    description: str
    available: bool
    price: str


@dataclass
class RecoveryProductDTO:
    id: int
    name: str
    description: str
    category: str
    available: bool
    variations: List[RecoveryProductVariationDTO]
