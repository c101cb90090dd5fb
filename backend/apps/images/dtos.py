from dataclasses import dataclass
from typing import Optional


@dataclass
class CreateImageDTO:
    name: Optional[str] = None
    base64: Optional[str] = None
    size: Optional[int] = None


@dataclass
class RecoveryImageDTO:
    id: int
    name: Optional[str]
    base64: Optional[str]
    size: Optional[int]
    created_at: Optional[str]
    updated_at: Optional[str]
