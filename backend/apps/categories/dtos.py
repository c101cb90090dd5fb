from dataclasses import dataclass
from typing import Optional


@dataclass
class CreateCategoryDTO:
    # None means "leave unchanged" when used for a merge update
    name: Optional[str] = None


@dataclass
class RecoveryCategoryDTO:
    id: int
    name: str
    created_at: Optional[str]
    updated_at: Optional[str]
