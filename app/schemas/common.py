from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List

class ListingsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[Dict[str, Any]]
    total: int = Field(..., description="Listings matching the filters, across all pages")
    page: int
    total_pages: int = Field(..., alias="totalPages")

class ErrorResponse(BaseModel):
    error: str
