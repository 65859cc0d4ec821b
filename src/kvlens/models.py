"""Host-facing response models for kvlens."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class EditResult(BaseModel):
    """Outcome of a host-initiated edit such as dropping a widget."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    kv_code: Optional[str] = Field(default=None, alias="kvCode")
    error: Optional[str] = None

    @classmethod
    def ok(cls, kv_code: str) -> "EditResult":
        return cls(success=True, kv_code=kv_code)

    @classmethod
    def failed(cls, error: str) -> "EditResult":
        return cls(success=False, error=error)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
