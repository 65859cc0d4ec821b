"""Pydantic schemas for completion candidates."""

from enum import Enum, IntEnum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CompletionItemKind(IntEnum):
    """Host completion kinds used by kvlens (subset of the host table)."""

    CLASS = 5
    VALUE = 13
    CONSTANT = 14
    SNIPPET = 27


class InsertTextFormat(IntEnum):
    PLAIN_TEXT = 1
    SNIPPET = 2


class CompletionContext(str, Enum):
    """What the cursor is positioned to type."""

    WIDGET_NAME = "widget_name"
    CLASS_DEFINITION = "class_definition"
    PROPERTY_VALUE = "property_value"
    NONE = "none"


class CompletionItem(BaseModel):
    """One completion candidate in the host's wire shape."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    label: str = Field(description="Text shown in the completion list")
    kind: CompletionItemKind = Field(description="Host completion kind")
    detail: Optional[str] = Field(default=None, description="Short type/inheritance detail")
    documentation: Optional[str] = Field(default=None, description="Longer description")
    insert_text: str = Field(alias="insertText", description="Text or snippet to insert")
    insert_text_format: InsertTextFormat = Field(
        default=InsertTextFormat.PLAIN_TEXT,
        alias="insertTextFormat",
        description="1 = plain text, 2 = snippet",
    )

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
