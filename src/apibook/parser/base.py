"""Data models for parsed Postman collections and the rendered document.

The parser turns an export into a Collection; the generator turns a
Collection into a Document that templates render.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

FieldType = Literal["string", "integer", "number", "boolean", "array", "object", "null", "unknown"]


class _PostmanModel(BaseModel):
    """Frozen model that treats explicit JSON nulls as missing keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Header(_PostmanModel):
    """A single request header. `kind` is a display hint only."""

    key: str = ""
    value: str = ""
    kind: str = Field(default="", alias="type")


class FormEntry(_PostmanModel):
    """One form-data or urlencoded body entry."""

    key: str = ""
    value: Any = ""
    kind: str = Field(default="", alias="type")


class Body(_PostmanModel):
    mode: str = ""  # raw / formdata / urlencoded / anything else passes through
    raw: str = ""
    formdata: list[FormEntry] = []
    urlencoded: list[FormEntry] = []


class Request(_PostmanModel):
    method: str = ""
    headers: list[Header] = Field(default=[], alias="header")
    url: Any = ""  # string or structured object; anything else flattens to ""
    body: Body | None = None


class Item(_PostmanModel):
    name: str = ""
    request: Request = Request()


class Collection(_PostmanModel):
    """Top-level collection: its name and ordered items."""

    name: str = ""
    items: list[Item] = Field(default=[], alias="item")


class NormalizedField(BaseModel):
    """A typed, described, numbered entry extracted from a request body."""

    number: int  # 1-based, dense within its entry
    field: str
    type: FieldType
    mandatory: bool = False
    description: str = ""


class DocumentEntry(BaseModel):
    """Render-ready view of one request.

    Either `fields` is non-empty or `body` carries the raw text fallback.
    """

    name: str
    method: str
    url: str
    headers: list[Header] = []
    fields: list[NormalizedField] = []
    body: str = ""
    body_mode: str = ""


class Document(BaseModel):
    collection_name: str
    entries: list[DocumentEntry]
