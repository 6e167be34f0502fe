"""Pydantic models describing the Google Sheets API payloads we read."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SheetsBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class GridRangePayload(SheetsBaseModel):
    """0-based, end-exclusive grid coordinates; the API omits zero and unbounded values."""

    sheet_id: int = Field(default=0, alias="sheetId")
    start_row_index: int = Field(default=0, alias="startRowIndex")
    end_row_index: int | None = Field(default=None, alias="endRowIndex")
    start_column_index: int = Field(default=0, alias="startColumnIndex")
    end_column_index: int | None = Field(default=None, alias="endColumnIndex")


class NamedRangePayload(SheetsBaseModel):
    named_range_id: str | None = Field(default=None, alias="namedRangeId")
    name: str
    range: GridRangePayload
