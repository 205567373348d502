"""Data models for Google Sheets operations."""

from pydantic import BaseModel, Field, field_validator

from .a1 import index_to_col_letter, quote_sheet_name

HEADER_ROW = 1
FIRST_DATA_ROW = HEADER_ROW + 1


class SheetTarget(BaseModel):
    """The spreadsheet and tab that values are written into."""

    spreadsheet_id: str
    sheet_name: str


class ColumnAddress(BaseModel):
    """A zero-based column index with its letter label."""

    index: int = Field(ge=0)

    @property
    def label(self) -> str:
        return index_to_col_letter(self.index)


class TargetCell(BaseModel):
    """A single cell below the header row."""

    column: ColumnAddress
    row: int

    @field_validator("row")
    @classmethod
    def _below_header(cls, row: int) -> int:
        if row < FIRST_DATA_ROW:
            raise ValueError(f"Row {row} is reserved for headers")
        return row

    @property
    def a1(self) -> str:
        return f"{self.column.label}{self.row}"

    def range_notation(self, sheet_name: str) -> str:
        return f"{quote_sheet_name(sheet_name)}!{self.a1}"


class UpdateResult(BaseModel):
    """Result of applying updates."""

    success: bool
    spreadsheet_id: str
    updated_cells: int = 0
    updated_range: str = ""
    errors: list[str] = Field(default_factory=list)
