from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    column: int


class Range(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position


class DocumentChange(BaseModel):
    """Full replacement text of a document, as delivered by a change notification."""

    uri: str
    text: str
    version: int | None = None


class UsageSite(BaseModel):
    """First argument of a call routed through the bound field."""

    model_config = ConfigDict(frozen=True)

    receiver: str
    method: str
    argument: str
    start_byte: int
    end_byte: int
    start_point: Position
    end_point: Position


class Severity(IntEnum):
    # Values follow the LSP DiagnosticSeverity numbering.
    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


class DiagnosticRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    range: Range
    severity: Severity
    code: str
    code_description_href: str
    source: str
    message: str


class DiagnosticBatch(BaseModel):
    """Complete diagnostic set for one document; replaces anything published before."""

    model_config = ConfigDict(frozen=True)

    uri: str
    diagnostics: list[DiagnosticRecord]
    version: int | None = None


class AnalysisStatus(str, Enum):
    OK = "ok"
    NO_BINDING = "no_binding"
    FAILED = "failed"


class AnalysisReport(BaseModel):
    uri: str
    status: AnalysisStatus
    field_name: str | None = None
    diagnostics: list[DiagnosticRecord] = []
    error: str | None = None
