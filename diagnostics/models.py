"""
Data models for a11yguard check output.
A run produces either a list of diagnostic messages or a single error.
"""
from typing import List, Optional, Dict, Any, Union
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


class MessageType(str, Enum):
    """Severity of a diagnostic message."""
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    UNKNOWN = "unknown"  # Engine severity code outside the known table


class CheckOptions(BaseModel):
    """Caller-supplied configuration, read-only for the duration of a run."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    standard: str  # Ruleset / profile passed to the engine
    wait_ms: int = Field(alias="waitMs", ge=0)  # Delay before invoking the engine
    ignore: List[str]  # Diagnostic codes (any case) or type names


class DiagnosticMessage(BaseModel):
    """One normalized finding."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str  # Engine rule identifier, case preserved
    message: str
    type_code: int = Field(alias="typeCode")  # Raw engine severity code
    type: MessageType
    context: Optional[str] = None  # Truncated outer markup of the offending element
    selector: str  # CSS path to the offending element


class CheckSuccess(BaseModel):
    """Terminal payload of a run that reached the engine's completion signal."""
    messages: List[DiagnosticMessage]

    def to_payload(self) -> Dict[str, Any]:
        return {"messages": [m.model_dump(by_alias=True, mode="json") for m in self.messages]}


class CheckFailure(BaseModel):
    """Terminal payload of a run whose engine invocation failed."""
    error: str

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.error}


CheckResult = Union[CheckSuccess, CheckFailure]
