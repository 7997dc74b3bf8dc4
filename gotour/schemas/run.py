"""
Run and format schemas for the Go tour.

Defines Pydantic models for:
- Output events streamed by the execution transport
- Responses of the formatting endpoint
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EventKind(str, Enum):
    STDOUT = "stdout"
    STDERR = "stderr"
    SYSTEM = "system"
    END = "end"


class RunEvent(BaseModel):
    """One chunk of program output, as delivered by the transport."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    kind: str = Field(alias="Kind")   # usually an EventKind value
    body: str = Field(default="", alias="Body")

    @property
    def is_stderr(self) -> bool:
        return self.kind == EventKind.STDERR.value

    @property
    def is_end(self) -> bool:
        return self.kind == EventKind.END.value


class FormatResult(BaseModel):
    """Response of POST /_/fmt: either a formatted body or an error."""
    model_config = ConfigDict(populate_by_name=True)

    body: str = Field(default="", alias="Body")
    error: str = Field(default="", alias="Error")

    @property
    def ok(self) -> bool:
        return not self.error
