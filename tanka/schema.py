from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

class LineStatus(str, Enum):
    empty    = "empty"     # no mora in the slot
    match    = "match"     # mora count equals the slot target
    mismatch = "mismatch"  # anything else

class TankaLine(BaseModel):
    index:   int = Field(..., ge=0)
    text:    str
    display: str
    mora:    int = Field(..., ge=0)
    target:  Optional[int] = None         # None for the overflow line
    status:  Optional[LineStatus] = None  # overflow lines are never scored
    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def is_overflow(self) -> bool:
        return self.target is None

class TankaAnalysis(BaseModel):
    text:           str
    ruleset:        str
    total_mora:     int = Field(..., ge=0)
    expected_total: int = Field(..., ge=0)
    lines:          List[TankaLine] = Field(default_factory=list)
    warning:        Optional[str] = None
    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def statuses(self) -> List[LineStatus]:
        return [line.status for line in self.lines if line.status is not None]
