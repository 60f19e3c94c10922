from typing import Optional, Any
from dataclasses import dataclass, field
from enum import Enum
import uuid

from common.dom import Element


@dataclass(frozen=True)
class RawFinding:
    """Finding exactly as reported by the checking engine."""
    code: str
    type: int
    msg: str
    element: Optional[Element] = None


class RunState(str, Enum):
    """Lifecycle of a single check run."""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass
class CheckRun:
    """Bookkeeping for one check run. A run completes exactly once."""
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    state: RunState = RunState.PENDING
    result: Optional[Any] = None

    def start(self) -> None:
        if self.state is not RunState.PENDING:
            raise RuntimeError(f"Run {self.run_id} cannot start from state {self.state.value}")
        self.state = RunState.RUNNING

    def complete(self, result: Any) -> None:
        if self.state is RunState.COMPLETED:
            raise RuntimeError(f"Run {self.run_id} already completed")
        self.state = RunState.COMPLETED
        self.result = result
