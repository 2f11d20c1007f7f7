from dataclasses import dataclass
from typing import Optional


@dataclass
class RunOutcome:
    """How a scenario run ended"""

    aborted: bool = False
    error: Optional[str] = None

    @property
    def exit_code(self) -> int:
        return 0 if self.error is None else 1
