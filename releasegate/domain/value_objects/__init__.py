from releasegate.domain.value_objects.exec_result import ExecResult
from releasegate.domain.value_objects.run_outcome import RunFailure, RunOutcome, RunSuccess

__all__ = [
    "ExecResult",
    "RunFailure",
    "RunOutcome",
    "RunSuccess",
]
