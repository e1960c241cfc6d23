from pydantic import BaseModel


class ExecResult(BaseModel, frozen=True):
    """Exit code and captured output of a finished command."""

    exit_code: int
    stdout: str
    stderr: str

    @classmethod
    def empty(cls) -> "ExecResult":
        """Synthetic result handed to checks that run no command."""
        return cls(exit_code=0, stdout="", stderr="")
