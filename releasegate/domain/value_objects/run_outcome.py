from pydantic import BaseModel, Field


class RunSuccess(BaseModel, frozen=True):
    """Every check in the run passed."""

    completed: int = Field(ge=0, description="Number of checks that ran")

    @property
    def is_success(self) -> bool:
        return True

    @property
    def exit_code(self) -> int:
        return 0


class RunFailure(BaseModel, frozen=True):
    """The run stopped at the first failing check."""

    index: int = Field(ge=0, description="Position of the failing check in the list")
    name: str
    message: str

    @property
    def is_success(self) -> bool:
        return False

    @property
    def exit_code(self) -> int:
        return 1


RunOutcome = RunSuccess | RunFailure
