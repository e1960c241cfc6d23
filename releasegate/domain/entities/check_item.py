from pydantic import BaseModel, ConfigDict, field_validator

from releasegate.domain.ports.validator_port import Validator
from releasegate.domain.value_objects.exec_result import ExecResult


class CheckItem(BaseModel):
    """One named pre-release check: an optional command plus its validator."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    command: tuple[str, ...] | None = None
    validator: Validator

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Check name must not be empty")
        return v

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: tuple[str, ...] | None) -> tuple[str, ...] | None:
        if v is None:
            return v
        if not v or not v[0]:
            raise ValueError("Check command must start with a program name")
        return v

    @property
    def has_command(self) -> bool:
        return self.command is not None

    async def evaluate(self, result: ExecResult) -> str | None:
        """Run the validator once against result."""
        return await self.validator.validate(result)
