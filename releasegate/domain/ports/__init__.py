from releasegate.domain.ports.command_executor_port import CommandExecutorPort
from releasegate.domain.ports.validator_port import FunctionValidator, ValidateFn, Validator

__all__ = [
    "CommandExecutorPort",
    "FunctionValidator",
    "ValidateFn",
    "Validator",
]
