from releasegate.infrastructure.process.command_executor import SubprocessCommandExecutor

__all__ = ["SubprocessCommandExecutor"]
