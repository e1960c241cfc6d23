from releasegate.application.dto.gate_config import GateConfig

__all__ = ["GateConfig"]
