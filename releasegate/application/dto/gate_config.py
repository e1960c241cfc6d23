from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class GateConfig(BaseModel):
    """Settings for the default pre-release check sequence."""

    toolchain: str = Field(default="deno", min_length=1, description="Toolchain executable")
    registry: str = Field(default="JSR", min_length=1, description="Registry name for display")
    manifest_path: Path = Field(default=Path("deno.json"), description="Manifest holding the version")
    version: str | None = Field(default=None, description="Explicit version, skips the manifest")
    cwd: Path = Field(default_factory=Path.cwd, description="Directory the checks run in")

    @field_validator("cwd", mode="before")
    @classmethod
    def validate_cwd(cls, v: Path | str) -> Path:
        """Ensure cwd exists."""
        path = Path(v) if isinstance(v, str) else v
        if not path.is_dir():
            raise ValueError(f"Working directory does not exist: {path}")
        return path.resolve()

    @property
    def resolved_manifest_path(self) -> Path:
        if self.manifest_path.is_absolute():
            return self.manifest_path
        return self.cwd / self.manifest_path
