"""Reinstall request with Pydantic validation."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_INSTALLER_DIR, DEFAULT_WAIT_TIME, INSTALLER_EXECUTABLE
from .resolve_service_name import resolve_service_name


class InstallRequest(BaseModel):
    """Parameters of one reinstall run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    executable_path: Path = Field(..., description="Service executable to (re)install")
    service_name: str | None = Field(None, description="Registered service name, derived from the executable if omitted")
    installer_dir: Path = Field(
        DEFAULT_INSTALLER_DIR, validate_default=True, description="Directory containing InstallUtil.exe"
    )
    auto_start: bool = Field(True, description="Start matching services after installing")
    wait_time: int = Field(DEFAULT_WAIT_TIME, ge=0, description="Seconds to wait for registration before starting")

    @field_validator("executable_path", "installer_dir")
    @classmethod
    def anchor_to_caller_cwd(cls, v: Path) -> Path:
        """Relative paths resolve against the caller's directory, not the installer's."""
        return v.absolute()

    @field_validator("service_name")
    @classmethod
    def blank_name_is_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @property
    def installer_path(self) -> Path:
        return self.installer_dir / INSTALLER_EXECUTABLE

    @property
    def name_guessed(self) -> bool:
        """True when the service name has to be derived from the executable."""
        return self.service_name is None

    @property
    def resolved_service_name(self) -> str:
        return resolve_service_name(self.executable_path, self.service_name)
