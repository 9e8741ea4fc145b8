"""
Pydantic model for application configuration.
Built once at startup and passed explicitly to every component.
"""

import ssl
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from installer_cli import __version__

TLS_VERSIONS = {
    "TLSv1.2": ssl.TLSVersion.TLSv1_2,
    "TLSv1.3": ssl.TLSVersion.TLSv1_3,
}


class InstallerConfig(BaseModel):
    """A validated, immutable configuration for one run."""

    work_dir: Path = Field(default_factory=Path.cwd, validate_default=True)
    min_tls_version: Literal["TLSv1.2", "TLSv1.3"] = "TLSv1.2"
    user_agent: str = f"installer-cli/{__version__}"
    chunk_size: int = 131072  # 128 KB

    class Config:
        """Pydantic model configuration."""

        frozen = True
        str_strip_whitespace = True

    @field_validator("work_dir")
    @classmethod
    def validate_work_dir(cls, v: Path) -> Path:
        """Resolves the working directory and ensures it exists."""
        v = Path(v).expanduser().resolve()
        if not v.is_dir():
            raise ValueError(f"Working directory does not exist: {v}")
        return v

    @field_validator("chunk_size")
    @classmethod
    def validate_chunk_size(cls, v: int) -> int:
        if v < 4096 or v > 4194304:
            raise ValueError("Chunk size must be between 4 KB and 4 MB.")
        return v

    @property
    def tls_version(self) -> ssl.TLSVersion:
        """The minimum TLS version as an ssl module constant."""
        return TLS_VERSIONS[self.min_tls_version]

    def output_path(self, file_name: str) -> Path:
        """Resolves a bare file name against the working directory."""
        return self.work_dir / file_name
