"""express-scaffold configuration.

Typed settings for the scaffolding operations. Built on Pydantic v2 so the
values are validated at construction time and can be read from environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_PACKAGES: tuple[str, ...] = ("express", "cors", "mysql2", "sequelize", "mongoose")

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Settings shared by every scaffold operation.

    Instances are created once by the CLI entry point and passed explicitly
    to the operations; nothing here is process-global.
    """

    base_dir: Path = Field(default_factory=Path.cwd, description="Project root to scaffold into")
    port: int = Field(default=4000, ge=1, le=65535, description="Port the generated server listens on")
    packages: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PACKAGES),
        description="Packages installed by the 'package' command, in order",
    )
    npm_command: str = Field(default="npm", description="Executable used to install packages")
    fill_placeholders: bool = Field(
        default=True,
        description="Let 'server' fill the empty index.js written by 'new'",
    )

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def resolved_base_dir(self) -> Path:
        """Absolute form of :attr:`base_dir`."""
        return self.base_dir.expanduser().resolve()

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            EXPRESS_SCAFFOLD_DIR, EXPRESS_SCAFFOLD_NPM,
            EXPRESS_SCAFFOLD_FILL_PLACEHOLDERS.

        Keyword *overrides* that are not ``None`` win over the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EXPRESS_SCAFFOLD_DIR"):
            kwargs["base_dir"] = Path(os.environ["EXPRESS_SCAFFOLD_DIR"])
        if os.environ.get("EXPRESS_SCAFFOLD_NPM"):
            kwargs["npm_command"] = os.environ["EXPRESS_SCAFFOLD_NPM"]
        if os.environ.get("EXPRESS_SCAFFOLD_FILL_PLACEHOLDERS"):
            kwargs["fill_placeholders"] = (
                os.environ["EXPRESS_SCAFFOLD_FILL_PLACEHOLDERS"].strip().lower() in _TRUTHY
            )

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
