"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides the default display language and the logging config path."""

from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from typetriad import __version__
from typetriad.registry import Language


def _get_project_root() -> Path:
    """Find project root by looking for pyproject.toml."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Contains settings for this project.

    Every field can be overridden with a `TYPETRIAD_` prefixed environment
    variable, e.g. `TYPETRIAD_LANGUAGE=japanese`.
    """

    model_config = SettingsConfigDict(env_prefix="TYPETRIAD_")

    VERSION: str = __version__
    """Project version."""

    PROJECT_ROOT: Path = _get_project_root()
    """Root directory of the project."""

    LANGUAGE: Language = Language.ENGLISH
    """Language used to parse and display type names."""

    LOG_CONFIG: Path | None = None
    """Logging config override; defaults to configs/logging.yml."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def configs_dir(self) -> Path:
        """Directory containing configuration files."""
        return self.PROJECT_ROOT / "configs"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logging_config_path(self) -> Path:
        """Path to the logging.yml configuration file."""
        if self.LOG_CONFIG is not None:
            return self.LOG_CONFIG
        return self.configs_dir / "logging.yml"


settings = Settings()
