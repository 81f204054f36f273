"""Configuration loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Config:
    """Application configuration."""

    vault_path: Path = field(default_factory=Path.cwd)
    inbox_folder: str = "Inbox"
    use_ai: bool = False
    api_key: str = ""
    download_images: bool = False
    llm_provider: str = "openai"
    model: str = ""
    verbose: bool = False

    @property
    def default_model(self) -> str:
        if self.model:
            return self.model
        if self.llm_provider == "claude":
            return "claude-3-5-haiku-latest"
        return "gpt-3.5-turbo"

    def validate(self) -> None:
        """Validate required configuration."""
        if self.llm_provider not in ("claude", "openai"):
            raise ConfigError(
                f"Unknown LLM provider: {self.llm_provider}. Use 'claude' or 'openai'."
            )
        if not self.inbox_folder.strip():
            raise ConfigError("Inbox folder cannot be empty.")
        if self.vault_path.exists() and not self.vault_path.is_dir():
            raise ConfigError(f"Vault path is not a directory: {self.vault_path}")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def load_config(
    vault_path: Optional[str] = None,
    inbox_folder: Optional[str] = None,
    use_ai: Optional[bool] = None,
    download_images: Optional[bool] = None,
    provider: Optional[str] = None,
    model: Optional[str] = None,
    verbose: bool = False,
) -> Config:
    """Load config from .env and apply CLI overrides."""
    load_dotenv()

    llm_provider = provider or os.getenv("CLIP2VAULT_LLM_PROVIDER", "openai")
    if llm_provider == "claude":
        api_key = os.getenv("ANTHROPIC_API_KEY", "")
    else:
        api_key = os.getenv("OPENAI_API_KEY", "")

    config = Config(
        vault_path=Path(vault_path) if vault_path else Path(
            os.getenv("CLIP2VAULT_VAULT_PATH", str(Path.cwd()))
        ),
        inbox_folder=inbox_folder or os.getenv("CLIP2VAULT_INBOX_FOLDER", "Inbox"),
        use_ai=use_ai if use_ai is not None else _env_flag("CLIP2VAULT_USE_AI"),
        api_key=api_key,
        download_images=(
            download_images
            if download_images is not None
            else _env_flag("CLIP2VAULT_DOWNLOAD_IMAGES")
        ),
        llm_provider=llm_provider,
        model=model or os.getenv("CLIP2VAULT_MODEL", ""),
        verbose=verbose,
    )

    config.validate()
    return config
