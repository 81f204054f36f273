"""Custom exceptions for clip2vault."""


class Clip2VaultError(Exception):
    """Base exception for clip2vault."""


class ConfigError(Clip2VaultError):
    """Raised when configuration is missing or invalid."""


class EmptyClipboardError(Clip2VaultError):
    """Raised when the clipboard holds no usable text."""


class FetchError(Clip2VaultError):
    """Raised when a page cannot be fetched (non-200 status or empty body)."""


class ConversionError(FetchError):
    """Raised when fetched HTML cannot be parsed or converted to Markdown."""


class DownloadError(Clip2VaultError):
    """Raised when a single image download fails."""


class FolderCreationError(Clip2VaultError):
    """Raised when a vault folder cannot be created."""


class WriteError(Clip2VaultError):
    """Raised when a file cannot be written to the vault."""


class LLMError(Clip2VaultError):
    """Raised when LLM API calls fail."""
