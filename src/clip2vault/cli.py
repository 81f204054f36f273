"""CLI entry point for clip2vault."""

import logging
import sys

import click
import pyperclip

from .assembler import NoteAssembler
from .config import load_config
from .exceptions import Clip2VaultError, ConfigError, EmptyClipboardError
from .taggers import get_tagger
from .transport import RequestsHttpClient
from .vault import FileSystemVault


def _read_clipboard() -> str:
    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException as e:
        raise EmptyClipboardError(f"Could not read the clipboard: {e}") from e


@click.command()
@click.argument("text", required=False)
@click.option(
    "--stdin",
    "from_stdin",
    is_flag=True,
    default=False,
    help="Read the note text from standard input instead of the clipboard",
)
@click.option(
    "--vault-path",
    type=click.Path(file_okay=False),
    default=None,
    help="Path to Obsidian vault (default: cwd or CLIP2VAULT_VAULT_PATH env var)",
)
@click.option(
    "--inbox",
    type=str,
    default=None,
    help="Vault folder for new notes (default: Inbox)",
)
@click.option(
    "--use-ai/--no-ai",
    default=None,
    help="Suggest tags with an LLM instead of keyword matching",
)
@click.option(
    "--download-images/--no-download-images",
    default=None,
    help="Save images from clipped pages into the vault's attachment folder",
)
@click.option(
    "--provider",
    type=click.Choice(["openai", "claude"]),
    default=None,
    help="LLM provider for AI tags (default: openai, or CLIP2VAULT_LLM_PROVIDER env var)",
)
@click.option(
    "--model",
    type=str,
    default=None,
    help="LLM model to use (default: gpt-3.5-turbo or claude-3-5-haiku-latest)",
)
@click.option(
    "--open",
    "open_note",
    is_flag=True,
    default=False,
    help="Open the new note when done",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
def main(text, from_stdin, vault_path, inbox, use_ai, download_images, provider, model,
         open_note, verbose):
    """Create a note from the clipboard.

    Plain text becomes a formatted note in the inbox folder. A single URL is
    fetched and clipped to Markdown, optionally with its images saved locally.

    Example: clip2vault --vault-path ~/Notes --download-images
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load config
    try:
        config = load_config(
            vault_path=vault_path,
            inbox_folder=inbox,
            use_ai=use_ai,
            download_images=download_images,
            provider=provider,
            model=model,
            verbose=verbose,
        )
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    if verbose:
        click.echo(f"Vault path: {config.vault_path}")
        if config.use_ai:
            click.echo(f"Tagging: {config.llm_provider} ({config.default_model})")

    vault = FileSystemVault(config.vault_path)

    # Initialize tagging
    try:
        tagger = get_tagger(config, vault)
    except Exception as e:
        click.echo(f"Failed to initialize LLM provider: {e}", err=True)
        sys.exit(2)

    opener = None
    if open_note:
        def opener(path):
            click.launch(str(config.vault_path / path))

    http = RequestsHttpClient()
    assembler = NoteAssembler(
        config,
        vault,
        http,
        tagger,
        notify=click.echo,
        opener=opener,
    )

    try:
        if text is not None:
            clipboard = text
        elif from_stdin:
            clipboard = click.get_text_stream("stdin").read()
        else:
            clipboard = _read_clipboard()
        assembler.create_note(clipboard)
    except Clip2VaultError as e:
        click.echo(f"Error creating note: {e}", err=True)
        sys.exit(1)
    finally:
        http.close()
