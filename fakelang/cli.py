# fakelang/cli.py
from functools import partial
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from .services.logging import setup_logging
from .services.storage import JsonDictionaryStore
from .config.loader import load_config, save_config
from .config.paths import get_user_config_file
from .config.schema import CipherConfig
from .core.cipher import TextCipher
from .core.corpus import load_training_corpus
from .core.generators import GenerationExhaustedError
from .core.graph_builder import GraphBuilder
from .core.models import Language
from .core.phonetics import PhoneticConverter
from . import __version__

# Failures that end a command with exit code 1
_EXPECTED_ERRORS = (OSError, ValueError, GenerationExhaustedError) # JSONDecodeError is a ValueError

# --- Typer App ---
app = typer.Typer(help="FakeLang CLI - Turn text into a reversible fake language and back.")

def version_callback(value: bool):
    if value:
        print(f"FakeLang CLI Version: {__version__}")
        raise typer.Exit()

@app.callback()
def main_options(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file (defaults to the user config file).", dir_okay=False, resolve_path=True),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True, help="Show version and exit."),
):
    """ Main callback to set up logging and configuration """
    log_level = "DEBUG" if verbose else "INFO"
    setup_logging(level=log_level, verbose=verbose)
    ctx.ensure_object(dict)
    ctx.obj["VERBOSE"] = verbose
    ctx.obj["CONFIG_PATH"] = config_path


def _get_config(ctx: typer.Context) -> CipherConfig:
    if "CONFIG" not in ctx.obj:
        ctx.obj["CONFIG"] = load_config(ctx.obj.get("CONFIG_PATH"))
    return ctx.obj["CONFIG"]


def _read_input(text: Optional[str], input_file: Optional[Path]) -> str:
    if text is not None and input_file is not None:
        logger.error("Pass either TEXT or --input, not both.")
        raise typer.Exit(code=1)
    if input_file is not None:
        return input_file.read_text(encoding='utf-8')
    if text is None:
        logger.error("Nothing to process: pass TEXT or --input.")
        raise typer.Exit(code=1)
    return text


def _write_output(result: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(result)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding='utf-8')
    logger.success(f"Result written to: {output}")


@app.command()
def encrypt(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Text to encrypt."),
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", help="Read the text from a file.", exists=True, dir_okay=False, readable=True, resolve_path=True),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the result to a file instead of stdout.", resolve_path=True),
    language: Optional[Language] = typer.Option(None, "--language", "-l", help="Language of the source text (defaults to the configured one).", case_sensitive=False),
    rewrite_dictionary: bool = typer.Option(False, "--rewrite-dictionary", help="Rebuild the fake dictionary before encrypting."),
):
    """
    Replaces every word with its fake word.
    """
    config = _get_config(ctx)
    language = language or config.default_language
    source = _read_input(text, input_file)
    try:
        cipher = TextCipher.from_config(config, language)
        result = cipher.encrypt(source, language, rewrite_dictionary=rewrite_dictionary)
    except _EXPECTED_ERRORS as e:
        logger.error(f"Encryption failed: {e}")
        raise typer.Exit(code=1)
    _write_output(result, output)


@app.command()
def decrypt(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Text to decrypt."),
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", help="Read the text from a file.", exists=True, dir_okay=False, readable=True, resolve_path=True),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the result to a file instead of stdout.", resolve_path=True),
    language: Optional[Language] = typer.Option(None, "--language", "-l", help="Language the text was encrypted from.", case_sensitive=False),
):
    """
    Replaces every known fake word with its source word.
    """
    config = _get_config(ctx)
    language = language or config.default_language
    source = _read_input(text, input_file)
    try:
        cipher = TextCipher.from_config(config, language)
        result = cipher.decrypt(source, language)
    except _EXPECTED_ERRORS as e:
        logger.error(f"Decryption failed: {e}")
        raise typer.Exit(code=1)
    _write_output(result, output)


@app.command("build-dictionary")
def build_dictionary(
    ctx: typer.Context,
    language: Optional[Language] = typer.Option(None, "--language", "-l", case_sensitive=False),
    rebuild: bool = typer.Option(False, "--rebuild", help="Ignore the cached dictionary."),
):
    """
    Builds (or loads) the fake dictionary of a language and reports its size.
    """
    config = _get_config(ctx)
    language = language or config.default_language
    try:
        cipher = TextCipher.from_config(config, language)
        dictionary = cipher.dictionary_service.get_or_create(language, force_rebuild=rebuild)
    except _EXPECTED_ERRORS as e:
        logger.error(f"Dictionary build failed: {e}")
        raise typer.Exit(code=1)
    typer.echo(f"{language.value}: {len(dictionary)} entries")


@app.command("build-graph")
def build_graph(
    ctx: typer.Context,
    language: Optional[Language] = typer.Option(None, "--language", "-l", case_sensitive=False),
    rebuild: bool = typer.Option(False, "--rebuild", help="Retrain from the corpus instead of using the cache."),
):
    """
    Trains (or restores) the character graph of a language.
    """
    config = _get_config(ctx)
    language = language or config.default_language
    data_dir = config.resolved_data_dir()
    try:
        converter = PhoneticConverter.from_data_dir(data_dir)
        store = JsonDictionaryStore(config.resolved_cache_dir())
        builder = GraphBuilder(store, converter, partial(load_training_corpus, data_dir))
        graph = builder.build(language, rebuild=rebuild)
    except _EXPECTED_ERRORS as e:
        logger.error(f"Graph build failed: {e}")
        raise typer.Exit(code=1)
    typer.echo(f"{language.value}: {len(graph)} vertices, {graph.edge_count} edges")


@app.command()
def transcribe(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to transcribe into IPA."),
):
    """
    Prints the IPA transcription of known words.
    """
    config = _get_config(ctx)
    converter = PhoneticConverter.from_data_dir(config.resolved_data_dir())
    typer.echo(converter.to_phonetic(text))


@app.command("init-config")
def init_config(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", help="Overwrite an existing configuration file."),
):
    """
    Writes the default configuration file.
    """
    target = ctx.obj.get("CONFIG_PATH") or get_user_config_file()
    if target.exists() and not force:
        logger.error(f"Configuration already exists at {target}. Use --force to overwrite.")
        raise typer.Exit(code=1)
    try:
        path = save_config(CipherConfig(), target)
    except OSError as e:
        logger.error(f"Could not write configuration: {e}")
        raise typer.Exit(code=1)
    typer.echo(str(path))


if __name__ == "__main__":
    app()
