"""
Command-line interface for groqapi.

Provides CLI commands for chat, model listing, audio and vision requests.
"""

import functools
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

import click
from pydantic import ValidationError

from . import __version__
from .builders import extract_content_from_completion
from .client import Groq
from .config import API_KEY_ENV, BASE_URL_ENV, VISION_MODEL_90B
from .exceptions import GroqConfigError, GroqError
from .types import ModelList

DEFAULT_CHAT_MODEL = "llama-3.3-70b-versatile"
DEFAULT_AUDIO_MODEL = "whisper-large-v3"


def with_client(f: Callable) -> Callable:
    """Decorator to inject a Groq client and handle errors/cleanup."""

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        try:
            client = Groq(api_key=ctx.obj.get("api_key"), base_url=ctx.obj.get("base_url"))
        except GroqConfigError as e:
            click.echo(f"Error: {e}", err=True)
            click.echo(f"Pass --api-key or set {API_KEY_ENV}.", err=True)
            sys.exit(1)

        try:
            return f(*args, client=client, **kwargs)
        except GroqError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        except ValidationError as e:
            click.echo(f"Error: Unexpected response from the API: {e}", err=True)
            sys.exit(1)
        finally:
            client.close()

    return wrapper


@click.group()
@click.version_option(version=__version__)
@click.option("--api-key", envvar=API_KEY_ENV, help="API key for authentication")
@click.option("--base-url", envvar=BASE_URL_ENV, help="API base URL")
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr")
@click.pass_context
def main(
    ctx: click.Context, api_key: Optional[str], base_url: Optional[str], verbose: bool
) -> None:
    """groqapi - command-line access to the Groq API."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["api_key"] = api_key
    ctx.obj["base_url"] = base_url


@main.command()
@click.argument("prompt")
@click.option("-m", "--model", default=DEFAULT_CHAT_MODEL, help="Model to use")
@click.option("-s", "--system", "system_message", help="System message")
@click.option("--stream/--no-stream", default=True, help="Stream responses")
@click.option("--temperature", default=0.7, help="Sampling temperature")
@click.pass_context
@with_client
def chat(
    ctx: click.Context,
    client: Groq,
    prompt: str,
    model: str,
    system_message: Optional[str],
    stream: bool,
    temperature: float,
) -> None:
    """Send a chat message."""
    if stream:
        for fragment in client.chat.text_stream(model, prompt, system_message, temperature):
            click.echo(fragment, nl=False)
        click.echo()  # Final newline
    else:
        click.echo(client.chat.text(model, prompt, system_message, temperature))


@main.group(name="models")
def models_group() -> None:
    """Model commands."""
    pass


@models_group.command(name="list")
@click.pass_context
@with_client
def list_models(ctx: click.Context, client: Groq) -> None:
    """List available models."""
    models = ModelList.model_validate(client.models.list())
    click.echo("Available Models:")
    click.echo("=" * 50)
    for model in models.data:
        if model.owned_by:
            click.echo(f"  {model.id} ({model.owned_by})")
        else:
            click.echo(f"  {model.id}")


def _print_audio_result(result: dict) -> None:
    if "text" in result:
        click.echo(result["text"])
    else:
        click.echo(result)


@main.command()
@click.argument("audio_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-m", "--model", default=DEFAULT_AUDIO_MODEL, help="Model to use")
@click.option("--language", help="Language of the audio (ISO-639-1)")
@click.option("--prompt", help="Text to guide the transcription")
@click.pass_context
@with_client
def transcribe(
    ctx: click.Context,
    client: Groq,
    audio_file: Path,
    model: str,
    language: Optional[str],
    prompt: Optional[str],
) -> None:
    """Transcribe an audio file."""
    with audio_file.open("rb") as f:
        result = client.audio.transcriptions.create(
            f, audio_file.name, model, prompt=prompt, language=language
        )
    _print_audio_result(result)


@main.command()
@click.argument("audio_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-m", "--model", default=DEFAULT_AUDIO_MODEL, help="Model to use")
@click.option("--prompt", help="Text to guide the translation")
@click.pass_context
@with_client
def translate(
    ctx: click.Context,
    client: Groq,
    audio_file: Path,
    model: str,
    prompt: Optional[str],
) -> None:
    """Translate an audio file into English text."""
    with audio_file.open("rb") as f:
        result = client.audio.translations.create(f, audio_file.name, model, prompt=prompt)
    _print_audio_result(result)


@main.command()
@click.argument("image")
@click.argument("prompt")
@click.option("-m", "--model", default=VISION_MODEL_90B, help="Vision model to use")
@click.pass_context
@with_client
def vision(ctx: click.Context, client: Groq, image: str, prompt: str, model: str) -> None:
    """Ask about an image given as a URL or a local path."""
    if image.startswith(("http://", "https://")):
        response = client.vision.create_with_image_url(image, prompt, model=model)
    else:
        response = client.vision.create_with_base64_image(image, prompt, model=model)

    click.echo(extract_content_from_completion(response) or "")


if __name__ == "__main__":
    main()
