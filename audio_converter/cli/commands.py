"""CLI command implementations for Audio Converter."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from tqdm import tqdm

from audio_converter.audio import AudioFileDiscovery
from audio_converter.cli.utils import _sanitize_path, _ensure_output_path, _batch_output_path
from audio_converter.config import (
    CliOverrides,
    ConfigGenerator,
    ConfigLoader,
    ConfigResolver,
    ConverterConfig,
    OutputFormat,
)
from audio_converter.constants import VERSION, DEFAULT_OUTPUT_SUFFIX
from audio_converter.converter import AudioConverter
from audio_converter.exceptions import ConverterError, ConfigError
from audio_converter.output import ConsoleOutputHandler

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"Audio Converter v{VERSION}")
        raise typer.Exit()


# Options shared by the convert and batch commands
FormatOption = Annotated[
    OutputFormat | None,
    typer.Option("--format", "-f", case_sensitive=False, help="Output array format"),
]
SampleRateOption = Annotated[
    int | None, typer.Option("--sample-rate", "-s", min=1, help="Target sample rate (Hz)")
]
ChannelsOption = Annotated[
    int | None, typer.Option("--channels", "-c", min=0, help="Channel count (1=mono, 2=stereo)")
]
GainOption = Annotated[float | None, typer.Option("--gain", "-g", help="Volume gain (dB)")]
NormalizeOption = Annotated[
    bool | None, typer.Option("--normalize/--no-normalize", help="Peak-normalize to 1.0")
]
ChannelAwareOption = Annotated[
    bool | None,
    typer.Option("--channel-aware/--interleaved", help="Resample each channel separately"),
]
StartTimeOption = Annotated[
    float | None, typer.Option("--start-time", min=0.0, help="Audio start time (seconds)")
]
DurationOption = Annotated[
    float | None, typer.Option("--duration", min=0.0, help="Audio duration (seconds)")
]
ArrayNameOption = Annotated[str | None, typer.Option("--array-name", help="Identifier of the emitted array")]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-C", dir_okay=False, resolve_path=True, help="Configuration file (YAML or JSON)"),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose debug output")]
VersionOption = Annotated[
    bool | None,
    typer.Option(
        "--version",
        callback=version_callback,
        is_eager=True,  # Critical: process before other options
        help="Show version and exit.",
    ),
]


def _configure_logging(verbose: bool) -> None:
    """Configure logging level based on verbose flag."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)


def _load_config(config_path: Path | None, overrides: CliOverrides) -> ConverterConfig:
    """Resolve, load and merge the effective configuration.

    Raises:
        ConfigError: If the file is missing or invalid, or an override is invalid
    """
    try:
        resolved = ConfigResolver(config_path).resolve()
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e

    loader = ConfigLoader.from_path(resolved)
    config = loader.merge_overrides(loader.load(), overrides)
    logger.debug(f"Configuration ({loader.source_description}): {config.model_dump()}")
    return config


def convert(
        input_path: Annotated[Path, typer.Argument(
            exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="Audio file to convert (WAV, FLAC, OGG, MP3, ...)"
        )],
        output: Annotated[Path | None, typer.Option(
            "--output", "-o", dir_okay=False, resolve_path=True,
            help="Output file (.rs and other suffixes: source text, .json, .npy)",
        )] = None,
        output_format: FormatOption = None,
        sample_rate: SampleRateOption = None,
        channels: ChannelsOption = None,
        gain: GainOption = None,
        normalize: NormalizeOption = None,
        channel_aware: ChannelAwareOption = None,
        start_time: StartTimeOption = None,
        duration: DurationOption = None,
        array_name: ArrayNameOption = None,
        config: ConfigOption = None,
        verbose: VerboseOption = False,
        version: VersionOption = None,
) -> None:
    """Convert an audio file into a sample array declaration."""

    _configure_logging(verbose)
    console = Console()
    handler = ConsoleOutputHandler(console)

    input_file = _sanitize_path(input_path)
    output_path = _ensure_output_path(input_file, output)

    try:
        overrides = CliOverrides(
            output_format=output_format,
            target_sample_rate=sample_rate,
            target_channel_count=channels,
            gain_db=gain,
            normalize=normalize,
            channel_aware_resampling=channel_aware,
            array_name=array_name,
        )
        converter_config = _load_config(config, overrides)

        converter = AudioConverter(converter_config, console=console, output_handler=handler)
        converter.convert_file(input_file, output_path, start_time=start_time, duration=duration)
    except ConverterError as e:
        handler.error(str(e))
        raise typer.Exit(code=1)

    handler.success("Done!")


def batch(
        input_dir: Annotated[Path, typer.Argument(
            exists=True, file_okay=False, dir_okay=True, readable=True, resolve_path=True,
            help="Directory containing audio files"
        )],
        output_dir: Annotated[Path, typer.Option(
            "--output", "-o", file_okay=False, dir_okay=True, resolve_path=True,
            help="Directory for the generated arrays",
        )],
        suffix: Annotated[str, typer.Option(
            "--suffix", help="Output file suffix (.rs, .json, .npy, ...)"
        )] = DEFAULT_OUTPUT_SUFFIX,
        output_format: FormatOption = None,
        sample_rate: SampleRateOption = None,
        channels: ChannelsOption = None,
        gain: GainOption = None,
        normalize: NormalizeOption = None,
        channel_aware: ChannelAwareOption = None,
        start_time: StartTimeOption = None,
        duration: DurationOption = None,
        config: ConfigOption = None,
        verbose: VerboseOption = False,
) -> None:
    """Convert every audio file in a directory, one array file per input."""

    _configure_logging(verbose)
    console = Console()
    handler = ConsoleOutputHandler(console)

    try:
        overrides = CliOverrides(
            output_format=output_format,
            target_sample_rate=sample_rate,
            target_channel_count=channels,
            gain_db=gain,
            normalize=normalize,
            channel_aware_resampling=channel_aware,
        )
        converter_config = _load_config(config, overrides)
    except ConverterError as e:
        handler.error(str(e))
        raise typer.Exit(code=1)

    files = AudioFileDiscovery(_sanitize_path(input_dir)).discover_files()
    if not files:
        handler.error(f"No audio files found in {input_dir}")
        raise typer.Exit(code=1)

    # Per-file messages would drown the progress bar
    quiet_handler = ConsoleOutputHandler(console, quiet=True)
    converter = AudioConverter(converter_config, output_handler=quiet_handler)
    failures: list[tuple[Path, str]] = []

    for path in tqdm(files, desc="Converting files", unit="file"):
        try:
            converter.convert_file(
                path,
                _batch_output_path(path, output_dir, suffix),
                start_time=start_time,
                duration=duration,
            )
        except ConverterError as e:
            logger.debug(f"Conversion failed for {path}", exc_info=True)
            failures.append((path, str(e)))

    for path, message in failures:
        handler.error(f"{path.name}: {message}")

    converted = len(files) - len(failures)
    handler.info(f"Converted {converted} of {len(files)} file(s) into {output_dir}")
    if failures:
        raise typer.Exit(code=1)


def init_config(
        path: Annotated[Path | None, typer.Argument(
            dir_okay=False, resolve_path=True, help="Where to write the configuration file"
        )] = None,
        force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file")] = False,
) -> None:
    """Generate an example configuration file."""

    console = Console()
    handler = ConsoleOutputHandler(console)
    target = path or ConfigResolver.get_default_path()

    if target.exists() and not force:
        handler.error(f"{target} already exists (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        ConfigGenerator().generate(target)
    except OSError as e:
        handler.error(f"Could not write {target}: {e}")
        raise typer.Exit(code=1)
    handler.info(f"Configuration written to {target}")


def validate_config(
        path: Annotated[Path | None, typer.Argument(
            dir_okay=False, resolve_path=True, help="Configuration file to validate"
        )] = None,
) -> None:
    """Validate a configuration file and print the effective settings."""

    console = Console()
    handler = ConsoleOutputHandler(console)

    try:
        resolved = ConfigResolver(path).resolve()
    except FileNotFoundError as e:
        handler.error(str(e))
        raise typer.Exit(code=1)
    if resolved is None:
        handler.warning("No configuration file found; built-in defaults are in effect.")
        return

    try:
        loaded = ConfigLoader.from_yaml(resolved).load()
    except ConfigError as e:
        handler.error(str(e))
        raise typer.Exit(code=1)

    transform = loaded.transform
    handler.success(f"{resolved} is valid.")
    handler.info(
        f"format={transform.output_format.value}, gain_db={transform.gain_db}, "
        f"sample_rate={transform.target_sample_rate}, channels={transform.target_channel_count}, "
        f"normalize={transform.normalize}"
    )
