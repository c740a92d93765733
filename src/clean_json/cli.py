"""Command-line interface for clean-json."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .json_processor import JSONProcessor
from .serializer import JSONSerializer
from .types import FormatOptions, IndentType, JSONParseError, ProcessingError

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

input_argument = click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
output_option = click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path),
                             help="Write the result to this file instead of stdout")


def _emit(text: str, output: Optional[Path]) -> None:
    if output:
        output.write_text(text, encoding="utf-8")
        click.echo(f"✅ Wrote {output}", err=True)
    else:
        click.echo(text)


def _fail(error: ProcessingError) -> None:
    if isinstance(error, JSONParseError):
        click.echo(f"❌ Error: {error.message} at line {error.line}, column {error.column}", err=True)
    else:
        click.echo(f"❌ Error: {error.message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def main(verbose: bool):
    """clean-json - validate, format and convert JSON documents."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


@main.command()
@input_argument
def validate(input_file):
    """Validate a JSON document and explain the first syntax error."""
    result = JSONProcessor().validate(input_file.read())

    if result.valid:
        click.echo("✅ Valid JSON")
        return

    error = result.error
    click.echo(f"❌ {error.message} (line {error.line}, column {error.column})")
    if error.snippet:
        click.echo(error.snippet)
    if error.suggestion:
        click.echo(f"💡 {error.suggestion}")
    sys.exit(1)


@main.command(name="format")
@input_argument
@click.option("--indent", "-i", type=click.IntRange(min=1), default=2, show_default=True,
              help="Spaces per indentation level")
@click.option("--tab", is_flag=True, help="Indent with tabs instead of spaces")
@click.option("--sort-keys", is_flag=True, help="Sort object keys")
@output_option
def format_command(input_file, indent: int, tab: bool, sort_keys: bool, output: Optional[Path]):
    """Pretty-print a JSON document."""
    options = FormatOptions(
        indent=indent,
        indent_type=IndentType.TAB if tab else IndentType.SPACE,
        sort_keys=sort_keys
    )
    try:
        _emit(JSONProcessor().format(input_file.read(), options), output)
    except ProcessingError as e:
        _fail(e)


@main.command()
@input_argument
@click.option("--stats", is_flag=True, help="Report compression statistics on stderr")
@output_option
def compress(input_file, stats: bool, output: Optional[Path]):
    """Remove all whitespace from a JSON document."""
    processor = JSONProcessor()
    text = input_file.read()
    try:
        compressed = processor.compress(text)
    except ProcessingError as e:
        _fail(e)
        return

    _emit(compressed, output)
    if stats:
        click.echo(f"📊 {processor.compression_stats(text, compressed).summary()}", err=True)


@main.command()
@input_argument
@click.option("--mode", type=click.Choice(["auto", "to-object", "to-string"]), default="auto",
              show_default=True, help="Conversion direction")
@output_option
def convert(input_file, mode: str, output: Optional[Path]):
    """Convert between a JSON value and a JSON-encoded string."""
    processor = JSONProcessor()
    text = input_file.read()
    try:
        if mode == "to-object":
            result = processor.string_to_object(text)
        elif mode == "to-string":
            result = processor.object_to_string(text)
        else:
            result = processor.auto_convert(text).output
    except ProcessingError as e:
        _fail(e)
        return

    _emit(result, output)


@main.command()
@input_argument
@click.option("--decode", is_flag=True, help="Decode \\uXXXX escapes instead of producing them")
@output_option
def unicode(input_file, decode: bool, output: Optional[Path]):
    """Escape or unescape non-ASCII characters in string values."""
    processor = JSONProcessor()
    text = input_file.read()
    try:
        result = processor.from_unicode(text) if decode else processor.to_unicode(text)
    except ProcessingError as e:
        _fail(e)
        return

    _emit(result, output)


@main.command(name="strip-comments")
@input_argument
@output_option
def strip_comments(input_file, output: Optional[Path]):
    """Remove // and /* */ comments."""
    try:
        _emit(JSONProcessor().remove_comments(input_file.read()), output)
    except ProcessingError as e:
        _fail(e)


@main.command(name="to-xml")
@input_argument
@click.option("--root", default="root", show_default=True, help="Name of the root element")
@output_option
def to_xml(input_file, root: str, output: Optional[Path]):
    """Convert a JSON document to XML."""
    try:
        _emit(JSONProcessor().to_xml(input_file.read(), root), output)
    except ProcessingError as e:
        _fail(e)


@main.command(name="to-csv")
@input_argument
@click.option("--delimiter", "-d", default=",", show_default=True, help="Field delimiter")
@output_option
def to_csv(input_file, delimiter: str, output: Optional[Path]):
    """Convert a JSON array or object to CSV."""
    try:
        _emit(JSONProcessor().to_csv(input_file.read(), delimiter), output)
    except ProcessingError as e:
        _fail(e)


@main.command()
@input_argument
def paths(input_file):
    """List every path in a JSON document."""
    try:
        for path in JSONProcessor().get_all_paths(input_file.read()):
            click.echo(path)
    except ProcessingError as e:
        _fail(e)


@main.command()
@click.argument("path")
@input_argument
def get(path: str, input_file):
    """Print the value at PATH as compact JSON."""
    try:
        value = JSONProcessor().get_value_at_path(input_file.read(), path)
    except ProcessingError as e:
        _fail(e)
        return

    click.echo(JSONSerializer().serialize(value))


if __name__ == '__main__':
    main()
