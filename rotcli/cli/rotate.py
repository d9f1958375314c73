import logging
from typing import Optional

import click
from fire import decorators
from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.util import ClassNotFound

from rotcli.core.exceptions import RotException
from rotcli.core.rotator import rotate
from rotcli.core.textfile import DEFAULT_ENCODING, RotationResult, TextFile, rotate_file
from rotcli.utils.tools import format_size

log = logging.getLogger("rotcli.cli.rotate")


class RotateCommand:
    # paths and text are taken verbatim, fire would otherwise turn "1.50" into 1.5 or "None" into None
    @decorators.SetParseFns(in_file=str, out_file=str)
    def apply(
        self,
        in_file: str,
        out_file: Optional[str] = None,
        encoding: str = DEFAULT_ENCODING,
        binary: bool = False,
        verbose: bool = False,
    ) -> int:
        """Encrypt/decrypt a file with ROT13, writing to out_file or back to in_file"""
        log.debug(
            f"apply: (in_file={in_file}, out_file={out_file}, encoding={encoding}, binary={binary}, verbose={verbose})"
        )
        if out_file is None:
            out_file = in_file

        if verbose:
            click.echo(f"File to encrypt/decrypt: {in_file}")
            click.echo(f"File to save to: {out_file}")
        else:
            click.echo(f"Encrypting/decrypting {in_file} to {out_file}... ", nl=False)

        try:
            if verbose:
                result = self._rotate_file_verbose(in_file, out_file, encoding=encoding, binary=binary)
            else:
                result = rotate_file(in_file, out_file, encoding=encoding, binary=binary)
        except RotException as e:
            # finish the pending "... " line before reporting
            click.echo()
            click.secho(f"Error: {e}", fg="red", err=True)
            return 1

        if verbose:
            self._print_summary(result)
            click.secho("Program completed.", fg="green")
            return 0

        click.secho("success.", fg="green")
        return 0

    @decorators.SetParseFns(in_file=str)
    def show(self, in_file: str, encoding: str = DEFAULT_ENCODING, color: bool = False) -> int:
        """Print the ROT13 of a file without modifying it"""
        log.debug(f"show: (in_file={in_file}, encoding={encoding}, color={color})")
        source = TextFile(in_file, encoding=encoding)

        try:
            rotated = rotate(source.read())
        except RotException as e:
            click.secho(f"Error: {e}", fg="red", err=True)
            return 1

        if color:
            click.echo(highlight(rotated, self._get_lexer(source), TerminalFormatter()), nl=False)
            return 0

        click.echo(rotated, nl=False)
        return 0

    @decorators.SetParseFns(value=str)
    def text(self, value: str) -> int:
        """Print the ROT13 of a string given on the command line"""
        log.debug(f"text: {value}")
        click.echo(rotate(value))
        return 0

    @staticmethod
    def _get_lexer(source: TextFile):
        try:
            return get_lexer_for_filename(source.path.name)
        except ClassNotFound:
            return TextLexer()

    @staticmethod
    def _rotate_file_verbose(in_file: str, out_file: str, encoding: str, binary: bool) -> RotationResult:
        source = TextFile(in_file, encoding=encoding)
        destination = TextFile(out_file, encoding=encoding)

        click.echo(f"Reading {source.name}... ", nl=False)
        original = source.read_bytes() if binary else source.read()
        click.echo("complete!")

        click.echo("Encrypting/decrypting text... ", nl=False)
        rotated = rotate(original)
        click.echo("complete!")

        click.echo(f"Writing to {destination.name}... ", nl=False)
        destination.write(rotated)
        click.echo("complete!")

        return RotationResult(source, destination, original, rotated)

    @staticmethod
    def _print_summary(result: RotationResult):
        for text_file, content in ((result.source, result.original), (result.destination, result.rotated)):
            if isinstance(content, bytes):
                size = len(content)
                content = content.decode(DEFAULT_ENCODING, errors="replace")
            else:
                size = len(content.encode(text_file.encoding))

            click.echo(f"Size of {text_file.name}: {format_size(size)}")
            click.echo(f"Contents of {text_file.name}:\n{content}")
