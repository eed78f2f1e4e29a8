import click

from fstree import __version__
from fstree.core.config import FstreeConfig
from fstree.core.stats import format_stats
from fstree.core.tree import render_tree
from fstree.core.walker import walk
from fstree.utils.error_handling import (
    ConfigError,
    FstreeError,
    OutputError,
    ValidationError,
    handle_error,
)
from fstree.utils.logging import debug_timing, log_configuration, setup_logging


def _flag(value: bool):
    # A flag can only switch a configured default on, never off.
    return True if value else None


def write_output(output_path: str, text: str) -> None:
    """Write the rendered tree and summary to ``output_path``."""
    try:
        # Undecodable file names come back from scandir as lone surrogates.
        f = open(output_path, "w", encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        raise OutputError(f"Cannot create file: {output_path}", path=output_path, reason=str(e))
    with f:
        try:
            f.write(text)
        except OSError as e:
            raise OutputError(f"Cannot write to file: {output_path}", path=output_path, reason=str(e))


def _fail(ctx: click.Context, exc: FstreeError) -> None:
    handle_error(exc)
    message = exc.message
    if isinstance(exc, (ValidationError, ConfigError)):
        message = f"fstree: {message}"
    click.echo(message, err=True)
    ctx.exit(exc.exit_code)


@click.command(
    "fstree",
    options_metavar="[options...]",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("target", default=".", metavar="<target>")
@click.option("-a", "all_files", is_flag=True, help="All files are printed (included hidden files).")
@click.option("-d", "dirs_only", is_flag=True, help="List directories only.")
@click.option("-f", "full_path", is_flag=True, help="Prints the full path prefix for each file.")
@click.option("-p", "permissions", is_flag=True, help="Print the file type and permissions for each file.")
@click.option("-L", "max_depth", type=int, default=None, help="Max display depth of the directory tree.")
@click.option(
    "--filelimit",
    "file_limit",
    type=int,
    default=None,
    help="Do not descend directories that contain more than # entries.",
)
@click.option("-o", "output", default=None, metavar="FILENAME", help="Send output to filename.")
@click.option("--config", "config_path", default=None, help="Path to a YAML config file with default options.")
@click.option("--log-level", default=None, help="Diagnostics log level (written to stderr).")
@click.option("--log-file", default=None, help="Also write diagnostics to this file.")
@click.option("-v", "--verbose", is_flag=True, help="Shortcut for --log-level DEBUG.")
@click.version_option(__version__, "--version", prog_name="fstree", message="%(prog)s: %(version)s")
@click.pass_context
def cli(
    ctx,
    target,
    all_files,
    dirs_only,
    full_path,
    permissions,
    max_depth,
    file_limit,
    output,
    config_path,
    log_level,
    log_file,
    verbose,
):
    """Render the directory tree rooted at <target> (default: current directory)."""
    try:
        config = FstreeConfig.load(config_path)
        setup_logging(
            log_level or config.log_level,
            log_file or config.log_file,
            debug_mode=verbose,
        )
        options = config.to_options(
            all_files=_flag(all_files),
            dirs_only=_flag(dirs_only),
            full_path=_flag(full_path),
            permissions=_flag(permissions),
            max_depth=max_depth,
            file_limit=file_limit,
        )
        log_configuration({"target": target, "output": output, **options.to_dict()})

        result = walk(target, options)
        for notice in result.notices:
            click.echo(notice)

        with debug_timing("render"):
            text = render_tree(result.tree) + format_stats(result.stats) + "\n"

        if output:
            write_output(output, text)
        else:
            click.echo(text, nl=False)
    except FstreeError as exc:
        _fail(ctx, exc)


if __name__ == "__main__":
    cli()
