"""Command-line entry point for the semtag driver."""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click
from semver import Version

from semtag.binding import set_up_repo
from semtag.config import load_config
from semtag.context import DriverContext, create_context
from semtag.errors import SemtagError
from semtag.output import user_output
from semtag.reader import read_version
from semtag.version import format_tag_name
from semtag.writer import ref_source_from_params, write_version

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@contextmanager
def _reporting_driver_errors() -> Iterator[None]:
    """Turn driver errors into an ``Error:`` line on stderr and exit code 1."""
    try:
        yield
    except SemtagError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="semtag")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="TOML file with driver settings",
)
@click.option("--uri", help="Remote repository URI")
@click.option("--repository", help="Path to an existing local checkout")
@click.option("--branch", help="Only consider tags merged into this branch")
@click.option("--prefix", help="Tag prefix (default: v)")
@click.option("--work-dir", help="Where to create the working copy for --uri")
@click.option("--dry-run", is_flag=True, help="Print tag mutations instead of running them")
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool,
    config_path: Path | None,
    uri: str | None,
    repository: str | None,
    branch: str | None,
    prefix: str | None,
    work_dir: str | None,
    dry_run: bool,
) -> None:
    """Read and publish semantic versions stored as git tags."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        with _reporting_driver_errors():
            config = load_config(
                config_path,
                overrides={
                    "uri": uri,
                    "repository": repository,
                    "branch": branch,
                    "prefix": prefix,
                    "work_dir": work_dir,
                },
            )
        ctx.obj = create_context(config, dry_run=dry_run)


@cli.command("setup")
@click.pass_obj
def setup_cmd(ctx: DriverContext) -> None:
    """Prepare the working copy and print its path."""
    with _reporting_driver_errors():
        binding = set_up_repo(ctx)
    click.echo(str(binding.work_dir))


@cli.command("check")
@click.pass_obj
def check_cmd(ctx: DriverContext) -> None:
    """Print the current version as JSON."""
    with _reporting_driver_errors():
        binding = set_up_repo(ctx)
        result = read_version(ctx, binding)
    click.echo(json.dumps({"version": str(result.version), "found": result.found}))


@cli.command("current")
@click.pass_obj
def current_cmd(ctx: DriverContext) -> None:
    """Print the tag name of the current version.

    Exits with status 1 when the repository has no tags yet.
    """
    with _reporting_driver_errors():
        binding = set_up_repo(ctx)
        result = read_version(ctx, binding)
    if not result.found:
        user_output("No version tags found")
        raise SystemExit(1)
    click.echo(format_tag_name(binding.prefix, result.version))


def _parse_version(ctx: click.Context, param: click.Parameter, value: str) -> Version:
    try:
        return Version.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@cli.command("put")
@click.argument("version", callback=_parse_version)
@click.option(
    "--repo",
    type=click.Path(file_okay=False, path_type=Path),
    help="Tag the HEAD commit of this checkout instead of the remote branch",
)
@click.pass_obj
def put_cmd(ctx: DriverContext, version: Version, repo: Path | None) -> None:
    """Publish VERSION as an annotated tag.

    Examples:

    \b
      # Tag the tip of the configured branch (or remote HEAD)
      semtag --uri git@example.com:org/repo.git put 1.4.0

    \b
      # Tag the commit checked out in ./source
      semtag --uri git@example.com:org/repo.git put 1.4.0 --repo ./source
    """
    params = {"repo": str(repo)} if repo is not None else None
    with _reporting_driver_errors():
        binding = set_up_repo(ctx)
        # The commit to tag must exist locally; a fresh working copy has nothing yet
        ctx.git.remote.fetch_tags(binding.work_dir)
        source = ref_source_from_params(params, binding.branch)
        published = write_version(ctx, binding, version, source=source)
    if not published:
        user_output("Push rejected by remote; another publisher may have won the race")
    click.echo(
        json.dumps(
            {
                "version": str(version),
                "tag": format_tag_name(binding.prefix, version),
                "published": published,
            }
        )
    )


def main() -> None:
    """CLI entry point used by the `semtag` console script."""
    cli()
