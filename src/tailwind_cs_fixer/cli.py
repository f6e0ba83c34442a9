"""
Main CLI entry point for Tailwind CS Fixer
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from tailwind_cs_fixer import __version__
from tailwind_cs_fixer.commands.fix import FixCommand
from tailwind_cs_fixer.core.backup_manager import BackupManager
from tailwind_cs_fixer.core.base_processor import ProcessingStatus
from tailwind_cs_fixer.core.config import PROJECT_CONFIG_NAME, Config, parse_extensions
from tailwind_cs_fixer.core.sorter import TailwindClassSorter

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

DIFF_STYLES = {"+": "green", "-": "red", "@": "cyan"}


def _print_diff(diff: str) -> None:
    """Render a unified diff with colors when the output is a terminal"""
    console = Console(highlight=False)
    for line in diff.splitlines():
        style = None
        if not line.startswith(("+++", "---")):
            style = DIFF_STYLES.get(line[:1])
        console.print(f"    {line}", style=style, markup=False, soft_wrap=True)


@click.group(invoke_without_command=True)
@click.version_option(
    version=__version__,
    prog_name="tailwind-cs-fixer",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Read settings from this file only",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log debug messages",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress log output",
)
@click.pass_context
def cli(
    ctx,
    config: str | None,
    verbose: bool,
    quiet: bool,
):
    """Tailwind CS Fixer

    Sorts Tailwind CSS classes in HTML and Twig templates following the
    order of Tailwind's official Prettier plugin. Runs `fix` on the current
    directory when no command is given.
    """
    ctx.ensure_object(dict)

    # Load configuration
    if config:
        ctx.obj["config"] = Config.from_file(Path(config))
    else:
        ctx.obj["config"] = Config.load_hierarchy(Path.cwd())

    # Apply CLI flags
    if verbose or ctx.obj["config"].verbose:
        ctx.obj["config"].verbose = True
        logging.getLogger().setLevel(logging.DEBUG)

    if quiet:
        ctx.obj["config"].quiet = True
        logging.getLogger().setLevel(logging.WARNING)

    if ctx.invoked_subcommand is None:
        ctx.invoke(fix)


@cli.command()
@click.argument(
    "path",
    type=click.Path(),
    default=".",
    required=False,
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show what would be fixed without writing",
)
@click.option(
    "--diff",
    "show_diff",
    is_flag=True,
    help="Show diff of changes",
)
@click.option(
    "--extensions",
    "-e",
    help="File extensions to process (comma-separated), e.g. html,twig",
)
@click.option(
    "--backup",
    is_flag=True,
    help="Back up files before rewriting them",
)
@click.pass_context
def fix(
    ctx,
    path: str = ".",
    dry_run: bool = False,
    show_diff: bool = False,
    extensions: str | None = None,
    backup: bool = False,
):
    """Fix class order in a file or directory

    Examples:
        tailwind-cs-fixer fix ./templates
        tailwind-cs-fixer fix ./templates --dry-run --diff
        tailwind-cs-fixer fix page.html.twig -e twig
    """
    config = ctx.obj["config"]
    config.dry_run = config.dry_run or dry_run
    config.show_diff = config.show_diff or show_diff
    if extensions:
        config.fixer.extensions = parse_extensions(extensions)
    if backup:
        config.backup.enabled = True

    errors = config.validate()
    if errors:
        for error in errors:
            click.echo(f"❌ {error}", err=True)
        sys.exit(1)

    path_obj = Path(path)
    command = FixCommand(config)

    if not path_obj.exists():
        click.echo(f"❌ Path does not exist: {path}", err=True)
        sys.exit(1)

    files = command.find_files(path_obj, config.fixer.extensions)
    if not files:
        click.echo("⚠️  No files found to process")
        sys.exit(0)

    click.echo("\nTailwind CS Fixer")
    click.echo("=" * 60)
    click.echo(f"Processing {len(files)} file(s)...")
    if config.dry_run:
        click.echo("DRY RUN - No files will be modified")

    report = command.execute(path_obj, files)

    for result in report.results:
        display_path = _display_path(result.file_path, path_obj)
        if result.changed:
            click.echo(f"✓ {display_path}")
            if result.diff:
                _print_diff(result.diff)
        elif result.status == ProcessingStatus.ERROR:
            click.echo(f"✗ {display_path}: {result.error_message}")

    summary = f"Fixed {report.fixed_count} file(s)"
    if report.error_count:
        summary += f" ({report.error_count} error(s))"
    click.echo(f"\n✅ {summary}")
    sys.exit(0)


def _display_path(file_path: Path, root: Path) -> str:
    """Path relative to the processed directory, file name for single files"""
    if root.is_dir():
        try:
            return str(file_path.relative_to(root))
        except ValueError:
            pass
    return file_path.name


@cli.command(name="sort")
@click.argument("classes", nargs=-1)
def sort_classes(classes: tuple[str, ...]):
    """Sort a class string and print it

    Reads standard input when no classes (or "-") are given.

    Examples:
        tailwind-cs-fixer sort "p-4 flex text-center"
        echo "p-4 flex" | tailwind-cs-fixer sort
    """
    if not classes or classes == ("-",):
        value = click.get_text_stream("stdin").read()
    else:
        value = " ".join(classes)

    click.echo(TailwindClassSorter().sort(value))


@cli.command()
@click.pass_context
def init(ctx):
    """Write default settings to the current directory

    The file is named .tailwind-cs-fixer.yaml and is picked up by later runs.
    """
    config_path = Path.cwd() / PROJECT_CONFIG_NAME

    if config_path.exists():
        click.confirm(f"{config_path} already exists. Overwrite?", abort=True)

    Config().save(config_path)

    click.echo(f"Wrote default settings to {config_path}")
    click.echo("Adjust extensions, excluded_dirs and backup settings there.")


@cli.command()
@click.option(
    "--sessions",
    is_flag=True,
    help="Show stored backup sessions",
)
@click.option(
    "--restore",
    help="Put back the templates of this session",
)
@click.option(
    "--clean",
    is_flag=True,
    help="Delete sessions beyond keep_sessions",
)
@click.option(
    "--yes",
    "-y",
    is_flag=True,
    help="Do not ask for confirmation",
)
@click.pass_context
def backup(
    ctx,
    sessions: bool,
    restore: str | None,
    clean: bool,
    yes: bool,
):
    """Manage backup sessions

    View, restore, or clean backup sessions created by `fix --backup`.
    """
    config = ctx.obj["config"]

    manager = BackupManager(
        backup_dir=config.backup.directory,
        compression=config.backup.compression,
        keep_sessions=config.backup.keep_sessions,
    )

    if sessions:
        all_sessions = manager.list_sessions()
        if not all_sessions:
            click.echo("No backup sessions found.")
        else:
            click.echo(f"Found {len(all_sessions)} backup sessions:")
            for session in all_sessions:
                click.echo(f"  - {session['session_id']} ({session['timestamp']})")
                if "files" in session:
                    click.echo(f"    Files: {len(session['files'])}")

    elif restore:
        if not yes:
            click.confirm(
                f"Overwrite templates with the copies in {restore}?", abort=True
            )
        if manager.restore_session(restore):
            click.echo(f"Successfully restored session: {restore}")
        else:
            click.echo(f"Failed to restore session: {restore}", err=True)
            sys.exit(1)

    elif clean:
        if not yes:
            click.confirm(
                f"Keep only the {config.backup.keep_sessions} newest backup sessions?",
                abort=True,
            )
        removed = manager.cleanup_old_sessions()
        click.echo(f"Cleaned {removed} old backup session(s).")

    else:
        click.echo("Use --sessions, --restore, or --clean")


def main():
    """Main entry point"""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.", err=True)
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if "--verbose" in sys.argv or "-v" in sys.argv:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
