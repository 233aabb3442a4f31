"""Main entry point for the to-do list manager."""
from pathlib import Path
from typing import Optional

import click

import theme
from cli import CLI
from config import LOG_LEVELS, Settings
from logconf import setup_logging
from manager import TaskManager


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Log level (default: TODOLIST_LOG_LEVEL or WARNING).")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path),
              help="Write logs to this file instead of stderr (default: TODOLIST_LOG_FILE).")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
def main(log_level: Optional[str], log_file: Optional[Path], no_color: bool) -> None:
    """Interactive to-do list with undo/redo. Tasks live only for this session."""
    settings = Settings.from_env()
    setup_logging(log_level or settings.log_level, log_file or settings.log_file)
    if no_color or not settings.color:
        theme.disable()
    CLI(TaskManager()).run()


if __name__ == "__main__":
    main()
