import typer
from gitmirror.commands.mirror import run_mirror
from gitmirror.logging import get_logger

app = typer.Typer(
    help="[bold blue]git-mirror[/bold blue] - Mirror a Git repository, "
    "its branches and tags to another remote",
    rich_markup_mode="rich",
    add_completion=False,
)


@app.command()
def mirror():
    """
    Interactively mirror a source repository to a destination repository.

    The default branch is pushed as mirror_<branch>_<timestamp> so that
    branch protection on the destination cannot reject it.
    """
    run_mirror()


def main():
    logger = get_logger("gitmirror.main")

    try:
        app()
    except Exception as e:
        logger.error(f"Unhandled exception in main: {str(e)}")
        raise


if __name__ == "__main__":
    main()
