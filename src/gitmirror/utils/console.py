from rich.console import Console
from rich.rule import Rule

from gitmirror.constants import TOTAL_STEPS

console = Console()
err_console = Console(stderr=True)

# Messages carry operator-typed URLs, so they are never parsed as markup


def success(message: str):
    """Display success message"""
    console.print(f"✓ {message}", style="bold green", markup=False)


def error(message: str):
    """Display error message on stderr"""
    err_console.print(f"Error: {message}", style="bold red", markup=False)


def warning(message: str):
    """Display warning message"""
    console.print(f"! {message}", style="bold yellow", markup=False)


def info(message: str):
    """Display info message"""
    console.print(f"{message}", style="cyan", markup=False)


def header(title: str):
    """Clear the terminal and display the tool banner"""
    console.clear()
    console.print(title, style="bold blue")
    console.print(Rule(style="blue"))
    console.print()


def step(number: int, title: str):
    """Display a workflow step heading such as [1/4] Source Repository"""
    console.print()
    console.print(f"[{number}/{TOTAL_STEPS}] {title}", style="bold", markup=False)
    console.print()
