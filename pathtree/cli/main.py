"""pathtree CLI - Path and group tree commands."""
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from pathtree.core import path as paths
from pathtree.core.config import TreeConfig
from pathtree.core.exceptions import InvalidPathError, PathTreeException
from pathtree.core.groups import GroupNode, GroupTree

app = typer.Typer(
    name="pathtree",
    help="POSIX path algebra and group trees",
    add_completion=False
)
group_app = typer.Typer(help="Manage a persisted group tree")
app.add_typer(group_app, name="group")
console = Console()


def echo(value: str) -> None:
    """Print a plain value without markup or highlighting."""
    console.print(value, markup=False, highlight=False, soft_wrap=True)


@app.command()
def split(
    path: str = typer.Argument(..., help="Path to split"),
    long: bool = typer.Option(False, "-l", "--long", help="Show path flags"),
):
    """Split a path into components."""
    parsed = paths.split_components(path)

    if long:
        table = Table()
        table.add_column("#", justify="right", style="dim")
        table.add_column("Component")
        for index, component in enumerate(parsed):
            table.add_row(str(index), component)
        console.print(table)
        console.print(f"absolute: {parsed.is_absolute}")
        console.print(f"directory: {parsed.is_directory_like}")
    else:
        for component in parsed:
            echo(component)


@app.command()
def last(path: str = typer.Argument(..., help="Path")):
    """Print the last path component."""
    echo(paths.last_component(path))


@app.command()
def parent(path: str = typer.Argument(..., help="Path")):
    """Print the parent path."""
    echo(paths.parent_path(path))


@app.command()
def ext(path: str = typer.Argument(..., help="Path")):
    """Print the path extension."""
    echo(paths.extension(path))


@app.command("strip-ext")
def strip_ext(path: str = typer.Argument(..., help="Path")):
    """Print the path without its extension."""
    echo(paths.removing_extension(path))


@app.command()
def absolute(
    path: str = typer.Argument(..., help="Path to expand"),
    base: Optional[str] = typer.Option(None, "--base", "-b", help="Base directory (default: cwd)"),
):
    """Expand a path against a base directory."""
    echo(paths.make_absolute(path, base))


@app.command()
def relative(
    target: str = typer.Argument(..., help="Location to reach"),
    base: str = typer.Argument(..., help="Location to start from"),
):
    """Print target relative to base."""
    echo(str(paths.relative_path(target, base)))


def _load_tree(store: str, root: Optional[str], base_dir: Optional[str]) -> GroupTree:
    config = TreeConfig(root_path=root, base_dir=base_dir, store_path=store)
    try:
        return config.build_tree()
    except PathTreeException as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _render(node: GroupNode, branch: Tree) -> None:
    for child in node:
        _render(child, branch.add(f"[blue]{child.name}/[/blue]"))


@group_app.command("add")
def group_add(
    path: str = typer.Argument(..., help="Full group path, starting with /"),
    store: str = typer.Option("groups.json", "--store", "-s", help="JSON group store"),
    root: Optional[str] = typer.Option(None, "--root", "-r", help="Main group path (must match the store)"),
    base_dir: Optional[str] = typer.Option(None, "--base-dir", "-d", help="Create folders under this directory"),
):
    """Create a group and any missing parents."""
    tree = _load_tree(store, root, base_dir)
    before = tree.node_count()

    try:
        group = tree.create_sub_group(path, create_folders=base_dir is not None)
    except InvalidPathError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    created = tree.node_count() - before
    console.print(f"[green]Group:[/green] {group.full_path}")
    console.print(f"Created: {created}")
    console.print(f"Handle: {group.handle}")


@group_app.command("find")
def group_find(
    path: str = typer.Argument(..., help="Full group path, starting with /"),
    store: str = typer.Option("groups.json", "--store", "-s", help="JSON group store"),
    root: Optional[str] = typer.Option(None, "--root", "-r", help="Main group path (must match the store)"),
):
    """Look up a group without creating it."""
    tree = _load_tree(store, root, None)

    try:
        group = tree.lookup(path)
    except InvalidPathError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if group is None:
        console.print(f"[red]Group not found: {path}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]Name:[/bold] {group.name}")
    console.print(f"[bold]Path:[/bold] {group.full_path}")
    console.print(f"[bold]Relative:[/bold] {tree.relative_path(group)}")
    console.print(f"[bold]Handle:[/bold] {group.handle}")


@group_app.command("show")
def group_show(
    store: str = typer.Option("groups.json", "--store", "-s", help="JSON group store"),
    root: Optional[str] = typer.Option(None, "--root", "-r", help="Main group path (must match the store)"),
):
    """Show the group tree."""
    tree = _load_tree(store, root, None)
    view = Tree(f"[bold]{tree.root.full_path}[/bold]")
    _render(tree.root, view)
    console.print(view)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
