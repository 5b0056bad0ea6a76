"""
friendgraph CLI

Command-line interface for editing and querying a social network file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from friendgraph.models.graph import SocialGraph
from friendgraph.models.paths import PathFinder
from friendgraph.models.recommendations import FriendRecommender
from friendgraph.pipeline.ingest import NetworkFileError, read_network
from friendgraph.pipeline.outputs import save_network
from friendgraph.utils.config import Config, load_config

# Initialize console for rich output
console = Console()


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure logging with rich handler."""
    handlers = [RichHandler(console=console, show_path=False)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        handlers=handlers,
    )


def network_option(func):
    """Shared --network option for every command."""
    return click.option(
        "--network", "-n",
        "network_path",
        default=None,
        type=click.Path(file_okay=True, dir_okay=False),
        help="Network file (defaults to network.path from config)",
    )(func)


def _config(ctx: click.Context) -> Config:
    return ctx.obj["config"]


def _network_path(ctx: click.Context, network_path: Optional[str]) -> Path:
    return Path(network_path or _config(ctx).network.path)


def _open_network(ctx: click.Context, path: Path, create: bool = False) -> SocialGraph:
    """Load the network file, exiting with an error if it cannot be read."""
    if create and not path.exists():
        logging.debug(f"{path} does not exist, starting an empty network")
        return SocialGraph()

    try:
        return read_network(path, encoding=_config(ctx).network.encoding)
    except NetworkFileError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


def _store_network(ctx: click.Context, graph: SocialGraph, path: Path) -> None:
    if not save_network(graph, path, encoding=_config(ctx).network.encoding):
        console.print(f"[red]Error: could not save network to {escape(str(path))}[/red]")
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option(
    "--config", "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML config file",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, config_path: Optional[str]) -> None:
    """friendgraph - Explore friendships, paths and recommendations."""
    ctx.ensure_object(dict)

    config = load_config(Path(config_path) if config_path else None)
    ctx.obj["config"] = config

    if verbose:
        ctx.obj["log_level"] = "DEBUG"
    elif quiet:
        ctx.obj["log_level"] = "WARNING"
    else:
        ctx.obj["log_level"] = config.logging.level

    setup_logging(ctx.obj["log_level"], config.logging.file)


@cli.command("add-person")
@click.argument("name")
@network_option
@click.pass_context
def add_person(ctx: click.Context, name: str, network_path: Optional[str]) -> None:
    """Add a person to the network."""
    path = _network_path(ctx, network_path)
    graph = _open_network(ctx, path, create=True)

    if graph.add_person(name):
        _store_network(ctx, graph, path)
        console.print(f"[green]✓[/green] Person '{escape(name)}' added to the network")
    else:
        console.print(f"[yellow]![/yellow] Person '{escape(name)}' is already in the network")


@cli.command("remove-person")
@click.argument("name")
@network_option
@click.pass_context
def remove_person(ctx: click.Context, name: str, network_path: Optional[str]) -> None:
    """Remove a person and all of their friendships."""
    path = _network_path(ctx, network_path)
    graph = _open_network(ctx, path, create=True)

    if graph.remove_person(name):
        _store_network(ctx, graph, path)
        console.print(f"[green]✓[/green] Person '{escape(name)}' removed from the network")
    else:
        console.print(f"[yellow]![/yellow] Person '{escape(name)}' not found in the network")


@cli.command("add-friend")
@click.argument("name1")
@click.argument("name2")
@network_option
@click.pass_context
def add_friend(ctx: click.Context, name1: str, name2: str, network_path: Optional[str]) -> None:
    """Make two existing people friends."""
    path = _network_path(ctx, network_path)
    graph = _open_network(ctx, path, create=True)

    if graph.add_friend(name1, name2):
        _store_network(ctx, graph, path)
        console.print(
            f"[green]✓[/green] Friendship added between '{escape(name1)}' and '{escape(name2)}'"
        )
    elif graph.are_connected(name1, name2):
        console.print(f"[yellow]![/yellow] '{escape(name1)}' and '{escape(name2)}' are already friends")
    else:
        console.print(
            "[yellow]![/yellow] No friendship added: both people must exist and be different"
        )


@cli.command("remove-friend")
@click.argument("name1")
@click.argument("name2")
@network_option
@click.pass_context
def remove_friend(ctx: click.Context, name1: str, name2: str, network_path: Optional[str]) -> None:
    """Remove the friendship between two people."""
    path = _network_path(ctx, network_path)
    graph = _open_network(ctx, path, create=True)

    if graph.remove_friend(name1, name2):
        _store_network(ctx, graph, path)
        console.print(
            f"[green]✓[/green] Friendship removed between '{escape(name1)}' and '{escape(name2)}'"
        )
    else:
        console.print(f"[yellow]![/yellow] '{escape(name1)}' and '{escape(name2)}' were not friends")


@cli.command()
@click.argument("name1")
@click.argument("name2")
@network_option
@click.pass_context
def connected(ctx: click.Context, name1: str, name2: str, network_path: Optional[str]) -> None:
    """Check whether two people are friends."""
    graph = _open_network(ctx, _network_path(ctx, network_path))

    if graph.are_connected(name1, name2):
        console.print(f"'{escape(name1)}' and '{escape(name2)}' are friends")
    else:
        console.print(f"'{escape(name1)}' and '{escape(name2)}' are not friends")


@cli.command()
@click.argument("name")
@network_option
@click.pass_context
def friends(ctx: click.Context, name: str, network_path: Optional[str]) -> None:
    """List the friends of a person."""
    graph = _open_network(ctx, _network_path(ctx, network_path))

    if not graph.has_person(name):
        console.print(f"[yellow]Person '{escape(name)}' not found in the network[/yellow]")
        return

    people = graph.friends_in_order(name)
    if not people:
        console.print(f"'{escape(name)}' has no friends yet")
        return

    console.print(f"\n[bold]Friends of {escape(name)}:[/bold]")
    for person in people:
        console.print(f"  • {escape(person.display_name)}")


@cli.command()
@click.argument("name")
@click.option(
    "--count", "-k",
    "k",
    default=None,
    type=int,
    help="Number of recommendations (defaults to recommendations.default_limit)",
)
@network_option
@click.pass_context
def recommend(ctx: click.Context, name: str, k: Optional[int], network_path: Optional[str]) -> None:
    """Recommend new friends by mutual-friend count."""
    graph = _open_network(ctx, _network_path(ctx, network_path))
    limit = k if k is not None else _config(ctx).recommendations.default_limit

    recommender = FriendRecommender(graph)
    candidates = recommender.rank_candidates(name)[:max(limit, 0)]

    if not candidates:
        console.print(f"[yellow]No recommendations available for '{escape(name)}'[/yellow]")
        return

    console.print(f"\n[bold]Recommended friends for {escape(name)}:[/bold]\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Mutual", justify="right")
    table.add_column("Through")

    for i, c in enumerate(candidates, 1):
        table.add_row(
            str(i),
            escape(c.name),
            str(c.mutual_count),
            escape(", ".join(c.mutual_friends)),
        )

    console.print(table)


@cli.command()
@click.argument("source")
@click.argument("target")
@click.option(
    "--avoid", "-a",
    multiple=True,
    help="Person who may not appear on the path (repeatable)",
)
@network_option
@click.pass_context
def path(
    ctx: click.Context,
    source: str,
    target: str,
    avoid: tuple[str, ...],
    network_path: Optional[str],
) -> None:
    """Find the shortest chain of friends between two people."""
    graph = _open_network(ctx, _network_path(ctx, network_path))
    finder = PathFinder(graph)

    if avoid:
        result = finder.shortest_path_avoiding(source, target, avoid)
    else:
        result = finder.shortest_path(source, target)

    if not result:
        if avoid:
            console.print("[yellow]No valid path exists that avoids the specified people[/yellow]")
        else:
            console.print(
                f"[yellow]No path exists between '{escape(source)}' and '{escape(target)}'[/yellow]"
            )
        return

    console.print(f"Shortest path: {escape(' -> '.join(result))}")
    console.print(f"[dim]{len(result) - 1} hops[/dim]")


@cli.command()
@network_option
@click.pass_context
def people(ctx: click.Context, network_path: Optional[str]) -> None:
    """List everyone in the network."""
    graph = _open_network(ctx, _network_path(ctx, network_path))

    if not len(graph):
        console.print("No people in the network")
        return

    console.print("\n[bold]People in the network:[/bold]")
    for person in graph.people:
        console.print(f"  • {escape(person.display_name)}")


@cli.command()
@network_option
@click.pass_context
def friendships(ctx: click.Context, network_path: Optional[str]) -> None:
    """List every friendship in the network."""
    graph = _open_network(ctx, _network_path(ctx, network_path))

    if not graph.friend_count:
        console.print("No friendships in the network")
        return

    console.print("\n[bold]Friendships:[/bold]")
    for friendship in graph.friendships:
        console.print(f"  • {escape(str(friendship))}")


@cli.command()
@network_option
@click.pass_context
def stats(ctx: click.Context, network_path: Optional[str]) -> None:
    """Show quick statistics about the network."""
    path = _network_path(ctx, network_path)
    graph = _open_network(ctx, path)

    console.print("\n[bold blue]Network Statistics[/bold blue]")
    console.print("=" * 50)
    console.print(f"\n[bold]Source:[/bold] {escape(str(path))}")

    degrees = {p.name: len(graph.neighbor_names(p.name)) for p in graph.people}
    isolated = sum(1 for d in degrees.values() if d == 0)

    table = Table(show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")
    table.add_row("People", str(len(graph)))
    table.add_row("Friendships", str(graph.friend_count))
    table.add_row("Without friends", str(isolated))
    console.print(table)

    # sorted() is stable, so ties keep insertion order
    top = sorted(degrees.items(), key=lambda x: x[1], reverse=True)[:5]
    top = [(name, degree) for name, degree in top if degree > 0]

    if top:
        console.print("\n[bold]Most Connected:[/bold]")
        table = Table(show_header=True, header_style="bold")
        table.add_column("Name")
        table.add_column("Friends", justify="right")
        for name, degree in top:
            table.add_row(escape(name), str(degree))
        console.print(table)

    console.print()


@cli.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from friendgraph import __version__

    console.print(f"friendgraph v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
