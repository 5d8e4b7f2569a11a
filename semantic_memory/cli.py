"""Semantic Memory CLI."""

import json

import click
from rich.console import Console
from rich.table import Table

console = Console()


@click.group()
def main():
    """Semantic Memory - request analysis for a creative-asset assistant."""
    pass


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"semantic-memory v{__version__}")


@main.command()
@click.option("--text", "-t", required=True, help="Request text to analyze")
@click.option("--session", "-s", default="default", help="Session identifier")
@click.option("--context", "-c", "context_json", default=None, help="Request context as a JSON object")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def analyze(text: str, session: str, context_json: str, as_json: bool):
    """Analyze a request and show the result."""
    from .config import AnalyzerConfig
    from .orchestrator import SemanticOrchestrator
    from .orchestrator.errors import SemanticMemoryError

    context = {}
    if context_json:
        try:
            context = json.loads(context_json)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"not valid JSON: {e}", param_hint="--context")
        if not isinstance(context, dict):
            raise click.BadParameter("must be a JSON object", param_hint="--context")

    try:
        orchestrator = SemanticOrchestrator(AnalyzerConfig.from_env())
        result = orchestrator.analyze_request(text, session, context)
    except SemanticMemoryError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    console.print("\n[bold]Analysis Result:[/bold]")
    if result.cluster:
        console.print(f"  Cluster: [cyan]{result.cluster.cluster_name}[/cyan] ({result.cluster.confidence}%)")
    else:
        console.print("  Cluster: [dim]none[/dim]")

    if result.intents:
        intent = result.intents[0]
        console.print(f"  Intent: [cyan]{intent.type.value}[/cyan] ({intent.confidence:.0%})")

    if result.project:
        console.print(f"  Project: {result.project['title']} [dim]({result.project['phase']})[/dim]")

    conf = result.confidence
    conf_style = "green" if conf >= 70 else "yellow" if conf >= 40 else "red"
    console.print(f"  Confidence: [{conf_style}]{conf}[/{conf_style}]")

    if result.fallback:
        console.print(f"  [yellow]Degraded: {', '.join(result.failed_components)}[/yellow]")

    if result.predictions:
        table = Table(title="Next steps")
        table.add_column("Action", style="cyan")
        table.add_column("Probability")
        table.add_column("Description")
        for p in result.predictions:
            table.add_row(p.action, f"{p.probability:.0%}", p.description)
        console.print(table)

    for rec in result.recommendations:
        console.print(f"  ({rec['priority']}) {rec['message']}")


@main.command()
def clusters():
    """List semantic clusters and their keywords."""
    from .analysis.catalog import CLUSTERS

    table = Table()
    table.add_column("Cluster", style="cyan")
    table.add_column("Core keywords")
    table.add_column("Next steps", style="dim")

    for cluster in CLUSTERS:
        table.add_row(
            cluster.name,
            ", ".join(cluster.core),
            ", ".join(cluster.typical_next_steps),
        )

    console.print(table)


@main.command()
@click.option("--type", "-t", "rule_type", default=None, help="Only show one rule type")
def rules(rule_type: str):
    """List prediction rules by type and phase."""
    from .prediction.rules import RuleBook
    from .orchestrator.errors import RuleConfigError

    try:
        entries = RuleBook().all_rules()
    except RuleConfigError as e:
        console.print(f"[red]Invalid rules: {e}[/red]")
        raise SystemExit(1)

    if rule_type:
        entries = [e for e in entries if e[0] == rule_type]
        if not entries:
            console.print(f"[yellow]No rules for type: {rule_type}[/yellow]")
            return

    table = Table()
    table.add_column("Type", style="cyan")
    table.add_column("Phase")
    table.add_column("Action")
    table.add_column("Probability")

    for type_name, phase, rule in entries:
        table.add_row(type_name, phase.value, rule.action, f"{rule.probability:.2f}")

    console.print(table)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def modules(as_json: bool):
    """Show analyzer module load status."""
    from .registry import ModuleRegistry

    registry = ModuleRegistry()
    health = [h.to_dict() for h in registry.health()]

    if as_json:
        click.echo(json.dumps(health, indent=2))
        return

    table = Table()
    table.add_column("Module", style="cyan")
    table.add_column("Role")
    table.add_column("Status")
    table.add_column("Error", style="dim")

    for h in health:
        status = "[green]loaded[/green]" if h["available"] else "[yellow]fallback[/yellow]"
        table.add_row(h["name"], h["role"], status, h["error"] or "")

    console.print(table)
    console.print(f"\nAvailability: {registry.availability():.0%}")


if __name__ == "__main__":
    main()
