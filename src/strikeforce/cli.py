"""Click CLI entrypoint — `strikeforce <subcommand>`.

The ledger lives in memory only, so every invocation starts from an empty
ledger. JSON output by default, --human for key/value lines, --compact for
one line per scenario step.
"""

from __future__ import annotations

import logging

import click

from strikeforce.output import output


@click.group()
@click.version_option(package_name="strikeforce")
@click.option("--human", is_flag=True, help="Human-readable output instead of JSON")
@click.option("--compact", is_flag=True, help="Concise text output")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging to stderr")
@click.pass_context
def cli(ctx: click.Context, human: bool, compact: bool, verbose: bool) -> None:
    """strikeforce — mission ledger tooling."""
    ctx.ensure_object(dict)
    ctx.obj["human"] = human
    ctx.obj["compact"] = compact
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.pass_context
def constants(ctx: click.Context) -> None:
    """Show the ledger constants."""
    from strikeforce.defaults import CONSTANTS
    output(dict(CONSTANTS), ctx.obj["human"], ctx.obj["compact"])


@cli.command("check-config")
@click.option("--config", "config_path", default=None, help="Config YAML (default: $STRIKEFORCE_CONFIG or ./strikeforce.yaml)")
@click.pass_context
def check_config(ctx: click.Context, config_path: str | None) -> None:
    """Load and validate the ledger config."""
    from strikeforce.config import load_config
    try:
        cfg = load_config(config_path)
    except (FileNotFoundError, ValueError) as exc:
        output({"error": f"BLOCKED: {exc}"})
        return
    output({"status": "ok", **cfg.as_dict()}, ctx.obj["human"], ctx.obj["compact"])


@cli.command()
@click.argument("scenario", type=click.Path(dir_okay=False))
@click.option("--config", "config_path", default=None, help="Fallback config when the scenario has no config block")
@click.pass_context
def replay(ctx: click.Context, scenario: str, config_path: str | None) -> None:
    """Replay a YAML scenario against a fresh ledger."""
    from strikeforce.config import load_config
    from strikeforce.replay import load_scenario, replay as _replay
    try:
        raw = load_scenario(scenario)
        cfg = None
        if raw.get("config") is None:
            cfg = load_config(config_path)
        result = _replay(raw, cfg)
    except (FileNotFoundError, ValueError) as exc:
        output({"error": f"BLOCKED: {exc}"})
        return
    output(result, ctx.obj["human"], ctx.obj["compact"])


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
