from pathlib import Path
from typing import List, Optional
import typer
from diceroll import __version__
from diceroll.engine.dice import parse_tokens, valid_specs, roll, format_outcome
from diceroll.engine.errors import InvalidDie, RandomnessUnavailable, SettingsError
from diceroll.engine.rng import acquire_os_generator, seeded_generator
from diceroll.engine.settings import Settings, load_settings

app = typer.Typer(add_completion=False)

def _version(value: bool):
    if value:
        typer.echo(__version__)
        raise typer.Exit()

# Tokens such as "-1" or "-d6" must reach the parser instead of failing as options.
@app.command(context_settings={"ignore_unknown_options": True})
def main(
    tokens: Optional[List[str]] = typer.Argument(None, help="Dice to roll, e.g. 2d6 or 20", show_default=False),
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="Reject tokens with non-numeric parts (e.g. 'd6')", show_default=False),
    warn: Optional[bool] = typer.Option(None, "--warn/--quiet", help="Report skipped tokens on stderr", show_default=False),
    seed: Optional[int] = typer.Option(None, "--seed", help="Use a seeded generator instead of OS randomness"),
    config: Optional[Path] = typer.Option(None, "--config", help="Settings file (.json, .yaml); no file is read unless given"),
    version: bool = typer.Option(False, "--version", callback=_version, is_eager=True, help="Show version and exit"),
):
    """Roll dice given as NdM (or M for a single die) and print each roll with its total."""
    settings = Settings()
    if config is not None:
        try:
            settings = load_settings(config)
        except SettingsError as e:
            typer.echo(f"[ERROR] {e}", err=True)
            raise typer.Exit(code=1)

    strict = settings.strict_parse if strict is None else strict
    warn = settings.warn_invalid if warn is None else warn
    seed = settings.rng_seed if seed is None else seed

    if seed is not None:
        generate = seeded_generator(seed)
    else:
        try:
            generate = acquire_os_generator()
        except RandomnessUnavailable as e:
            typer.echo(str(e))
            raise typer.Exit(code=1)

    results = parse_tokens(tokens or [], strict=strict)
    if warn:
        for r in results:
            if not r.ok:
                typer.echo(f"[WARN] {r.error}", err=True)

    # Roll everything before printing so a failing die leaves no partial output.
    try:
        outcomes = [roll(spec, generate) for spec in valid_specs(results)]
    except InvalidDie as e:
        typer.echo(f"[ERROR] {e}", err=True)
        raise typer.Exit(code=1)

    for outcome in outcomes:
        typer.echo(format_outcome(outcome))


if __name__ == "__main__":
    app()
