import json
from typing import Dict, List, Optional

import typer

from .errors import ValidationError
from .models import SKILL_NAMES
from .random_source import SeededRandomSource
from .service import GenerationService
from .tables import DEFAULT_REGION, POSITIONS, known_regions, role_for

app = typer.Typer(help="Scouted player generator.")


def _parse_skills(values: List[str]) -> Dict[str, int]:
    skills: Dict[str, int] = {}
    for raw in values:
        name, sep, value = raw.partition("=")
        name = name.strip()
        if not sep or name not in SKILL_NAMES:
            raise typer.BadParameter(f"Expected one of {', '.join(SKILL_NAMES)} as name=value, got {raw!r}")
        try:
            skills[name] = int(value)
        except ValueError as exc:
            raise typer.BadParameter(f"Skill {name} needs an integer value, got {value!r}") from exc
    return skills


@app.command()
def generate(
    region: str = typer.Option(DEFAULT_REGION, help="Region id used for the player's name"),
    skill: List[str] = typer.Option([], help="Scout skill as name=value; repeatable"),
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible output"),
    count: int = typer.Option(1, min=1, help="Number of players to generate"),
):
    """Generate players with scouting reports and print JSON to stdout."""
    skills = _parse_skills(skill)
    service = GenerationService(source=SeededRandomSource(seed) if seed is not None else None)
    output = []
    for _ in range(count):
        try:
            generated = service.build(region, skills)
        except ValidationError as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(code=1)
        output.append({"player": generated.player.as_dict(), "report": generated.report.as_dict()})
    typer.echo(json.dumps(output, ensure_ascii=False, indent=2))


@app.command()
def regions():
    """List regions with name data."""
    for region in known_regions():
        marker = " (default)" if region == DEFAULT_REGION else ""
        typer.echo(f"{region}{marker}")


@app.command()
def positions():
    """List positions and their role buckets."""
    for position in POSITIONS:
        typer.echo(f"{position.value} - {role_for(position).value}")


def main():
    app()


if __name__ == "__main__":
    main()
