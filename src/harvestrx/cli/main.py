from __future__ import annotations

from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.table import Table

from harvestrx.core.errors import HarvestInputError
from harvestrx.model.cohorts import describe_cohort_selector
from harvestrx.model.parameters import InputParameters
from harvestrx.model.prescriptions import AnyPrescription, RoundedInterval, repeat_kind
from harvestrx.model.ranking import ranking_method_name
from harvestrx.model.selection import describe_site_selector
from harvestrx.parsing import load_parameters
from harvestrx.scenario import load_scenario
from harvestrx.telemetry import log_rounded_intervals

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Harvest parameter tools.")
console = Console()


@app.callback()
def main() -> None:
    """Parse and validate harvest prescription parameter files."""


def _repeat_label(prescription: AnyPrescription) -> str:
    kind = repeat_kind(prescription)
    if kind == "none":
        return "-"
    return f"{kind} every {prescription.interval}"


def _prescription_table(parameters: InputParameters) -> Table:
    table = Table(title="Prescriptions")
    table.add_column("Name", style="bold")
    table.add_column("Ranking")
    table.add_column("Requirements", justify="right")
    table.add_column("Site selection")
    table.add_column("Cohorts removed")
    table.add_column("Plant")
    table.add_column("Repeat")
    for prescription in parameters.prescriptions:
        plant = prescription.species_to_plant
        table.add_row(
            prescription.name,
            ranking_method_name(prescription.ranking_method),
            str(len(prescription.ranking_method.requirements)),
            describe_site_selector(prescription.site_selector),
            describe_cohort_selector(prescription.cohort_selector),
            " ".join(plant.species) if plant else "-",
            _repeat_label(prescription),
        )
    return table


def _implementation_table(parameters: InputParameters) -> Table:
    table = Table(title="Harvest implementations")
    table.add_column("Mgmt area", justify="right")
    table.add_column("Prescription")
    table.add_column("Area to harvest", justify="right")
    table.add_column("Begin", justify="right")
    table.add_column("End", justify="right")
    for area in parameters.management_areas:
        for entry in area.applied:
            table.add_row(
                str(area.map_code),
                entry.prescription.name,
                f"{entry.percentage_to_harvest:.1%}",
                str(entry.begin_year),
                str(entry.end_year),
            )
    return table


def _print_rounded(rounded: tuple[RoundedInterval, ...]) -> None:
    for entry in rounded:
        console.print(
            f"[yellow]Note:[/yellow] line {entry.line_number}: repeat interval "
            f"{entry.requested} rounded up to {entry.rounded_up_to}"
        )


@app.command("validate")
def validate(
    parameters_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Harvest parameter text file."
    ),
    scenario_path: Path = typer.Option(
        ...,
        "--scenario",
        "-s",
        exists=True,
        dir_okay=False,
        help="Scenario YAML listing species and the simulation years.",
    ),
    rounding_log: Path | None = typer.Option(
        None,
        "--rounding-log",
        dir_okay=False,
        help="Append rounded repeat intervals to this JSONL file.",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report errors."),
) -> None:
    """Parse PARAMETERS_PATH and report the resulting harvest plan."""
    try:
        scenario = load_scenario(scenario_path)
    except (ValueError, FileNotFoundError, yaml.YAMLError) as exc:
        console.print(f"[red]Invalid scenario {scenario_path}:[/red]")
        console.print(str(exc), markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1) from exc

    try:
        result = load_parameters(parameters_path, scenario)
    except HarvestInputError as exc:
        console.print(f"[red]Error in {parameters_path}[/red]")
        console.print(str(exc), markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1) from exc

    parameters = result.parameters
    if not quiet:
        console.print(_prescription_table(parameters))
        console.print(_implementation_table(parameters))
    _print_rounded(result.rounded_intervals)
    if rounding_log is not None:
        written = log_rounded_intervals(rounding_log, str(parameters_path), result.rounded_intervals)
        if written and not quiet:
            console.print(f"Wrote {written} rounding record(s) to {rounding_log}")
    console.print(
        f"[green]OK[/green]: {len(parameters.prescriptions)} prescription(s), "
        f"{len(parameters.management_areas)} management area(s)"
    )


if __name__ == "__main__":  # pragma: no cover
    app()
