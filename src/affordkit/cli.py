"""Command-line entry point: collect options, resolve scenarios, print reports."""

from __future__ import annotations

import logging

import click
from pydantic import ValidationError

from .amortization import schedule
from .config import Settings
from .errors import AffordabilityError
from .report import iter_schedule_lines, render_scenario
from .resolver import ScenarioResolver
from .scenario import RawParameters


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-y", "--years", multiple=True, metavar="YEARS",
              help="Term of loan in years (repeat to compare terms).")
@click.option("-r", "--apr", metavar="RATE",
              help="Annual percentage rate as a decimal, e.g. 0.045.")
@click.option("-t", "--taxes", metavar="TAXES", help="Taxes per year.")
@click.option("-p", "--price", multiple=True, metavar="PRICE",
              help="Purchase price (repeat to compare prices).")
@click.option("-f", "--funds", metavar="FUNDS", help="Funds available now.")
@click.option("-c", "--closing-costs", metavar="COSTS", help="Closing costs.")
@click.option("-i", "--insurance", metavar="INSURANCE", help="Insurance per year.")
@click.option("-d", "--downpayment", metavar="DOWNPAYMENT", help="Downpayment.")
@click.option("-R", "--renovations", metavar="COSTS", help="Renovation costs.")
@click.option("-s", "--schedule", "show_schedule", is_flag=True,
              help="Print the full amortization table for each scenario.")
@click.option("--allow-negative-downpayment/--reject-negative-downpayment",
              default=True, show_default=True,
              help="Accept a derived downpayment below zero.")
@click.option("-v", "--verbose", is_flag=True, help="Log the defaults being applied.")
@click.pass_context
def main(
    ctx: click.Context,
    years: tuple[str, ...],
    apr: str | None,
    taxes: str | None,
    price: tuple[str, ...],
    funds: str | None,
    closing_costs: str | None,
    insurance: str | None,
    downpayment: str | None,
    renovations: str | None,
    show_schedule: bool,
    allow_negative_downpayment: bool,
    verbose: bool,
) -> None:
    """Compute mortgage payments for one or more purchase scenarios."""
    level = logging.INFO if verbose else logging.WARNING
    handler = logging.StreamHandler(click.get_text_stream("stderr"))
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    package_logger = logging.getLogger("affordkit")
    previous_level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    try:
        _run(ctx, years, apr, taxes, price, funds, closing_costs, insurance,
             downpayment, renovations, show_schedule, allow_negative_downpayment)
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)


def _run(
    ctx: click.Context,
    years: tuple[str, ...],
    apr: str | None,
    taxes: str | None,
    price: tuple[str, ...],
    funds: str | None,
    closing_costs: str | None,
    insurance: str | None,
    downpayment: str | None,
    renovations: str | None,
    show_schedule: bool,
    allow_negative_downpayment: bool,
) -> None:
    raw = RawParameters.from_mapping(
        {
            "years": years,
            "price": price,
            "apr": apr,
            "taxes": taxes,
            "funds": funds,
            "closing_costs": closing_costs,
            "insurance": insurance,
            "downpayment": downpayment,
            "renovations": renovations,
        }
    )

    try:
        defaults = Settings().to_defaults(
            allow_negative_downpayment=allow_negative_downpayment
        )
    except (ValidationError, ValueError) as exc:
        raise click.UsageError(f"Invalid AFFORDKIT_* setting: {exc}", ctx=ctx) from exc

    try:
        scenarios = ScenarioResolver(defaults).resolve(raw)
    except AffordabilityError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc

    click.echo(f"I have {len(scenarios)} scenario(s)")
    for index, scenario in enumerate(scenarios, start=1):
        click.echo()
        click.echo(render_scenario(scenario, index, len(scenarios)))
        if show_schedule:
            click.echo()
            for line in iter_schedule_lines(schedule(scenario)):
                click.echo(line)


if __name__ == "__main__":
    main()
