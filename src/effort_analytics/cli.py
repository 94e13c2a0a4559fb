"""
Command-line interface for the effort analytics package.

This module provides a command-line interface for building season-best curves,
fitting critical power models and predicting performance from an effort CSV.
"""

import json
import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import click

from .analysis import (
    derive_power_curve_from_ftp,
    derive_speed_curve_from_threshold_pace,
    derive_swim_curve_from_css,
)
from .data import EffortDataLoader
from .exceptions import EffortAnalyticsError
from .models import ActivityCategory, EffortRecord, EffortType, FitStatus
from .services import PerformanceService
from .settings import load_settings


# Configure basic logging
def configure_logging(verbose: bool = False) -> None:
    """Configure logging with appropriate level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def effort_options(func: Callable) -> Callable:
    """Attach the options shared by the curve, fit and predict commands."""
    options = [
        click.argument(
            "efforts_csv",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            required=False,
        ),
        click.option(
            "--config",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Path to configuration file",
        ),
        click.option(
            "--category",
            type=click.Choice([c.value for c in ActivityCategory]),
            required=True,
            help="Activity category to analyse",
        ),
        click.option(
            "--effort-type",
            type=click.Choice([t.value for t in EffortType]),
            required=True,
            help="Effort type to analyse",
        ),
        click.option(
            "--as-of",
            type=click.DateTime(),
            help="End of the season window, UTC (defaults to now)",
        ),
        click.option(
            "--window-days",
            type=click.IntRange(min=1),
            help="Season window length in days (defaults to config)",
        ),
        click.option("--json", "as_json", is_flag=True, help="Print JSON output"),
        click.option(
            "--verbose/--quiet",
            default=False,
            help="Enable verbose output",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _load(
    config: Path | None, efforts_csv: Path | None, verbose: bool
) -> tuple[PerformanceService, list[EffortRecord]]:
    configure_logging(verbose)
    settings = load_settings(config)
    records = EffortDataLoader(settings).load_efforts(efforts_csv)
    return PerformanceService(settings), records


def _echo_json(payload) -> None:
    click.echo(json.dumps(payload, indent=2, default=str))


def _failure_text(status: FitStatus, message: str | None) -> str:
    if status is FitStatus.INSUFFICIENT_DATA:
        return f"Not enough data: {message}"
    return f"Degenerate fit: {message}"


@click.group()
def main():
    """
    Analyse best-effort records and model critical power.

    This tool builds season-best curves from best-effort exports, fits the
    two-parameter critical power model and predicts performance at any duration.
    """


@main.command()
@effort_options
def curve(
    efforts_csv: Path | None,
    config: Path | None,
    category: str,
    effort_type: str,
    as_of: datetime | None,
    window_days: int | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Print the season-best curve."""
    logger = logging.getLogger(__name__)

    try:
        service, records = _load(config, efforts_csv, verbose)
        season_best = service.season_best_curve(
            records, category, effort_type, as_of=as_of, window_days=window_days
        )

        if as_json:
            _echo_json(season_best.model_dump(mode="json")["points"])
            return

        if not season_best.points:
            click.echo("No efforts in the selected window")
            return

        click.echo("\nSeason-Best Curve")
        click.echo("=" * 40)
        for point in season_best.points:
            click.echo(
                f"{point.duration_seconds:>6d}s  {point.value:10.2f}  "
                f"{point.activity_id}  {point.recorded_at.date()}"
            )

    except EffortAnalyticsError as e:
        logger.error(f"Curve generation failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@effort_options
def fit(
    efforts_csv: Path | None,
    config: Path | None,
    category: str,
    effort_type: str,
    as_of: datetime | None,
    window_days: int | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Fit the critical power (or critical speed) model."""
    logger = logging.getLogger(__name__)

    try:
        service, records = _load(config, efforts_csv, verbose)
        result = service.critical_power(
            records, category, effort_type, as_of=as_of, window_days=window_days
        )

        if as_json:
            _echo_json(result.model_dump(mode="json", by_alias=True))
            return

        if not result.ok:
            click.echo(_failure_text(result.status, result.message))
            return

        unit = EffortType(effort_type).unit
        click.echo("\nCritical Power Model")
        click.echo("-" * 20)
        click.echo(f"CP: {result.model.cp:.2f} {unit}")
        click.echo(f"W': {result.model.w_prime:.0f}")
        click.echo(f"RMS error: {result.model.error:.3f} {unit}")

        click.echo("\nPredictions")
        click.echo("-" * 20)
        for label, prediction in service.predict_standard_durations(
            result.model, effort_type
        ).items():
            click.echo(f"{label}: {prediction.predicted_value} {prediction.unit}")

    except EffortAnalyticsError as e:
        logger.error(f"Model fit failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@effort_options
@click.option(
    "--duration",
    type=int,
    required=True,
    help="Duration to predict, in seconds",
)
def predict(
    efforts_csv: Path | None,
    config: Path | None,
    category: str,
    effort_type: str,
    as_of: datetime | None,
    window_days: int | None,
    as_json: bool,
    verbose: bool,
    duration: int,
) -> None:
    """Predict the best value sustainable for a duration."""
    logger = logging.getLogger(__name__)

    try:
        service, records = _load(config, efforts_csv, verbose)
        outcome = service.predict(
            records,
            category,
            effort_type,
            duration,
            as_of=as_of,
            window_days=window_days,
        )

        if as_json:
            _echo_json(outcome.model_dump(mode="json", by_alias=True))
            return

        if not outcome.ok:
            click.echo(_failure_text(outcome.status, outcome.message))
            return

        click.echo(
            f"{duration}s: {outcome.prediction.predicted_value} "
            f"{outcome.prediction.unit}"
        )

    except EffortAnalyticsError as e:
        logger.error(f"Prediction failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@click.option("--ftp", type=float, help="Functional threshold power in watts")
@click.option(
    "--threshold-pace", type=float, help="Threshold run pace in seconds per km"
)
@click.option("--css", type=float, help="Critical swim speed pace in s/100m")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON output")
def baseline(
    ftp: float | None,
    threshold_pace: float | None,
    css: float | None,
    config: Path | None,
    as_json: bool,
) -> None:
    """Derive an estimated best-effort curve from a single threshold."""
    logger = logging.getLogger(__name__)

    given = [v for v in (ftp, threshold_pace, css) if v is not None]
    if len(given) != 1:
        raise click.UsageError("Pass exactly one of --ftp, --threshold-pace, --css")

    try:
        settings = load_settings(config)
        if ftp is not None:
            efforts = derive_power_curve_from_ftp(ftp, settings.baseline_w_prime)
        elif threshold_pace is not None:
            efforts = derive_speed_curve_from_threshold_pace(threshold_pace)
        else:
            efforts = derive_swim_curve_from_css(css)

        if as_json:
            _echo_json([e.model_dump(mode="json") for e in efforts])
            return

        for effort in efforts:
            click.echo(
                f"{effort.duration_seconds:>6d}s  {effort.value:g} {effort.unit}"
            )

    except EffortAnalyticsError as e:
        logger.error(f"Baseline derivation failed: {str(e)}")
        raise click.Abort() from e


if __name__ == "__main__":
    main()
