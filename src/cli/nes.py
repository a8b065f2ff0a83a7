"""CLI commands for the NES scoring engine."""

import json
import sys
import uuid
from pathlib import Path
from typing import NoReturn

import click
import structlog

from src.config.constants import COMPONENT_CLI
from src.config.effective import EffectiveConfig
from src.config.errors import ConfigurationError
from src.config.loader import ConfigLoader, load_settings
from src.config.schemas.base import ContentCategory
from src.observability.logging import bind_run_context, configure_logging
from src.scoring import (
    PostValidationError,
    ScoringEngine,
    ScoringMetrics,
    deduplicate_trends,
    summarize_trends,
)
from src.settings import AppSettings


logger = structlog.get_logger()


def _exit_with_config_errors(error: ConfigurationError) -> NoReturn:
    """Echo hinted configuration errors and exit 1."""
    click.echo(f"Configuration validation failed ({error.source}):", err=True)
    for formatted in error.format_errors():
        click.echo(f"  - {formatted}", err=True)
    sys.exit(1)


def _load_settings() -> AppSettings:
    """Read environment settings or exit with hinted errors."""
    try:
        return load_settings()
    except ConfigurationError as e:
        _exit_with_config_errors(e)


def _setup_logging(run_id: str, settings: AppSettings, verbose: bool) -> None:
    """Configure logging from settings, forcing DEBUG when verbose."""
    level = "DEBUG" if verbose else settings.log_level
    configure_logging(level=level, json_format=settings.log_json)
    bind_run_context(run_id)


def _load_configuration(
    run_id: str,
    settings: AppSettings,
    sources_path: Path | None,
    scoring_path: Path | None,
) -> EffectiveConfig:
    """Load configuration or exit with hinted errors."""
    loader = ConfigLoader(run_id=run_id, settings=settings)
    try:
        return loader.load(sources_path=sources_path, scoring_path=scoring_path)
    except ConfigurationError as e:
        _exit_with_config_errors(e)


def read_posts(posts_path: Path) -> list[object]:
    """Read posts from a JSON file.

    Accepts a plain array of post objects or a Reddit listing
    ({"data": {"children": [{"data": {...}}]}}).

    Args:
        posts_path: Path to the JSON file.

    Returns:
        Post payloads in file order.

    Raises:
        click.ClickException: If the file is not JSON or has another shape.
    """
    try:
        payload = json.loads(posts_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"{posts_path} is not valid JSON: {e}"
        raise click.ClickException(msg) from e

    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        children = payload["data"].get("children")
        if isinstance(children, list):
            return [
                child.get("data", child) if isinstance(child, dict) else child
                for child in children
            ]
    msg = f"{posts_path} must hold a JSON array of posts or a listing object"
    raise click.ClickException(msg)


def _write_output(document: dict[str, object], output_path: Path | None) -> None:
    text = json.dumps(document, indent=2, ensure_ascii=False)
    if output_path is None:
        click.echo(text)
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding="utf-8")


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """Normalized Engagement Score (NES) scoring CLI."""


@cli.command()
@click.argument(
    "posts_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--sources",
    "sources_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to sources.yaml (built-in source table if omitted).",
)
@click.option(
    "--scoring",
    "scoring_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to scoring.yaml with tunable constants.",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write JSON here instead of stdout.",
)
@click.option("--summary", is_flag=True, help="Include a per-category summary.")
@click.option("--dedupe", is_flag=True, help="Drop records with duplicate titles.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
def score(  # noqa: PLR0913
    posts_path: Path,
    sources_path: Path | None,
    scoring_path: Path | None,
    output_path: Path | None,
    summary: bool,
    dedupe: bool,
    verbose: bool,
) -> None:
    """Score a batch of posts read from POSTS_PATH.

    Records keep the input order; sorting is left to the consumer.
    """
    run_id = str(uuid.uuid4())
    settings = _load_settings()
    _setup_logging(run_id, settings, verbose)
    log = logger.bind(run_id=run_id, component=COMPONENT_CLI, command="score")

    effective = _load_configuration(run_id, settings, sources_path, scoring_path)
    posts = read_posts(posts_path)
    log.info("posts_loaded", posts_path=str(posts_path), posts_count=len(posts))

    metrics = ScoringMetrics()
    engine = ScoringEngine.from_config(effective, metrics=metrics)
    try:
        records = engine.score_batch(posts)  # type: ignore[arg-type]
    except PostValidationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if dedupe:
        records = deduplicate_trends(records)

    document: dict[str, object] = {
        "run_id": run_id,
        "trends": [r.model_dump(mode="json") for r in records],
    }
    if summary:
        document["summary"] = summarize_trends(records).model_dump(mode="json")

    _write_output(document, output_path)
    log.info("score_complete", records_out=len(records), metrics=metrics.to_dict())


@cli.command()
@click.option(
    "--sources",
    "sources_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to sources.yaml (built-in source table if omitted).",
)
@click.option(
    "--category",
    type=click.Choice([c.value for c in ContentCategory]),
    default=None,
    help="Only list sources in this category.",
)
def sources(sources_path: Path | None, category: str | None) -> None:
    """List the resolved source table."""
    run_id = str(uuid.uuid4())
    settings = _load_settings()
    configure_logging(level=settings.log_level, json_format=False)
    bind_run_context(run_id)

    effective = _load_configuration(run_id, settings, sources_path, None)
    selected = (
        effective.get_sources_by_category(ContentCategory(category))
        if category
        else list(effective.sources.sources)
    )

    click.echo(f"{'name':<22}{'category':<15}{'tier':>5}{'baseline':>10}")
    for source in selected:
        click.echo(
            f"{source.name:<22}{source.category.value:<15}"
            f"{int(source.tier):>5}{source.baseline_score:>10.0f}"
        )
    click.echo(f"{len(selected)} source(s)")


@cli.command()
@click.option(
    "--sources",
    "sources_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to sources.yaml configuration file.",
)
@click.option(
    "--scoring",
    "scoring_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to scoring.yaml configuration file.",
)
def validate(sources_path: Path | None, scoring_path: Path | None) -> None:
    """Validate configuration files without scoring anything."""
    run_id = str(uuid.uuid4())
    settings = _load_settings()
    configure_logging(level=settings.log_level, json_format=False)
    bind_run_context(run_id)

    effective = _load_configuration(run_id, settings, sources_path, scoring_path)
    click.echo("Configuration is valid!")
    click.echo(f"  Sources: {len(effective.sources.sources)}")
    click.echo(f"  Checksum: {effective.compute_checksum()}")


if __name__ == "__main__":
    cli()
