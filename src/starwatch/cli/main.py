"""Main CLI entry point using Click."""

import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from starwatch import __version__
from starwatch.config import Settings, load_settings
from starwatch.core.exceptions import StarWatchError
from starwatch.infrastructure.storage import DatasetStorage
from starwatch.llm import create_llm_client
from starwatch.llm.base import BaseLLMProvider
from starwatch.pipeline import ItemEnricher, TrackerPipeline, TrackResult
from starwatch.sources import CuratedBlogSource, GitHubStarsSource
from starwatch.tracks import BlogTrack, StarTrack
from starwatch.utils.logging import setup_logging

logger = logging.getLogger(__name__)

TRACK_NAMES = ("stars", "blog")


def _get_base_dir() -> Path:
    """Get base directory from current working directory or its parents."""
    cwd = Path.cwd()
    # Check for config/config.yaml to identify project root
    if (cwd / "config" / "config.yaml").exists():
        return cwd
    for parent in cwd.parents:
        if (parent / "config" / "config.yaml").exists():
            return parent
    return cwd


@click.group()
@click.option("--base-dir", type=click.Path(exists=True), default=None, help="Repository base directory")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="starwatch")
@click.pass_context
def cli(ctx: click.Context, base_dir: str | None, verbose: bool) -> None:
    """starwatch - GitHub star and blog tracker with AI commentary."""
    ctx.ensure_object(dict)

    base = Path(base_dir) if base_dir else _get_base_dir()
    load_dotenv(base / ".env")
    setup_logging(verbose=verbose)

    ctx.obj["base_dir"] = base
    ctx.obj["verbose"] = verbose
    ctx.obj["_settings"] = None


def _get_settings(ctx: click.Context) -> Settings:
    """Get or load settings."""
    if ctx.obj["_settings"] is None:
        try:
            ctx.obj["_settings"] = load_settings(ctx.obj["base_dir"])
        except StarWatchError as exc:
            raise click.ClickException(str(exc)) from exc
    return ctx.obj["_settings"]


def _build_pipeline(
    name: str,
    base_dir: Path,
    settings: Settings,
    llm: BaseLLMProvider | None,
) -> TrackerPipeline:
    """Wire a tracker pipeline for the named track from settings."""
    if name == "stars":
        stars_cfg = settings.tracks.stars
        track = StarTrack(settings.subject, stars_cfg)
        source = GitHubStarsSource(settings.github)
        storage = DatasetStorage(base_dir / stars_cfg.data_path, track.record_model)
    elif name == "blog":
        blog_cfg = settings.tracks.blog
        track = BlogTrack(settings.subject, blog_cfg)
        source = CuratedBlogSource(blog_cfg)
        storage = DatasetStorage(base_dir / blog_cfg.data_path, track.record_model)
    else:
        raise ValueError(f"Unknown track: {name}")

    enricher = ItemEnricher(track, llm, model=settings.llm.model)
    return TrackerPipeline(track, source, storage, enricher)


def _echo_summary(pipeline: TrackerPipeline, result: TrackResult) -> None:
    """Print a short human-readable run summary."""
    stats = result.stats
    click.echo(f"\n[{result.track}] Previously tracked: {stats.existing}")
    if not result.new_records:
        click.echo(f"[{result.track}] No new items to analyze")
        return

    click.echo(
        f"[{result.track}] New: {len(result.new_records)} "
        f"(AI: {stats.enriched}, fallback: {stats.fallbacks}), total: {result.total}"
    )
    click.echo(f"[{result.track}] Updated {pipeline.storage.path}")

    latest = result.latest
    if latest is not None:
        click.echo(f"[{result.track}] Latest: {pipeline.track.label(latest)}")
        click.echo(f'    "{pipeline.track.headline(latest)}"')


def _run_tracks(ctx: click.Context, names: list[str]) -> None:
    settings = _get_settings(ctx)
    base_dir = ctx.obj["base_dir"]

    try:
        llm = create_llm_client(settings.llm)
    except StarWatchError as exc:
        raise click.ClickException(str(exc)) from exc

    def on_progress(stage: str, msg: str) -> None:
        if ctx.obj["verbose"]:
            click.echo(f"[{stage}] {msg}")

    for name in names:
        pipeline = _build_pipeline(name, base_dir, settings, llm)
        try:
            result = pipeline.run(on_progress=on_progress)
        except StarWatchError as exc:
            logger.error("Track '%s' failed: %s", name, exc)
            raise click.ClickException(f"{name}: {exc}") from exc
        _echo_summary(pipeline, result)


@cli.command()
@click.pass_context
def stars(ctx: click.Context) -> None:
    """Track newly starred GitHub repositories."""
    _run_tracks(ctx, ["stars"])


@cli.command()
@click.pass_context
def blog(ctx: click.Context) -> None:
    """Track new blog posts."""
    _run_tracks(ctx, ["blog"])


@cli.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """Run every enabled track, stars first."""
    settings = _get_settings(ctx)
    enabled = [name for name in TRACK_NAMES if getattr(settings.tracks, name).enabled]
    if not enabled:
        click.echo("No tracks enabled")
        return
    _run_tracks(ctx, enabled)


if __name__ == "__main__":
    cli()
