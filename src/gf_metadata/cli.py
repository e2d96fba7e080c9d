"""
Command line interface for Google Fonts metadata.

Reads a local google/fonts checkout and answers queries against it.
"""

import logging
import sys
from pathlib import Path

import click

from .core.config import MetadataConfig
from .core.exceptions import ConfigurationError, GFMetadataError, NotFoundError
from .io.repository import GoogleFontsRepository
from .store import MetadataStore, StoreHolder, exemplar

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _repository(ctx: click.Context) -> GoogleFontsRepository:
    config: MetadataConfig = ctx.obj["config"]
    if config.repo_dir is None:
        raise click.UsageError("No repository given; pass --repo or set GF_METADATA_REPO_DIR")
    return GoogleFontsRepository.from_config(config)


def _load_store(ctx: click.Context) -> MetadataStore:
    holder: StoreHolder = ctx.obj["holder"]
    return holder.get(lambda: _repository(ctx).load_store())


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration YAML file",
)
@click.option(
    "--repo",
    "-r",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Path to a google/fonts checkout",
)
@click.pass_context
def cli(ctx, verbose, config, repo):
    """Google Fonts metadata CLI."""
    try:
        settings = MetadataConfig.from_env_and_yaml(yaml_path=config)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    if repo is not None:
        settings = settings.model_copy(update={"repo_dir": repo})

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["config"] = settings
    ctx.obj["holder"] = StoreHolder()


@cli.command(name="check")
@click.pass_context
def check(ctx):
    """Parse every METADATA.pb and report how many succeed."""
    try:
        scan = _repository(ctx).read_families()
    except (GFMetadataError, ImportError) as e:
        logger.exception(f"Check failed: {e}")
        sys.exit(1)

    for path, error in scan.failures:
        click.echo(f"Unable to read {path}: {error}", err=True)
    click.echo(f"Read {scan.success_count}/{scan.total} successfully")
    if scan.failure_count:
        sys.exit(1)


@cli.command(name="family")
@click.argument("name")
@click.pass_context
def family(ctx, name):
    """Show a family as JSON."""
    try:
        record = _load_store(ctx).get_family(name)
    except NotFoundError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    except (GFMetadataError, ImportError) as e:
        logger.exception(f"Loading metadata failed: {e}")
        sys.exit(1)

    click.echo(record.model_dump_json(indent=2, exclude_none=True))
    font = exemplar(record)
    if font is not None:
        click.echo(f"Exemplar: {font.filename}")


@cli.command(name="list")
@click.option("--category", help="Family category, e.g. SANS_SERIF")
@click.option("--tag", help="Tag, e.g. /Expressive/Calm")
@click.option("--script", help="Script code, e.g. Latn")
@click.option("--designer", help="Designer name")
@click.pass_context
def list_families(ctx, category, tag, script, designer):
    """List family names matching every given filter."""
    try:
        store = _load_store(ctx)
        views = []
        if category:
            views.append(store.families_by_category(category))
        if tag:
            views.append(store.families_by_tag(tag))
        if script:
            views.append(store.families_by_script(script))
        if designer:
            views.append(store.families_by_designer(designer))
    except (GFMetadataError, ImportError) as e:
        logger.exception(f"Listing families failed: {e}")
        sys.exit(1)

    names = store.families().names
    for view in views:
        allowed = set(view.names)
        names = tuple(n for n in names if n in allowed)

    for name in names:
        click.echo(name)


@cli.command(name="languages")
@click.argument("family_name")
@click.pass_context
def languages(ctx, family_name):
    """Show the primary language of a family."""
    try:
        language = _load_store(ctx).primary_language(family_name)
    except NotFoundError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    except (GFMetadataError, ImportError) as e:
        logger.exception(f"Loading metadata failed: {e}")
        sys.exit(1)

    click.echo(f"{language.id}\t{language.name or ''}")
    if language.sample_text:
        click.echo(language.sample_text)


if __name__ == "__main__":
    cli()
