"""Command-line interface for entrez-records."""

import asyncio
import logging
from pathlib import Path

import click

from entrez_records.config import get_settings
from entrez_records.data_sources.base_client import DataSourceError
from entrez_records.data_sources.entrez import EntrezClient
from entrez_records.parsers import (
    ParsingError,
    read_esearch_result,
    read_pubmed_article_set,
)

READERS = {
    "pubmed": read_pubmed_article_set,
    "esearch": read_esearch_result,
}


@click.group()
@click.version_option(package_name="entrez-records")
@click.option("--log-level", default=None, help="Override LOG_LEVEL from settings")
def main(log_level: str | None):
    """entrez-records: typed PubMed records from NCBI E-utilities."""
    logging.basicConfig(
        level=(log_level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-k",
    "--kind",
    type=click.Choice(sorted(READERS)),
    default="pubmed",
    show_default=True,
    help="Which E-utility produced the file",
)
def parse(path: Path, kind: str):
    """Parse a saved EFetch/ESearch XML file and print it as JSON."""
    try:
        result = READERS[kind](path.read_bytes())
    except ParsingError as e:
        raise click.ClickException(str(e)) from e
    click.echo(result.model_dump_json(indent=2))


@main.command()
@click.argument("term")
@click.option("-n", "--retmax", default=20, show_default=True, help="Max PMIDs")
def search(term: str, retmax: int):
    """Search PubMed and print matching PMIDs, one per line."""

    async def run():
        async with EntrezClient() as client:
            return await client.search(term, retmax=retmax)

    try:
        result = asyncio.run(run())
    except (DataSourceError, ParsingError) as e:
        raise click.ClickException(str(e)) from e

    if result.error:
        raise click.ClickException(f"ESearch error: {result.error}")
    for pmid in result.id_list:
        click.echo(pmid)
    click.echo(f"{len(result.id_list)} of {result.count} results", err=True)


def _validate_pmids(ctx, param, value: tuple[str, ...]) -> tuple[str, ...]:
    pmids = tuple(pmid.strip() for pmid in value)
    if not all(pmids):
        raise click.BadParameter("PMIDs must not be blank")
    return pmids


@main.command()
@click.argument("pmids", nargs=-1, required=True, callback=_validate_pmids)
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Write JSON here")
def fetch(pmids: tuple[str, ...], output: Path | None):
    """Fetch PubMed records by PMID and print them as JSON."""

    async def run():
        async with EntrezClient() as client:
            return await client.fetch_pubmed(list(pmids))

    try:
        article_set = asyncio.run(run())
    except (DataSourceError, ParsingError) as e:
        raise click.ClickException(str(e)) from e

    payload = article_set.model_dump_json(indent=2)
    if output:
        output.write_text(payload)
        click.echo(f"{len(article_set.articles)} articles saved to: {output}")
    else:
        click.echo(payload)


if __name__ == "__main__":
    main()
