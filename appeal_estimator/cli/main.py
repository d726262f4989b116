"""Main CLI interface for property lookups and estimates."""

import json
import logging
import click
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..cleaners.address import AddressParseError
from ..models import (
    Config,
    ConfigError,
    PropertyData,
    PropertyNotFoundError,
    RawRecordError,
    SavingsEstimate,
    TaxSituation,
    ValidationResult,
)
from ..parsers import AttomResponseParser, PropertyDataMapper
from ..services import AttomApiService, AttomError
from ..utils.data_validator import PropertyDataValidator
from ..utils.seed import address_seed


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, verbose):
    """Property Tax Appeal Estimator - Look up properties and estimate assessment figures."""

    try:
        config = Config.from_env()
    except ConfigError as e:
        raise click.ClickException(str(e))
    console = Console()

    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['console'] = console


def _load_json(path: str):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


TAX_SITUATION_OPTION = click.option(
    '--tax-situation', type=click.Choice([s.value for s in TaxSituation]), default=None,
    help='Reported tax increase; adds appeal potential and estimated savings',
)


def _savings(mapper: PropertyDataMapper, data: PropertyData,
             tax_situation: Optional[str]) -> Optional[SavingsEstimate]:
    if not tax_situation:
        return None
    return mapper.engine.estimate_savings(data.current_tax, TaxSituation(tax_situation))


def _emit(console: Console, data: PropertyData, result: ValidationResult, as_json: bool,
          savings: Optional[SavingsEstimate] = None):
    if as_json:
        payload = {"property": data.to_dict(), "validation": result.to_dict()}
        if savings is not None:
            payload["savings"] = savings.to_dict()
        click.echo(json.dumps(payload, indent=2))
        return

    _display_property_table(console, data)

    if savings is not None:
        console.print(
            f"[bold]Appeal potential:[/bold] {savings.appeal_potential.value}  "
            f"[bold]Estimated savings:[/bold] ${savings.estimated_savings:,}/year"
        )

    for error in result.errors:
        console.print(f"[red]❌ {error}[/red]")
    for warning in result.warnings:
        console.print(f"[yellow]⚠️  {warning}[/yellow]")
    if result.is_valid:
        console.print("[green]✅ Record is usable[/green]")


def _display_property_table(console: Console, data: PropertyData):
    """Display a mapped property record as a table."""

    table = Table(title="🏠 Property Estimate", show_header=True, header_style="bold blue")
    table.add_column("Field", style="bold")
    table.add_column("Value", justify="right")
    table.add_column("Source", justify="center")

    def source(real: bool) -> str:
        return "[green]real[/green]" if real else "[yellow]estimated[/yellow]"

    assessment = source(data.has_real_assessment_data)
    building = source(data.has_real_building_data)
    sale = source(data.has_real_sale_data)

    table.add_row("Address", data.address, "")
    table.add_row("Property Type", data.property_type, building)
    table.add_row("Current Value", f"${data.current_value:,}", assessment)
    table.add_row("Previous Value", f"${data.previous_value:,}", "[yellow]derived[/yellow]")
    table.add_row("Market Value", f"${data.market_value:,}", assessment)
    table.add_row("Current Tax", f"${data.current_tax:,}", assessment)
    table.add_row("Previous Tax", f"${data.previous_tax:,}", "[yellow]derived[/yellow]")
    table.add_row("Tax Increase", f"{data.tax_increase}%", "[yellow]derived[/yellow]")
    table.add_row("Square Footage", f"{data.square_footage:,}", building)
    table.add_row("Year Built", str(data.year_built), building)
    table.add_row("Last Sale Price", f"${data.last_sale_price:,}", sale)
    table.add_row("Last Sale Date", data.last_sale_date, sale)
    table.add_row("Data Quality", data.data_quality.value, "")

    console.print(table)


@cli.command()
@click.argument('address')
@click.option('--json', 'as_json', is_flag=True, help='Print the record and validation as JSON')
@TAX_SITUATION_OPTION
@click.pass_context
def lookup(ctx, address, as_json, tax_situation):
    """Look up ADDRESS with the ATTOM API and estimate its figures."""

    config = ctx.obj['config']
    console = ctx.obj['console']

    mapper = PropertyDataMapper(config.estimation)
    validator = PropertyDataValidator(console)

    try:
        with AttomApiService(config.attom) as service:
            if not as_json:
                console.print(f"[yellow]🔍 Searching for {address}...[/yellow]")
            search, detail = service.get_full_property_data(address)

        data = mapper.map_responses(search, detail)
    except (AttomError, AddressParseError, PropertyNotFoundError, RawRecordError) as e:
        raise click.ClickException(str(e))

    _emit(console, data, validator.validate(data), as_json, _savings(mapper, data, tax_situation))


@cli.command()
@click.argument('search_file', type=click.Path(exists=True))
@click.option('--detail', 'detail_file', type=click.Path(exists=True), help='Saved detail response')
@click.option('--json', 'as_json', is_flag=True, help='Print the record and validation as JSON')
@TAX_SITUATION_OPTION
@click.pass_context
def map_response(ctx, search_file, detail_file, as_json, tax_situation):
    """Map a saved search response (and optional detail response)."""

    config = ctx.obj['config']
    console = ctx.obj['console']

    mapper = PropertyDataMapper(config.estimation)
    validator = PropertyDataValidator(console)

    try:
        search = _load_json(search_file)
        detail = _load_json(detail_file) if detail_file else None
        data = mapper.map_responses(search, detail)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON: {e}")
    except (PropertyNotFoundError, RawRecordError) as e:
        raise click.ClickException(str(e))

    _emit(console, data, validator.validate(data), as_json, _savings(mapper, data, tax_situation))


@cli.command()
@click.argument('input_file', type=click.Path(exists=True))
@click.option('--output', '-o', type=click.Path(), help='Output file path')
@click.option('--format', 'output_format', type=click.Choice(['csv', 'parquet', 'json']),
              default=None, help='Output format (defaults to OUTPUT_FORMAT)')
@click.option('--report/--no-report', default=True, help='Show the data quality table')
@click.pass_context
def batch(ctx, input_file, output, output_format, report):
    """Map every saved response in INPUT_FILE (.json, .jsonl or .ndjson)."""

    config = ctx.obj['config']
    console = ctx.obj['console']

    if output_format:
        config.output_format = output_format

    if not output:
        input_path = Path(input_file)
        output = config.output_dir / f"mapped_{input_path.stem}.{config.output_format}"
    else:
        output = Path(output)

    parser = AttomResponseParser(config, Path(input_file), console=console)

    file_info = parser.get_file_info()
    console.print(f"Input: {file_info['file_name']} ({file_info['file_size_mb']} MB)")

    try:
        df = parser.parse_file(output)
    except (ValueError, OSError) as e:
        raise click.ClickException(str(e))

    stats = parser.get_summary_stats(df)
    failed = parser.processing_stats['failed_mappings']

    console.print("\n[bold]Summary Statistics:[/bold]")
    console.print(f"Total records: {stats['total_records']:,}")
    console.print(f"Valid records: {stats['valid_records']:,}")
    if failed:
        console.print(f"[yellow]Skipped entries: {failed:,}[/yellow]")
    if stats['total_records']:
        console.print(f"Average current value: ${stats['value_stats']['avg_current_value']:,.2f}")
        console.print(f"Data quality: {stats['data_quality']}")

    if report:
        PropertyDataValidator(console).generate_quality_report(df.to_dicts())

    console.print(f"\n[green]Successfully mapped and saved to {output}[/green]")


@cli.command()
@click.argument('address')
def seed(address):
    """Print the deterministic estimate seed for ADDRESS."""
    click.echo(address_seed(address))


@cli.command()
@click.pass_context
def info(ctx):
    """Display configuration."""

    config = ctx.obj['config']
    console = ctx.obj['console']

    table = Table(title="Appeal Estimator Configuration")
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    table.add_row("API Base URL", config.attom.base_url)
    table.add_row("API Key", "configured" if config.attom.is_configured else "missing")
    table.add_row("Timeout", f"{config.attom.timeout}s")
    table.add_row("Max Retries", str(config.attom.max_retries))
    table.add_row("Output Directory", str(config.output_dir))
    table.add_row("Output Format", config.output_format)
    table.add_row("Log Level", config.log_level)

    console.print(table)


if __name__ == "__main__":
    cli()
