"""Command line access to regional metadata and address validation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Optional, TypeVar

import typer

from ryandata_address_metadata.models import AddressData, RyanDataAddressError
from ryandata_address_metadata.service import AddressService
from ryandata_address_metadata.validation import create_default_validators

app = typer.Typer(help="Look up regional address metadata and validate addresses.")

T = TypeVar("T")


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def build_service(validators: Optional[list[str]] = None) -> AddressService:
    """Create the service used by the commands."""
    return AddressService(validator=create_default_validators(validators or None))


def _run(service: AddressService, operation: Callable[[AddressService], Awaitable[T]]) -> T:
    """Run an operation on service in a fresh event loop, closing the service after."""

    async def run() -> T:
        async with service:
            return await operation(service)

    return asyncio.run(run())


@app.command()
def country(
    key: str = typer.Argument(..., help="Country key, e.g. US"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Metadata language"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Print country metadata merged with the rest-of-world defaults."""
    _configure_logging(verbose)
    service = build_service()
    try:
        metadata = _run(service, lambda s: s.get_country(key.upper(), language))
    except RyanDataAddressError as exc:
        typer.echo(f"Lookup failed: {exc}")
        raise typer.Exit(code=2) from exc

    if metadata is None:
        typer.echo(f"No metadata for country {key}")
        raise typer.Exit(code=1)
    typer.echo(metadata.model_dump_json(indent=2, exclude_none=True))


@app.command()
def validate(
    country_value: Optional[str] = typer.Option(None, "--country"),
    province: Optional[str] = typer.Option(None, "--province"),
    locality: Optional[str] = typer.Option(None, "--locality"),
    sublocality: Optional[str] = typer.Option(None, "--sublocality"),
    postal_code: Optional[str] = typer.Option(None, "--postal-code"),
    sorting_code: Optional[str] = typer.Option(None, "--sorting-code"),
    street_address: Optional[str] = typer.Option(None, "--street-address"),
    organization: Optional[str] = typer.Option(None, "--organization"),
    name: Optional[str] = typer.Option(None, "--name"),
    language: Optional[str] = typer.Option(None, "--language"),
    validator: Optional[list[str]] = typer.Option(
        None, "--validator", help="Validator to run (repeatable); defaults to all"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Validate an address against the metadata of its region."""
    _configure_logging(verbose)
    address = AddressData(
        country=country_value,
        province=province,
        locality=locality,
        sublocality=sublocality,
        postal_code=postal_code,
        sorting_code=sorting_code,
        street_address=street_address,
        organization=organization,
        name=name,
        language=language,
    )

    try:
        service = build_service(validator)
    except ValueError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=2) from exc

    try:
        failures = _run(service, lambda s: s.validate(address))
    except RyanDataAddressError as exc:
        typer.echo(f"Validation failed: {exc}")
        raise typer.Exit(code=2) from exc

    if not failures:
        typer.echo("Address is valid.")
        raise typer.Exit(code=0)

    for failure in failures:
        typer.echo(str(failure))
    raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
