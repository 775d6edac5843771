# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Command line interface for recovering secrets from share files."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .audit import AuditTrail
from .base_decoder import decode, to_decimal
from .config import load_config
from .errors import ShamirError
from .records import ShareRecordSet, load_share_records, recover_from_records
from .shamir import find_inconsistent_shares

_logger = logging.getLogger(__name__)

_RULE = "=" * 50


def _audit_details(path: str, records: ShareRecordSet | None) -> dict:
    details: dict = {"source": path}
    if records is not None:
        details.update(n=records.n, k=records.k, points=len(records.points))
    return details


def _process_file(path: str, *, verify: bool, strict: bool, trail: AuditTrail | None) -> bool:
    """Recover one file; return ``True`` on success."""

    click.echo(_RULE)
    click.echo(f"Processing: {path}")
    click.echo(_RULE)

    records: ShareRecordSet | None = None
    try:
        records = load_share_records(path)
        click.echo(f"n: {records.n}, k: {records.k}")
        click.echo(f"Degree of polynomial: {records.degree}")
        click.echo()
        for point, base in zip(records.points, records.bases):
            click.echo(f"Point {point.x}: x={point.x}, y={to_decimal(point.y)} (decoded from base {base})")
        click.echo()

        secret = recover_from_records(records)
        inconsistent = find_inconsistent_shares(records.points, records.k) if verify else []
        click.echo(f"Secret C: {to_decimal(secret)}")
        if verify:
            click.echo()
            click.echo("Verification:")
            if inconsistent:
                for point in inconsistent:
                    click.echo(f"Share x={point.x} does not lie on the recovered polynomial", err=True)
                _logger.warning("%s: %d inconsistent extra shares", path, len(inconsistent))
            else:
                click.echo(f"All {len(records.points)} shares agree")
    except (ShamirError, OSError, ValueError) as exc:
        _logger.error("Error processing %s: %s", path, exc)
        click.echo(f"Error processing {path}: {exc}", err=True)
        if trail is not None:
            details = _audit_details(path, records)
            details.update(outcome="failure", error=type(exc).__name__)
            trail.record_event("recover.failure", details=details)
        click.echo()
        return False

    ok = not (strict and inconsistent)
    if trail is not None:
        details = _audit_details(path, records)
        details.update(outcome="success" if ok else "inconsistent", inconsistent=len(inconsistent))
        trail.record_event("recover.success" if ok else "recover.inconsistent", details=details)
    click.echo()
    return ok


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging verbosity (default from SHAMIR_RECOVER_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Recover Shamir secrets from JSON share records."""

    config = load_config()
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


@cli.command()
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
@click.option("--verify/--no-verify", default=None, help="Check extra shares against the recovered polynomial.")
@click.option("--strict", is_flag=True, help="Treat inconsistent extra shares as a failure.")
@click.option("--audit/--no-audit", default=None, help="Append a signed audit record per file.")
@click.option("--audit-dir", type=click.Path(file_okay=False, path_type=Path), default=None)
@click.pass_obj
def recover(config, files, verify, strict, audit, audit_dir) -> None:
    """Recover the secret of each FILE (default: configured input list)."""

    paths = files or config.default_inputs
    verify = config.verify_extra_shares if verify is None else verify
    audit = config.audit_enabled if audit is None else audit
    trail = AuditTrail(audit_dir or config.audit_dir) if audit else None

    failures = 0
    for path in paths:
        if not _process_file(str(path), verify=verify or strict, strict=strict, trail=trail):
            failures += 1
    if failures:
        raise click.exceptions.Exit(1)


@cli.command("decode")
@click.argument("value")
@click.option("--base", type=click.IntRange(2, 36), required=True)
def decode_cmd(value: str, base: int) -> None:
    """Print VALUE decoded from BASE as a decimal integer."""

    try:
        click.echo(to_decimal(decode(value, base)))
    except ShamirError as exc:
        raise click.ClickException(str(exc)) from exc


def main() -> None:
    cli(prog_name="shamir-recover")


if __name__ == "__main__":
    main()
