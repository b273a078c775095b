#!/usr/bin/env python3
import sys
import click
from flask import current_app
from flask.cli import FlaskGroup
from dnssec_admin.app import create_app
from dnssec_admin.database.service import ZoneRepository
from dnssec_admin.dnssec.runner import CommandRunner
from dnssec_admin.dnssec.zones import DnssecService

# Set up CLI command group
@click.group(cls=FlaskGroup, create_app=create_app)
def cli():
    """Management script for the DNSSEC zone application"""
    pass

def _service():
    return DnssecService(CommandRunner.from_config(current_app.config), ZoneRepository())

def _report(result, success_message):
    """Print the utility output and the outcome, exit non-zero on failure"""
    for line in result.output:
        click.echo(line)

    if result.error is not None:
        click.echo(f"Error: {result.error.message}", err=True)
        sys.exit(1)

    click.echo(success_message)

@cli.command("check-tool")
def check_tool_command():
    """Check that the DNSSEC utility can be called"""
    runner = CommandRunner.from_config(current_app.config)
    error = runner.availability_error()

    click.echo(f"Command: {runner.command or '(not configured)'}")
    click.echo(f"Execution enabled: {runner.exec_enabled}")
    if error is not None:
        click.echo(f"Unavailable: {error.message}", err=True)
        sys.exit(1)
    click.echo("DNSSEC utility is available")

@cli.command("secure-zone")
@click.argument("zone")
def secure_zone_command(zone):
    """Secure ZONE with DNSSEC"""
    _report(_service().secure_zone(zone), f"Zone {zone} secured")

@cli.command("disable-dnssec")
@click.argument("zone")
def disable_dnssec_command(zone):
    """Disable DNSSEC for ZONE"""
    _report(_service().disable_zone(zone), f"DNSSEC disabled for zone {zone}")

@cli.command("zone-status")
@click.argument("zone")
def zone_status_command(zone):
    """Show whether ZONE is secured"""
    result = _service().zone_secured(zone)
    state = "secured" if result.success else "not secured"
    _report(result, f"Zone {zone} is {state}")

@cli.command("rectify-zone")
@click.argument("domain_id", type=int)
def rectify_zone_command(domain_id):
    """Rectify the zone of domain DOMAIN_ID"""
    result = _service().rectify_zone(domain_id)
    if result.success:
        _report(result, f"Zone of domain {domain_id} rectified")
    else:
        _report(result, f"Nothing to rectify for domain {domain_id}")

@cli.command("init-db")
def init_db_command():
    """Create the PowerDNS tables in a development database"""
    from dnssec_admin.database.init import create_tables
    create_tables(current_app)
    click.echo("Database tables created.")

@cli.command("create-api-client")
@click.argument("name")
def create_api_client_command(name):
    """Generate new API client credentials"""
    from dnssec_admin.api.security import generate_api_client
    credentials, env_line = generate_api_client(name)

    click.echo("\n=== New API Client Credentials ===")
    click.echo(f"Client Name: {credentials['client_name']}")
    click.echo(f"Client ID: {credentials['client_id']}")
    click.echo(f"API Key: {credentials['api_key']}")
    click.echo(f"Secret Key: {credentials['secret_key']}")
    click.echo("===================================")
    click.echo("\nEnvironment Variable Format:")
    click.echo(env_line)

@cli.command("purge-rate-limits")
def purge_rate_limits_command():
    """Purge all rate limiting data"""
    from dnssec_admin.api.limiter import limiter
    limiter.reset()
    click.echo("Rate limiting data purged.")

if __name__ == "__main__":
    cli()
