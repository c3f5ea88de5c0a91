"""hwprobe command line interface."""
from __future__ import annotations
import json

import click
import psutil
from colorama import Fore, Style

from ..core.config import DEFAULT_SYSFS_ROOT, SYSFS_ROOT_ENV, sysfs_root
from ..core.errors import HardwareProbeError
from ..core.hardware_probe import HardwareProbe
from ..core.logger import get_logger, setup_logging

log = get_logger(__name__)

EXIT_PROBE_ERROR = 3


def _yes_no(flag: bool) -> str:
    if flag:
        return f"{Fore.GREEN}yes{Style.RESET_ALL}"
    return f"{Fore.YELLOW}no{Style.RESET_ALL}"


def _detect(ctx) -> HardwareProbe:
    try:
        return HardwareProbe.detect(ctx.obj["root"])
    except HardwareProbeError as exc:
        click.echo(f"{Fore.RED}Error: {exc}{Style.RESET_ALL}", err=True)
        ctx.exit(EXIT_PROBE_ERROR)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--root", envvar=SYSFS_ROOT_ENV, type=click.Path(file_okay=False),
              default=None, help="Filesystem root holding sys/ (default /)")
@click.pass_context
def cli(ctx, verbose, root):
    """hwprobe - identify the hardware this machine runs on"""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["root"] = sysfs_root(root)
    log.debug("Using sysfs root %s", ctx.obj["root"])


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print facts as JSON")
@click.pass_context
def info(ctx, as_json):
    """Show vendor, model, disks and peripherals"""
    probe = _detect(ctx)
    root = ctx.obj["root"]
    facts = {
        "vendor": probe.vendor,
        "product_family": probe.product_family,
        "product_name": probe.product_name,
        "disks": list(probe.disk_devices),
        "laptop": HardwareProbe.is_laptop(root),
        "iio_sensors": HardwareProbe.has_iio_device(root),
        "fingerprint_reader": HardwareProbe.has_fingerprint_device(),
        "hdd": probe.has_hdd(),
        "ssd": probe.has_ssd(),
    }

    if as_json:
        click.echo(json.dumps(facts, indent=2))
        return

    click.echo(f"{Fore.BLUE}{Style.BRIGHT}Hardware Information:{Style.RESET_ALL}")
    click.echo(f"  Vendor: {facts['vendor']}")
    click.echo(f"  Family: {facts['product_family']}")
    click.echo(f"  Product: {facts['product_name']}")
    click.echo(f"  Disks: {', '.join(facts['disks']) or 'none'}")
    click.echo(f"  Laptop: {_yes_no(facts['laptop'])}")
    click.echo(f"  IIO sensors: {_yes_no(facts['iio_sensors'])}")
    click.echo(f"  Fingerprint reader: {_yes_no(facts['fingerprint_reader'])}")
    click.echo(f"  HDD: {_yes_no(facts['hdd'])}")
    click.echo(f"  SSD: {_yes_no(facts['ssd'])}")


@cli.command()
@click.pass_context
def disks(ctx):
    """List block devices with their media type"""
    probe = _detect(ctx)
    media = probe.disk_media()
    if not media:
        click.echo(f"{Fore.YELLOW}No sd/nvme block devices found.{Style.RESET_ALL}")
        return
    for device, kind in media.items():
        click.echo(f"  {device}: {kind.upper()}")


@cli.command()
@click.pass_context
def power(ctx):
    """Show laptop classification and battery state

    psutil reads the live /sys, so the battery line is skipped when
    --root points elsewhere.
    """
    root = ctx.obj["root"]
    laptop = HardwareProbe.is_laptop(root)
    click.echo(f"  Laptop: {_yes_no(laptop)}")

    if root != DEFAULT_SYSFS_ROOT:
        click.echo(f"  Battery: not read under alternate root {root}")
        return

    sensors_battery = getattr(psutil, "sensors_battery", None)
    battery = sensors_battery() if sensors_battery is not None else None
    if battery is None:
        click.echo("  Battery: no battery reported")
        return
    source = "AC" if battery.power_plugged else "battery"
    click.echo(f"  Battery: {battery.percent:.0f}% on {source}")

