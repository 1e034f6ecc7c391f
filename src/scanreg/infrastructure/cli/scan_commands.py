"""CLI command for scanning codes from a keyboard-wedge scanner."""

from __future__ import annotations

import sys

import click

from scanreg.application.notifications import Notification, NotificationChannel
from scanreg.application.scan_intake import ScanIntake
from scanreg.infrastructure.bootstrap import scan_intake
from scanreg.infrastructure.capture.stream_capture_source import StreamCaptureSource
from scanreg.infrastructure.cli.render import render_notification, render_scan_history
from scanreg.infrastructure.config import Settings


def _echo_notification(notification: Notification) -> None:
    click.echo(render_notification(notification))


def _complete_registration(intake: ScanIntake) -> None:
    """Prompt for the fields the scanner cannot provide."""
    click.echo(f"Code: {intake.pending.code}")
    name = click.prompt("Name")
    price = click.prompt("Price")
    intake.submit(name, price)


@click.command("scan")
@click.option(
    "--keep-scanning",
    is_flag=True,
    default=False,
    help="Keep the scanner running after each registration.",
)
@click.option("--history", "show_history", is_flag=True, default=False, help="Print the scan history at the end.")
@click.pass_obj
def scan(settings: Settings, keep_scanning: bool, show_history: bool) -> None:
    """Read codes from stdin (one per line) and register new ones.

    A code that is already registered stops the scan. Press Ctrl-D to
    finish.
    """
    notifications = NotificationChannel(
        ttl=settings.notification_ttl, listener=_echo_notification
    )
    source = StreamCaptureSource(sys.stdin)
    intake = scan_intake(
        settings,
        source,
        notifications,
        stop_after_register=False if keep_scanning else None,
    )

    if not intake.start_scanning():
        raise click.ClickException("Scanner could not be started.")

    try:
        while intake.session.is_active:
            if intake.pending.focus == "name":
                _complete_registration(intake)
                continue
            if not source.poll():
                break
    finally:
        # Input can run out mid-prompt, which click reports as Abort.
        intake.stop_scanning()
        click.echo(f"{intake.session.scan_count} code(s) scanned.")
    if show_history:
        for line in render_scan_history(intake.session.history):
            click.echo(line)
