"""Flask CLI commands for MoneyTracker."""

from __future__ import annotations

from pathlib import Path

import click
from flask import Flask

from .logging_config import get_logger

logger = get_logger("cli")


def export_static_site(app: Flask, output_dir: Path) -> Path:
    """Render ``/`` through the test client and write it as ``output_dir/index.html``."""

    with app.test_client() as client:
        response = client.get("/")
    if response.status_code != 200:
        raise click.ClickException(f"Landing page render failed with HTTP {response.status_code}")

    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / app.config["EXPORT_FILENAME"]
    target.write_bytes(response.get_data())
    logger.info("Static export written", extra={"path": str(target), "bytes": len(response.data)})
    return target


def init_app(app: Flask) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("moneytracker-export")
    @click.option(
        "--output",
        "output",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Directory to write index.html into (defaults to EXPORT_DIR).",
    )
    def moneytracker_export(output: Path | None) -> None:
        """Export the landing page as static HTML."""

        target_dir = output or Path(app.config["EXPORT_DIR"])
        click.echo(f"Exporting landing page to {target_dir}...")
        path = export_static_site(app, target_dir)
        click.echo(f"Export written: {path}")
