"""CLI command to start the shul board API server."""

import logging
import click
import uvicorn

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=8080,
    type=int,
    help="Port to bind to (default: 8080)",
)
@click.option(
    "--reload",
    is_flag=True,
    help="Enable auto-reload on code changes",
)
def main(host, port, reload):
    """Start the shul board API server.

    Zmanim are calibrated once at startup and recomputed on every request;
    the parsha is looked up from Hebcal per request.

    Examples:
        # Start with default settings
        shulzmanim-serve

        # Bind to localhost on another port
        shulzmanim-serve --host 127.0.0.1 --port 9000
    """
    click.echo(f"🌐 Starting API server on http://{host}:{port}")
    click.echo()
    click.echo("📍 API Endpoints:")
    click.echo(f"   • Board:         http://{host}:{port}/api/board")
    click.echo(f"   • Weekday:       http://{host}:{port}/api/zmanim/weekday")
    click.echo(f"   • Shabbos:       http://{host}:{port}/api/zmanim/shabbos")
    click.echo(f"   • Calibration:   http://{host}:{port}/api/calibration")
    click.echo(f"   • Health Check:  http://{host}:{port}/health")
    click.echo()
    click.echo("Press Ctrl+C to stop...")
    click.echo()

    try:
        uvicorn.run(
            "shulzmanim.api.rest:create_app",
            factory=True,
            host=host,
            port=port,
            log_level="info",
            reload=reload,
        )
    except KeyboardInterrupt:
        click.echo("\n🛑 Shutting down...")


if __name__ == "__main__":
    main()
