from __future__ import annotations
import json

import typer
import uvicorn
from loguru import logger

from blogexpress.config import settings
from blogexpress.db import create_tables, get_session_factory
from blogexpress.log_config import setup_logging
from blogexpress.seed import seed_sample_data
from blogexpress.services.dashboard_service import DashboardService

app = typer.Typer(pretty_exceptions_show_locals=False, help="BlogExpress API management.")


@app.command("init-db")
def init_db():
    """Create all tables."""
    setup_logging(settings.LOG_LEVEL)
    create_tables()
    logger.info("[OK] tables created")


@app.command("seed")
def seed():
    """Insert demo data when the database is empty."""
    setup_logging(settings.LOG_LEVEL)
    create_tables()
    db = get_session_factory()()
    try:
        res = seed_sample_data(db)
    finally:
        db.close()
    typer.echo(f"users={len(res['users'])} categories={len(res['categories'])} posts={len(res['posts'])}")


@app.command("stats")
def stats():
    """Print dashboard stats as JSON."""
    setup_logging("WARNING")
    create_tables()
    db = get_session_factory()()
    try:
        result = DashboardService().get_stats(db)
    finally:
        db.close()
    typer.echo(json.dumps(result.model_dump(by_alias=True), indent=2))


@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
):
    """Run the API with uvicorn."""
    setup_logging(settings.LOG_LEVEL)
    logger.info(f"[BOOT] serving on {host}:{port}")
    uvicorn.run("blogexpress.main:app", host=host, port=port, reload=reload, log_config=None)


if __name__ == "__main__":
    app()
