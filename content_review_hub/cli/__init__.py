"""
Command Line Interface for the Content Review Hub.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..db.base import get_session_local, init_database
from ..logging_config import configure_logging
from ..review.checklist import get_checklist
from ..review.derivation import derive_status
from ..review.enums import (
    AssetStatus,
    AssetType,
    Channel,
    LensStatus,
    ReviewLens,
    RiskLevel,
)
from ..review.filters import AssetFilter, last_lens_update
from ..review.hub import ReviewHub
from ..review.identity import Identity
from ..review.services import PersistenceError, SqlAssetStore

app = typer.Typer(help="Content Review Hub - multi-lens review for creative assets")
console = Console()

STATUS_STYLES = {
    AssetStatus.DRAFT: "white",
    AssetStatus.IN_REVIEW: "yellow",
    AssetStatus.APPROVED: "green",
    AssetStatus.BLOCKED: "red",
    AssetStatus.ARCHIVED: "dim",
}

LENS_STATUS_STYLES = {
    LensStatus.NOT_STARTED: "dim",
    LensStatus.IN_REVIEW: "yellow",
    LensStatus.CHANGES_REQUESTED: "red",
    LensStatus.APPROVED: "green",
}


@app.command()
def serve(
    port: Optional[int] = typer.Option(None, help="Port to run the API server on"),
    host: Optional[str] = typer.Option(None, help="Host to bind the server to"),
    dev: bool = typer.Option(False, help="Run in development mode with reload"),
):
    """Start the API server."""
    from ..main import run

    console.print(Panel.fit("Starting Content Review Hub", style="bold blue"))
    run(host=host, port=port, reload=dev or None)


@app.command("init-db")
def init_db():
    """Create the database tables."""
    configure_logging()
    init_database()
    console.print("[green]Database initialized[/green]")


@app.command()
def checklist(lens: ReviewLens = typer.Argument(..., help="Lens to show")):
    """Show the checklist catalog for a lens."""
    table = Table(title=f"Checklist: {lens.value}")
    table.add_column("ID", style="cyan")
    table.add_column("Item")
    table.add_column("Required")

    for item in get_checklist(lens):
        table.add_row(item.id, item.label, "yes" if item.required else "no")

    console.print(table)


@app.command()
def assets(
    user: str = typer.Option(..., "--user", "-u", help="User id to list assets for"),
    search: Optional[str] = typer.Option(None, help="Search title and tags"),
    status: Optional[AssetStatus] = typer.Option(None, help="Filter by status"),
    risk: Optional[RiskLevel] = typer.Option(None, help="Filter by risk level"),
    channel: Optional[Channel] = typer.Option(None, help="Filter by channel"),
    asset_type: Optional[AssetType] = typer.Option(None, help="Filter by asset type"),
    lens_not_approved: Optional[ReviewLens] = typer.Option(
        None, help="Only assets where this lens is not approved"
    ),
):
    """List a user's assets, most recently reviewed first."""
    criteria = AssetFilter(
        search=search,
        status=status,
        risk_level=risk,
        channel=channel,
        asset_type=asset_type,
        lens_not_approved=lens_not_approved,
    )

    db = get_session_local()()
    try:
        hub = ReviewHub(SqlAssetStore(db), Identity(user_id=user), seed_demo_assets=False)
        rows = hub.list_assets(criteria)
    except PersistenceError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1)
    finally:
        db.close()

    table = Table(title=f"Assets for {user}")
    table.add_column("Title")
    table.add_column("Status")
    table.add_column("Risk")
    table.add_column("Legal")
    table.add_column("Brand")
    table.add_column("UX")
    table.add_column("Last update")

    for asset in rows:
        lens_cells = [
            f"[{LENS_STATUS_STYLES[r.status]}]{r.status.value}[/]"
            for r in asset.lens_reviews()
        ]
        table.add_row(
            asset.title,
            f"[{STATUS_STYLES[asset.status]}]{asset.status.value}[/]",
            asset.risk_level.value,
            *lens_cells,
            last_lens_update(asset).strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)


@app.command()
def derive(
    legal: LensStatus = typer.Argument(..., help="Legal & compliance lens status"),
    brand: LensStatus = typer.Argument(..., help="Brand & ethics lens status"),
    ux: LensStatus = typer.Argument(..., help="UX & safety lens status"),
    risk: RiskLevel = typer.Option(RiskLevel.LOW, help="Asset risk level"),
    current: Optional[AssetStatus] = typer.Option(
        None, help="Current asset status (for the sticky fallback)"
    ),
):
    """Show the asset status derived from three lens statuses."""
    result = derive_status([legal, brand, ux], risk, current)
    console.print(f"[{STATUS_STYLES[result]}]{result.value}[/]")


if __name__ == "__main__":
    app()
