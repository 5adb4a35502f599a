"""
Point d'entrée CLI de Movie Explorer.

Configure le logging et fournit les commandes CLI (serveur web, configuration, index).
"""

from typing import Annotated

import typer

from . import __version__
from .adapters.cli.commands import info, init_db
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="movie-explorer",
    help="Backend de navigation de films (relais TMDB, comptes et favoris)",
)
container = Container()

app.command()(info)
app.command(name="init-db")(init_db)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Movie Explorer v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 5001,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web Movie Explorer."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    # log_config=None : uvicorn garde les handlers loguru installés par main()
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload, log_config=None)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    app()


if __name__ == "__main__":
    main()
