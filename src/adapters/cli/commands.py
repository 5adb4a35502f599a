"""
Commandes CLI de Movie Explorer.

- info : affiche la configuration courante (secrets masques)
- init-db : cree les index MongoDB de la collection users
"""

import typer
from loguru import logger
from pymongo.errors import PyMongoError
from rich.console import Console
from rich.table import Table

from src.adapters.cli.helpers import async_command, mask_secret
from src.config import Settings
from src.container import Container
from src.infrastructure.persistence.database import close_client

console = Console()


def build_info_table(settings: Settings) -> Table:
    """Construit le tableau de configuration affiche par `info`."""
    table = Table(title="Configuration Movie Explorer", show_header=True)
    table.add_column("Paramètre", style="cyan")
    table.add_column("Valeur")

    table.add_row("MongoDB", settings.mongo_uri.split("@")[-1])
    table.add_row("Base", settings.mongo_db_name)
    table.add_row("Clé TMDB", mask_secret(settings.tmdb_api_key))
    table.add_row("Langue TMDB", settings.tmdb_language)
    table.add_row("Secret JWT", mask_secret(settings.jwt_secret))
    table.add_row("Durée des jetons", f"{settings.jwt_expires_minutes} min")
    table.add_row("Google Sign-In", "activé" if settings.google_enabled else "désactivé")
    table.add_row("Origines CORS", ", ".join(settings.cors_origins) or "-")
    table.add_row("Regex CORS", settings.cors_origin_regex or "-")
    table.add_row("Niveau de log", settings.log_level)
    table.add_row("Fichier de log", str(settings.log_file))
    return table


def info() -> None:
    """Affiche la configuration actuelle."""
    settings = Container().config()
    console.print(build_info_table(settings))


@async_command
async def init_db() -> None:
    """Cree les index d'unicite de la collection users."""
    container = Container()
    settings = container.config()
    try:
        await container.user_repository().ensure_indexes()
    except PyMongoError as e:
        logger.error(f"Creation des index impossible: {e}")
        console.print(f"[red]Echec de la connexion a MongoDB : {e}[/red]")
        raise typer.Exit(code=1)
    finally:
        await close_client(container.mongo_client())
    console.print(f"[green]Index crees sur {settings.mongo_db_name}.users[/green]")
