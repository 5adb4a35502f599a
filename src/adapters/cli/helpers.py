"""
Fonctions utilitaires partagees par les commandes CLI.
"""

import asyncio
import inspect
from functools import wraps
from typing import Optional


def async_command(func):
    """
    Transforme une fonction async en commande sync via asyncio.run().

    Preserve les annotations Typer pour que les options/arguments soient
    correctement interpretes.

    Usage:
        @app.command()
        @async_command
        async def my_command(...):
            ...
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        return asyncio.run(func(*args, **kwargs))
    wrapper.__signature__ = inspect.signature(func)
    wrapper.__annotations__ = func.__annotations__
    return wrapper


def mask_secret(value: Optional[str]) -> str:
    """Masque un secret en ne montrant que les 4 derniers caracteres."""
    if not value:
        return "(non défini)"
    if len(value) <= 4:
        return "••••"
    return "••••" + value[-4:]
