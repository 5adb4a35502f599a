"""
Adaptateur CLI (Typer).

Les commandes sont montees sur l'application Typer dans src/main.py.
"""
