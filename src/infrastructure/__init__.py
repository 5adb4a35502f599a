"""
Couche infrastructure de Movie Explorer.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Stockage MongoDB (client et repositories)

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer l'implementation (ex: un autre stockage documentaire)
sans modifier la logique metier.
"""
