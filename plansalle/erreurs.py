from __future__ import annotations


class ErreurValidation(ValueError):
    """Entrée mal typée ou mal formée, rejetée avant l'exécution du moteur."""


class ContrainteDupliquee(ValueError):
    """Une contrainte existe déjà pour cette paire d'élèves (dans un sens ou l'autre)."""


class ContrainteIntrouvable(KeyError):
    """Aucune contrainte ne porte l'identifiant demandé."""
