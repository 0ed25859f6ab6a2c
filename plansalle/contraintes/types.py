from __future__ import annotations

from enum import Enum

from ..erreurs import ErreurValidation


class TypeContrainte(str, Enum):
    """Types de contraintes entre deux élèves.

    Hérite de `str` pour une sérialisation JSON directe (valeur = nom stable côté API).
    """

    SEPARER = "separate"
    REGROUPER = "pair"

    @classmethod
    def depuis_texte(cls, valeur: object) -> "TypeContrainte":
        try:
            return cls(str(valeur).strip().lower())
        except ValueError as exc:
            raise ErreurValidation(f"Type de contrainte inconnu: {valeur!r}") from exc
