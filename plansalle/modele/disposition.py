from __future__ import annotations

from enum import Enum
from typing import Any, Iterator, List, Sequence, Tuple

from ..erreurs import ErreurValidation
from .position import Position


class Case(str, Enum):
    """Nature d'une case de la disposition.

    Hérite de `str` pour une sérialisation JSON directe (valeur = jeton de l'éditeur).
    """

    VIDE = "empty"
    PUPITRE = "desk"
    BUREAU_ENSEIGNANT = "teacher-desk"

    @classmethod
    def depuis_jeton(cls, jeton: Any) -> "Case":
        """Interprète un jeton sérialisé par l'éditeur de salle.

        `None`, `""` et les nombres (grille initiale de l'éditeur) valent `VIDE`.
        Lève `ErreurValidation` pour toute autre chaîne inconnue.
        """
        if jeton is None or jeton == "":
            return cls.VIDE
        if isinstance(jeton, Case):
            return jeton
        if isinstance(jeton, (int, float)) and not isinstance(jeton, bool):
            return cls.VIDE
        if isinstance(jeton, str):
            try:
                return cls(jeton)
            except ValueError as exc:
                raise ErreurValidation(f"Jeton de case inconnu: {jeton!r}") from exc
        raise ErreurValidation(f"Jeton de case invalide: {jeton!r}")


class Disposition:
    """
    Modélise la disposition d'une salle : grille rectangulaire de cases.

    Convention :
    - rangée 0 en haut, colonne 0 à gauche ;
    - l'ordre « ligne par ligne » (rangée croissante, puis colonne croissante)
      est l'ordre dans lequel les pupitres reçoivent les élèves.

    Exemple :
        cases = [
            [Case.PUPITRE, Case.VIDE, Case.PUPITRE],
            [Case.VIDE, Case.PUPITRE, Case.BUREAU_ENSEIGNANT],
        ]
    """

    def __init__(self, cases: Sequence[Sequence[Case]]) -> None:
        """
        Args:
            cases: liste de rangées ; chaque rangée liste ses cases de gauche
                   à droite. Toutes les rangées doivent avoir la même longueur.
        """
        self._cases: Tuple[Tuple[Case, ...], ...] = tuple(tuple(rangee) for rangee in cases)

        largeurs = {len(rangee) for rangee in self._cases}
        if len(largeurs) > 1:
            raise ErreurValidation(
                f"Disposition non rectangulaire : longueurs de rangées {sorted(largeurs)}"
            )

        # Parcours rangée par rangée, puis colonne par colonne
        self._pupitres: Tuple[Position, ...] = tuple(
            Position(rangee=r, colonne=c)
            for r, rangee in enumerate(self._cases)
            for c, case in enumerate(rangee)
            if case is Case.PUPITRE
        )

    @classmethod
    def depuis_jetons(cls, grille: Sequence[Sequence[Any]]) -> "Disposition":
        """Construit une disposition à partir de la grille sérialisée (jetons texte)."""
        return cls([[Case.depuis_jeton(j) for j in rangee] for rangee in grille])

    # --- Accès de base -----------------------------------------------------

    def nb_rangees(self) -> int:
        return len(self._cases)

    def nb_colonnes(self) -> int:
        return len(self._cases[0]) if self._cases else 0

    def case(self, position: Position) -> Case:
        """Retourne la nature de la case en `position`."""
        return self._cases[position.rangee][position.colonne]

    def rangees(self) -> Tuple[Tuple[Case, ...], ...]:
        """Retourne la grille brute (immuable)."""
        return self._cases

    def parcours(self) -> Iterator[Tuple[Position, Case]]:
        """Itère sur toutes les cases, ligne par ligne."""
        for r, rangee in enumerate(self._cases):
            for c, case in enumerate(rangee):
                yield Position(rangee=r, colonne=c), case

    # --- Lecture des pupitres ---------------------------------------------

    def positions_pupitres(self) -> List[Position]:
        """
        Énumère les pupitres dans l'ordre ligne par ligne.

        C'est l'ordre de remplissage : le premier pupitre reçoit la première
        entrée de la liste ordonnée.
        """
        return list(self._pupitres)

    def nb_pupitres(self) -> int:
        """Nombre de cases `PUPITRE`."""
        return len(self._pupitres)

    def jetons(self) -> List[List[str]]:
        """Retourne la grille sérialisée (liste de listes de jetons)."""
        return [[case.value for case in rangee] for rangee in self._cases]

    def __str__(self) -> str:
        """
        Représentation texte simple : une ligne par rangée.
        Utile pour debug.
        """
        symboles = {Case.VIDE: ".", Case.PUPITRE: "P", Case.BUREAU_ENSEIGNANT: "T"}
        return "\n".join("".join(symboles[c] for c in rangee) for rangee in self._cases)
