from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .disposition import Case
from .eleve import Eleve
from .position import Position


@dataclass(frozen=True)
class CaseAffectee:
    """Contenu d'une case après placement.

    Attributs
    ---------
    case : Case
        Nature de la case dans la disposition d'origine.
    eleve : Optional[Eleve]
        Élève assis sur ce pupitre, `None` pour un pupitre laissé vide.
    etiquette : Optional[str]
        Étiquette de l'enseignant, uniquement sur un `BUREAU_ENSEIGNANT`.
    """

    case: Case
    eleve: Optional[Eleve] = None
    etiquette: Optional[str] = None

    def contenu(self) -> str:
        """Texte à afficher dans la case (chaîne vide si rien)."""
        if self.eleve is not None:
            return self.eleve.nom()
        return self.etiquette or ""

    def en_json(self) -> Dict[str, Any]:
        return {
            "cell": self.case.value,
            "studentId": self.eleve.identifiant() if self.eleve is not None else None,
            "content": self.contenu(),
        }


@dataclass(frozen=True)
class Diagnostic:
    """Comptes de débordement d'un placement.

    Le moteur ne lève jamais d'erreur quand la liste et les pupitres ne
    correspondent pas : ces comptes permettent à l'appelant d'avertir.
    """

    nb_pupitres: int
    nb_eleves: int
    nb_places: int
    eleves_non_places: Tuple[Eleve, ...] = ()
    pupitres_libres: int = 0

    def deborde(self) -> bool:
        """Vrai si des élèves n'ont pas pu être placés."""
        return bool(self.eleves_non_places)

    def en_json(self) -> Dict[str, Any]:
        return {
            "desks": self.nb_pupitres,
            "students": self.nb_eleves,
            "placed": self.nb_places,
            "unplaced": [e.identifiant() for e in self.eleves_non_places],
            "free_desks": self.pupitres_libres,
        }


@dataclass(frozen=True)
class ResultatPlan:
    """Résultat d'un placement : grille de mêmes dimensions que la disposition.

    Attributs
    ---------
    grille : Tuple[Tuple[CaseAffectee, ...], ...]
        Contenu de chaque case, rangée par rangée.
    ordre : Tuple[Optional[Eleve], ...]
        Séquence finale utilisée pour le remplissage (`None` = place laissée vide).
    diagnostic : Diagnostic
        Comptes de débordement.
    """

    grille: Tuple[Tuple[CaseAffectee, ...], ...]
    ordre: Tuple[Optional[Eleve], ...] = ()
    diagnostic: Diagnostic = field(default_factory=lambda: Diagnostic(0, 0, 0))

    def case(self, position: Position) -> CaseAffectee:
        return self.grille[position.rangee][position.colonne]

    def affectation(self) -> Dict[Eleve, Position]:
        """Retourne {élève -> position} pour les élèves effectivement placés."""
        out: Dict[Eleve, Position] = {}
        for r, rangee in enumerate(self.grille):
            for c, cellule in enumerate(rangee):
                if cellule.eleve is not None:
                    out[cellule.eleve] = Position(rangee=r, colonne=c)
        return out

    def contenus(self) -> List[List[str]]:
        """Grille des textes affichés."""
        return [[cellule.contenu() for cellule in rangee] for rangee in self.grille]

    def en_json(self) -> Dict[str, Any]:
        return {
            "grid": [[cellule.en_json() for cellule in rangee] for rangee in self.grille],
            "order": [e.identifiant() if e is not None else None for e in self.ordre],
            "diagnostic": self.diagnostic.en_json(),
        }

    def __str__(self) -> str:
        """
        Représentation texte : une ligne par rangée, cases séparées par « | ».
        Utile pour debug et pour la CLI.
        """
        lignes: List[str] = []
        for rangee in self.grille:
            morceaux: List[str] = []
            for cellule in rangee:
                if cellule.case is Case.VIDE:
                    morceaux.append("")
                elif cellule.case is Case.PUPITRE and cellule.eleve is None:
                    morceaux.append("_")
                else:
                    morceaux.append(cellule.contenu())
            lignes.append(" | ".join(f"{m:^12s}" for m in morceaux))
        return "\n".join(lignes)
