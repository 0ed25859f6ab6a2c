"""
Validation des payloads à la frontière du moteur.

Le moteur suppose des entrées bien typées : tout ce qui ne l'est pas est
rejeté ici par une `ErreurValidation`, avant l'exécution du pipeline.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .erreurs import ErreurValidation
from .modele.disposition import Disposition
from .modele.eleve import Eleve

# drapeau d'aménagement (clé API) -> paramètre de `Eleve`
_DRAPEAUX: Dict[str, str] = {
    "isESE": "ese",
    "has504": "a_504",
    "isELL": "ell",
    "isEBD": "ebd",
}


def _est_liste(valeur: Any) -> bool:
    return isinstance(valeur, (list, tuple))


def _note(brut: Any, sid: Any) -> Optional[float]:
    if brut is None or brut == "":
        return None
    if isinstance(brut, bool):
        raise ErreurValidation(f"Élève id={sid!r} : note booléenne refusée")
    if isinstance(brut, (int, float)):
        note = float(brut)
    else:
        try:
            note = float(str(brut).strip())
        except ValueError as exc:
            raise ErreurValidation(f"Élève id={sid!r} : note non numérique {brut!r}") from exc
    # NaN ou infini casseraient le tri par note
    if not math.isfinite(note):
        raise ErreurValidation(f"Élève id={sid!r} : note non finie {brut!r}")
    return note


def eleve_depuis_payload(s: Mapping[str, Any]) -> Eleve:
    """Convertit un élève du payload (clés de l'API : studentId, name, grade, ...)."""
    if not isinstance(s, Mapping):
        raise ErreurValidation(f"Élève attendu sous forme d'objet, reçu {type(s).__name__}")

    sid = s.get("studentId", s.get("id"))
    if sid is None:
        raise ErreurValidation(f"Élève sans identifiant ('studentId') : {dict(s)!r}")
    if isinstance(sid, bool) or not isinstance(sid, (int, str)):
        raise ErreurValidation(f"Identifiant d'élève entier ou texte attendu, reçu {sid!r}")

    nom = s.get("name")
    if not isinstance(nom, str):
        raise ErreurValidation(f"Élève id={sid!r} : nom manquant ou non textuel")

    genre = s.get("gender")
    if genre is not None and not isinstance(genre, str):
        raise ErreurValidation(f"Élève id={sid!r} : genre non textuel {genre!r}")

    drapeaux: Dict[str, bool] = {}
    for cle, param in _DRAPEAUX.items():
        brut = s.get(cle)
        if brut is not None and not isinstance(brut, bool):
            raise ErreurValidation(f"Élève id={sid!r} : '{cle}' doit être booléen")
        drapeaux[param] = bool(brut)

    return Eleve(sid, nom, note=_note(s.get("grade"), sid), genre=genre, **drapeaux)


def eleves_depuis_payload(students: Any) -> List[Eleve]:
    """
    Convertit la liste d'appel du payload, dans l'ordre reçu.
    Lève `ErreurValidation` si ce n'est pas une liste ou si un identifiant est répété.
    """
    if not _est_liste(students):
        raise ErreurValidation(f"Liste d'élèves attendue, reçu {type(students).__name__}")

    eleves: List[Eleve] = [eleve_depuis_payload(s) for s in students]
    vus: set = set()
    for e in eleves:
        if e.identifiant() in vus:
            raise ErreurValidation(f"Identifiant d'élève répété : {e.identifiant()!r}")
        vus.add(e.identifiant())
    return eleves


def disposition_depuis_payload(layout: Any) -> Disposition:
    """
    Convertit la grille sérialisée de l'éditeur de salle.
    Lève `ErreurValidation` si ce n'est pas une liste de listes de même longueur.
    """
    if not _est_liste(layout):
        raise ErreurValidation(f"Disposition attendue sous forme de liste, reçu {type(layout).__name__}")
    rangees: Sequence[Any] = layout
    for i, rangee in enumerate(rangees):
        if not _est_liste(rangee):
            raise ErreurValidation(f"Rangée {i} de la disposition : liste attendue")
    return Disposition.depuis_jetons(rangees)
