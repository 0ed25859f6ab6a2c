from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..modele.disposition import Case, Disposition
from ..modele.eleve import Eleve
from ..modele.plan import CaseAffectee, Diagnostic, ResultatPlan

logger = logging.getLogger(__name__)


def placer(
        disposition: Disposition,
        ordre: Sequence[Optional[Eleve]],
        etiquette_enseignant: str,
) -> ResultatPlan:
    """
    Remplit les pupitres ligne par ligne avec les entrées de `ordre`.

    - `PUPITRE` : reçoit l'entrée suivante tant qu'il en reste (`None` = place vide),
      reste vide ensuite ;
    - `BUREAU_ENSEIGNANT` : reçoit `etiquette_enseignant`, jamais un élève ;
    - `VIDE` : rien.

    Les entrées au-delà du nombre de pupitres ne sont pas placées ; aucune
    erreur n'est levée, le `Diagnostic` du résultat les recense.
    """
    entrees: Tuple[Optional[Eleve], ...] = tuple(ordre)
    indice: int = 0
    grille: List[Tuple[CaseAffectee, ...]] = []

    for rangee in disposition.rangees():
        cellules: List[CaseAffectee] = []
        for case in rangee:
            if case is Case.PUPITRE:
                eleve: Optional[Eleve] = None
                if indice < len(entrees):
                    eleve = entrees[indice]
                    indice += 1
                cellules.append(CaseAffectee(case=case, eleve=eleve))
            elif case is Case.BUREAU_ENSEIGNANT:
                cellules.append(CaseAffectee(case=case, etiquette=etiquette_enseignant))
            else:
                cellules.append(CaseAffectee(case=case))
        grille.append(tuple(cellules))

    places: List[Eleve] = [e for e in entrees[:indice] if e is not None]
    non_places: Tuple[Eleve, ...] = tuple(e for e in entrees[indice:] if e is not None)
    nb_pupitres: int = disposition.nb_pupitres()

    diagnostic = Diagnostic(
        nb_pupitres=nb_pupitres,
        nb_eleves=len(places) + len(non_places),
        nb_places=len(places),
        eleves_non_places=non_places,
        pupitres_libres=nb_pupitres - len(places),
    )
    if non_places:
        logger.warning(
            "%d élève(s) non placé(s) : %d pupitres pour %d élèves",
            len(non_places), nb_pupitres, diagnostic.nb_eleves,
        )

    return ResultatPlan(grille=tuple(grille), ordre=entrees, diagnostic=diagnostic)
