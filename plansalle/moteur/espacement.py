from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..modele.eleve import Eleve

logger = logging.getLogger(__name__)


def espacer(eleves: Sequence[Optional[Eleve]], nb_pupitres: int) -> List[Optional[Eleve]]:
    """
    Répartit les pupitres libres dans la liste au lieu de les laisser en fin de salle.

    Pour `i` de 1 à `nb_pupitres - len(eleves)`, insère une place vide (`None`)
    à l'indice `len(eleves) - i` de la liste en cours de construction. Un indice
    négatif compte depuis la fin (sémantique de `list.insert`).

    Sans pupitre libre, la liste est rendue telle quelle (copie) : la troncature
    éventuelle relève du placement.
    """
    longueur: int = len(eleves)
    libres: int = nb_pupitres - longueur
    espaces: List[Optional[Eleve]] = list(eleves)
    if libres <= 0:
        return espaces

    for i in range(1, libres + 1):
        espaces.insert(longueur - i, None)

    logger.debug("espacement : %d places vides insérées", libres)
    return espaces
