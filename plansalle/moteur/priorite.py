from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence

from ..configuration import ReglePriorite
from ..modele.eleve import Eleve

logger = logging.getLogger(__name__)

# Drapeau de l'élève consulté par chaque règle
_DRAPEAU_PAR_REGLE: Dict[ReglePriorite, Callable[[Eleve], bool]] = {
    ReglePriorite.ESE: Eleve.est_ese,
    ReglePriorite.ELL: Eleve.est_ell,
    ReglePriorite.PAI_504: Eleve.a_un_504,
    ReglePriorite.EBD: Eleve.est_ebd,
}


def est_prioritaire(eleve: Eleve, regle: ReglePriorite) -> bool:
    """Indique si l'élève porte le drapeau visé par `regle` (toujours faux pour `AUCUNE`)."""
    drapeau = _DRAPEAU_PAR_REGLE.get(regle)
    return drapeau is not None and drapeau(eleve)


def promouvoir(eleves: Sequence[Eleve], regle: ReglePriorite) -> List[Eleve]:
    """
    Place en tête les élèves concernés par `regle`.

    Partition stable : l'ordre relatif à l'intérieur de chaque groupe est
    exactement celui reçu. Avec `AUCUNE`, la liste est rendue inchangée (copie).
    """
    if regle is ReglePriorite.AUCUNE:
        return list(eleves)

    prioritaires: List[Eleve] = [e for e in eleves if est_prioritaire(e, regle)]
    autres: List[Eleve] = [e for e in eleves if not est_prioritaire(e, regle)]
    logger.debug("priorité %s : %d élèves promus", regle.value, len(prioritaires))
    return prioritaires + autres
