from __future__ import annotations

from typing import Dict, Hashable, Iterable, List

from ..modele.plan import ResultatPlan
from ..modele.position import Position
from .paire import ContraintePaire


def affectation_par_id(resultat: ResultatPlan) -> Dict[Hashable, Position]:
    """{identifiant élève -> position} pour les élèves placés."""
    return {e.identifiant(): p for e, p in resultat.affectation().items()}


def verifier_contraintes(resultat: ResultatPlan, contraintes: Iterable[ContraintePaire]) -> List[ContraintePaire]:
    """
    Retourne les contraintes violées par un plan, sans le modifier.

    Une contrainte dont l'un des élèves n'est pas placé est considérée satisfaite.
    """
    affectation = affectation_par_id(resultat)
    return [c for c in contraintes if not c.est_satisfaite(affectation)]
