from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Sequence, Tuple

from ortools.sat.python import cp_model

from ..modele.disposition import Case
from ..modele.eleve import Eleve
from ..modele.plan import CaseAffectee, ResultatPlan
from ..modele.position import Position
from .paire import ContraintePaire
from .types import TypeContrainte
from .verification import verifier_contraintes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResultatAjustement:
    """Résultat d'une passe d'ajustement.

    Attributs
    ---------
    plan : ResultatPlan
        Nouveau plan (ou le plan d'origine si rien n'a été changé).
    violations_avant, violations_apres : Tuple[ContraintePaire, ...]
        Contraintes violées avant et après la passe.
    deplacements : int
        Nombre d'élèves ayant changé de pupitre.
    statut : str
        "INCHANGE" (rien à corriger), "OPTIMAL", "FEASIBLE" ou "ECHEC".
    """

    plan: ResultatPlan
    violations_avant: Tuple[ContraintePaire, ...] = ()
    violations_apres: Tuple[ContraintePaire, ...] = ()
    deplacements: int = 0
    statut: str = "INCHANGE"
    details: Dict[str, int] = field(default_factory=dict)


class AjusteurCPSAT:
    """
    Passe optionnelle, exécutée APRÈS le placement, qui tient compte des
    contraintes entre élèves avec OR-Tools CP-SAT.

    Seuls les élèves déjà placés sont réassis, sur les pupitres de la salle.
    Objectif (pondéré) :
      (1) Min #contraintes violées
      (2) Min #élèves déplacés par rapport au plan d'origine

    Le pipeline de base (`generer_plan`) n'appelle jamais cette classe.
    """

    def __init__(self, *, seed: Optional[int] = None, budget_temps_ms: Optional[int] = None) -> None:
        self.seed = seed
        self.budget_temps_ms = budget_temps_ms

    # ------------------------------------------------------------------ API

    def ajuster(self, resultat: ResultatPlan, contraintes: Sequence[ContraintePaire]) -> ResultatAjustement:
        violations_avant: Tuple[ContraintePaire, ...] = tuple(verifier_contraintes(resultat, contraintes))
        if not violations_avant:
            return ResultatAjustement(plan=resultat)

        pupitres: List[Position] = [
            Position(rangee=r, colonne=c)
            for r, rangee in enumerate(resultat.grille)
            for c, cellule in enumerate(rangee)
            if cellule.case is Case.PUPITRE
        ]
        affectation: Dict[Eleve, Position] = resultat.affectation()
        eleves: List[Eleve] = sorted(affectation, key=lambda e: (affectation[e].rangee, affectation[e].colonne))
        index_eleve: Dict[Hashable, int] = {e.identifiant(): k for k, e in enumerate(eleves)}
        index_pupitre: Dict[Position, int] = {p: i for i, p in enumerate(pupitres)}
        depart: List[int] = [index_pupitre[affectation[e]] for e in eleves]

        pertinentes = [c for c in contraintes if c.id_1 in index_eleve and c.id_2 in index_eleve]

        model, x, penalites = self._build_model(pupitres, depart, index_eleve, pertinentes)

        E = len(eleves)
        poids: int = E + 1
        model.Minimize(poids * sum(penalites) - sum(x[e][depart[e]] for e in range(E)))

        solver = self._make_solver()
        status = solver.Solve(model)
        if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
            logger.warning("ajustement : aucune solution (%s), plan conservé", solver.StatusName(status))
            return ResultatAjustement(
                plan=resultat,
                violations_avant=violations_avant,
                violations_apres=violations_avant,
                statut="ECHEC",
            )

        occupant: Dict[Position, Eleve] = {}
        deplacements: int = 0
        for e_idx, eleve in enumerate(eleves):
            for i, pos in enumerate(pupitres):
                if solver.Value(x[e_idx][i]) == 1:
                    occupant[pos] = eleve
                    if i != depart[e_idx]:
                        deplacements += 1
                    break

        plan = self._reconstruire(resultat, pupitres, occupant)
        violations_apres = tuple(verifier_contraintes(plan, contraintes))
        logger.info(
            "ajustement %s : %d -> %d contrainte(s) violée(s), %d élève(s) déplacé(s)",
            solver.StatusName(status), len(violations_avant), len(violations_apres), deplacements,
        )
        return ResultatAjustement(
            plan=plan,
            violations_avant=violations_avant,
            violations_apres=violations_apres,
            deplacements=deplacements,
            statut="OPTIMAL" if status == cp_model.OPTIMAL else "FEASIBLE",
            details={"contraintes_modelisees": len(pertinentes), "eleves": E, "pupitres": len(pupitres)},
        )

    # ------------------------------------------------------------------ Construction du modèle

    @staticmethod
    def _build_model(
            pupitres: Sequence[Position],
            depart: Sequence[int],
            index_eleve: Dict[Hashable, int],
            contraintes: Sequence[ContraintePaire],
    ) -> Tuple[cp_model.CpModel, List[List[cp_model.IntVar]], List[cp_model.IntVar]]:
        E = len(depart)
        S = len(pupitres)

        model = cp_model.CpModel()

        # x[e][i] : l'élève e occupe le pupitre i
        x: List[List[cp_model.IntVar]] = [[model.NewBoolVar(f"x_e{e}_p{i}") for i in range(S)] for e in range(E)]

        for e in range(E):
            model.AddExactlyOne(x[e])
        for i in range(S):
            model.AddAtMostOne([x[e][i] for e in range(E)])

        # le plan d'origine est une solution : on le donne comme indice
        for e in range(E):
            for i in range(S):
                model.AddHint(x[e][i], 1 if i == depart[e] else 0)

        voisins: Dict[int, List[int]] = {
            i: [j for j in range(S) if pupitres[i].voisine_de(pupitres[j])] for i in range(S)
        }
        cote: Dict[int, List[int]] = {
            i: [j for j in range(S) if pupitres[i].cote_a_cote(pupitres[j])] for i in range(S)
        }

        penalites: List[cp_model.IntVar] = []
        for c in contraintes:
            a = index_eleve[c.id_1]
            b = index_eleve[c.id_2]
            v = model.NewBoolVar(f"viol_{a}_{b}")
            if c.type is TypeContrainte.SEPARER:
                # (a) voisins -> violation
                for i in range(S):
                    for j in voisins[i]:
                        model.Add(x[a][i] + x[b][j] - 1 <= v)
            else:
                # (b) côte à côte requis, sinon violation
                cote_a_cote: List[cp_model.IntVar] = []
                for i in range(S):
                    if not cote[i]:
                        continue
                    y = model.NewBoolVar(f"cote_{a}_{b}_p{i}")
                    model.Add(y <= x[a][i])
                    model.Add(y <= sum(x[b][j] for j in cote[i]))
                    cote_a_cote.append(y)
                if cote_a_cote:
                    model.Add(sum(cote_a_cote) + v >= 1)
                else:
                    model.Add(v == 1)
            penalites.append(v)

        return model, x, penalites

    def _make_solver(self) -> cp_model.CpSolver:
        solver = cp_model.CpSolver()
        if self.budget_temps_ms is not None and self.budget_temps_ms > 0:
            solver.parameters.max_time_in_seconds = max(0.1, self.budget_temps_ms / 1000.0)
        solver.parameters.num_workers = 8
        if self.seed is not None:
            solver.parameters.random_seed = int(self.seed)
        return solver

    # ------------------------------------------------------------------ Reconstruction

    @staticmethod
    def _reconstruire(
            resultat: ResultatPlan,
            pupitres: Sequence[Position],
            occupant: Dict[Position, Eleve],
    ) -> ResultatPlan:
        grille = tuple(
            tuple(
                CaseAffectee(case=cellule.case, eleve=occupant.get(Position(rangee=r, colonne=c)))
                if cellule.case is Case.PUPITRE else cellule
                for c, cellule in enumerate(rangee)
            )
            for r, rangee in enumerate(resultat.grille)
        )
        # séquence qui, replacée ligne par ligne, redonne exactement cette grille
        ordre: Tuple[Optional[Eleve], ...] = (
                tuple(occupant.get(p) for p in pupitres) + resultat.diagnostic.eleves_non_places
        )
        return ResultatPlan(grille=grille, ordre=ordre, diagnostic=resultat.diagnostic)
