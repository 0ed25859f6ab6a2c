from __future__ import annotations

import pytest

pytest.importorskip("ortools")

from plansalle.configuration import ConfigurationPlan
from plansalle.contraintes.ajustement import AjusteurCPSAT
from plansalle.contraintes.paire import ContraintePaire
from plansalle.contraintes.types import TypeContrainte
from plansalle.generateur import generer_plan
from plansalle.modele.disposition import Disposition
from plansalle.modele.eleve import Eleve


def _plan(jetons, n):
    eleves = [Eleve(i, f"S{i}") for i in range(1, n + 1)]
    return generer_plan(eleves, Disposition.depuis_jetons(jetons), ConfigurationPlan(), etiquette_enseignant="Prof")


def test_rien_a_corriger():
    plan = _plan([["desk", "desk", "desk"]], 3)
    c = ContraintePaire.creer(1, 3, TypeContrainte.SEPARER)
    res = AjusteurCPSAT(seed=0).ajuster(plan, [c])
    assert res.statut == "INCHANGE"
    assert res.plan is plan
    assert res.deplacements == 0


def test_separer_deux_voisins():
    plan = _plan([["desk", "desk", "desk", "desk", "teacher-desk"]], 4)
    c = ContraintePaire.creer(1, 2, TypeContrainte.SEPARER)
    res = AjusteurCPSAT(seed=0, budget_temps_ms=5_000).ajuster(plan, [c])

    assert res.violations_avant == (c,)
    assert res.violations_apres == ()
    # salle pleine : au moins un échange, donc deux élèves déplacés
    assert res.deplacements == 2
    assert res.statut == "OPTIMAL"
    assert res.plan.contenus()[0][4] == "Prof"
    assert sorted(e.identifiant() for e in res.plan.affectation()) == [1, 2, 3, 4]


def test_regrouper_sur_la_meme_rangee():
    plan = _plan([["desk", "desk"], ["desk", "desk"]], 4)
    c = ContraintePaire.creer(1, 4, TypeContrainte.REGROUPER)
    res = AjusteurCPSAT(seed=0, budget_temps_ms=5_000).ajuster(plan, [c])

    assert res.violations_apres == ()
    assert res.deplacements == 2
    pos = {e.identifiant(): p for e, p in res.plan.affectation().items()}
    assert pos[1].cote_a_cote(pos[4])


def test_contrainte_impossible_ne_deplace_personne():
    # une seule colonne : aucun pupitre côte à côte
    plan = _plan([["desk"], ["desk"], ["desk"]], 3)
    c = ContraintePaire.creer(1, 3, TypeContrainte.REGROUPER)
    res = AjusteurCPSAT(seed=0, budget_temps_ms=5_000).ajuster(plan, [c])

    assert res.violations_apres == (c,)
    assert res.deplacements == 0
    assert res.plan.contenus() == plan.contenus()


def test_ordre_rejoue_la_grille():
    plan = _plan([["desk", "desk", "desk"], ["desk", None, "desk"]], 6)
    c = ContraintePaire.creer(1, 2, TypeContrainte.SEPARER)
    res = AjusteurCPSAT(seed=0, budget_temps_ms=5_000).ajuster(plan, [c])

    assert len(res.violations_apres) <= len(res.violations_avant)
    places = [e for e in res.plan.ordre if e is not None]
    assert [e.identifiant() for e in places][:5] == [
        cellule.eleve.identifiant()
        for rangee in res.plan.grille
        for cellule in rangee
        if cellule.eleve is not None
    ]
    assert res.plan.diagnostic == plan.diagnostic


def test_eleve_non_place_ignore():
    plan = _plan([["desk", "desk"]], 3)
    c = ContraintePaire.creer(1, 3, TypeContrainte.REGROUPER)
    res = AjusteurCPSAT(seed=0).ajuster(plan, [c])
    assert res.statut == "INCHANGE"
