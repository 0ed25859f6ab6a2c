from __future__ import annotations

import pytest

from plansalle.configuration import ConfigurationPlan
from plansalle.contraintes.ensemble import EnsembleContraintes
from plansalle.contraintes.paire import ContraintePaire, contrainte_depuis_code
from plansalle.contraintes.types import TypeContrainte
from plansalle.contraintes.verification import verifier_contraintes
from plansalle.erreurs import ContrainteDupliquee, ContrainteIntrouvable, ErreurValidation
from plansalle.generateur import generer_plan
from plansalle.modele.disposition import Disposition
from plansalle.modele.eleve import Eleve
from plansalle.modele.position import Position


def test_paire_normalisee():
    c = ContraintePaire.creer(5, 2, TypeContrainte.SEPARER)
    assert (c.id_1, c.id_2) == (2, 5)
    assert c.implique(5) and not c.implique(3)


def test_paire_invalide():
    with pytest.raises(ErreurValidation):
        ContraintePaire.creer(3, 3, TypeContrainte.REGROUPER)
    with pytest.raises(ErreurValidation):
        ContraintePaire.creer(3, "a", TypeContrainte.REGROUPER)


def test_doublon_dans_les_deux_sens():
    ens = EnsembleContraintes()
    c = ens.ajouter(1, 4, TypeContrainte.SEPARER)
    assert c.identifiant == 1
    with pytest.raises(ContrainteDupliquee):
        ens.ajouter(4, 1, TypeContrainte.REGROUPER)
    assert len(ens) == 1
    assert ens.entre(4, 1) == c


def test_recherches():
    ens = EnsembleContraintes()
    ens.ajouter(1, 2, TypeContrainte.SEPARER)
    ens.ajouter(3, 1, TypeContrainte.REGROUPER)
    ens.ajouter(7, 8, TypeContrainte.SEPARER)
    assert [c.identifiant for c in ens.pour_eleve(1)] == [1, 2]
    assert [c.identifiant for c in ens.pour_periode({7, 8, 9})] == [3]
    assert ens.entre(2, 3) is None


def test_modifier_et_supprimer():
    ens = EnsembleContraintes()
    c = ens.ajouter(1, 2, TypeContrainte.SEPARER)
    modifiee = ens.modifier_type(c.identifiant, TypeContrainte.REGROUPER)
    assert modifiee.type is TypeContrainte.REGROUPER
    assert ens.obtenir(c.identifiant) == modifiee

    ens.supprimer(c.identifiant)
    assert len(ens) == 0
    # la paire est de nouveau libre, l'identifiant n'est pas réutilisé
    assert ens.ajouter(2, 1, TypeContrainte.SEPARER).identifiant == 2


def test_contrainte_introuvable():
    ens = EnsembleContraintes()
    with pytest.raises(ContrainteIntrouvable):
        ens.obtenir(42)
    with pytest.raises(KeyError):
        ens.supprimer(42)
    with pytest.raises(ContrainteIntrouvable):
        ens.modifier_type(42, TypeContrainte.SEPARER)


def test_satisfaction():
    separer = ContraintePaire.creer(1, 2, TypeContrainte.SEPARER)
    regrouper = ContraintePaire.creer(1, 2, TypeContrainte.REGROUPER)

    diagonale = {1: Position(0, 0), 2: Position(1, 1)}
    assert not separer.est_satisfaite(diagonale)
    assert not regrouper.est_satisfaite(diagonale)

    cote = {1: Position(2, 3), 2: Position(2, 4)}
    assert not separer.est_satisfaite(cote)
    assert regrouper.est_satisfaite(cote)

    loin = {1: Position(0, 0), 2: Position(0, 2)}
    assert separer.est_satisfaite(loin)

    # élève non placé : rien à vérifier
    assert regrouper.est_satisfaite({1: Position(0, 0)})


def test_code_machine():
    c = contrainte_depuis_code({"studentId1": 9, "studentId2": 4, "constraintType": "pair", "constraintId": 3})
    assert c.code_machine() == {"studentId1": 4, "studentId2": 9, "constraintType": "pair", "constraintId": 3}
    with pytest.raises(ErreurValidation):
        contrainte_depuis_code({"studentId1": 1, "constraintType": "pair"})
    with pytest.raises(ErreurValidation):
        contrainte_depuis_code({"studentId1": 1, "studentId2": 2, "constraintType": "avoid"})


def test_identifiants_mal_types_refuses():
    for code in [
        {"studentId1": 1, "studentId2": 2, "constraintType": "pair", "constraintId": "3"},
        {"studentId1": 1, "studentId2": 2, "constraintType": "pair", "constraintId": 2.5},
        {"studentId1": 1, "studentId2": 2, "constraintType": "pair", "constraintId": True},
        {"studentId1": [1], "studentId2": [2], "constraintType": "pair"},
    ]:
        with pytest.raises(ErreurValidation):
            contrainte_depuis_code(code)


def test_identifiant_lu_reutilise_par_la_collection():
    c = contrainte_depuis_code({"studentId1": 1, "studentId2": 2, "constraintType": "pair", "constraintId": 7})
    ens = EnsembleContraintes([c])
    assert ens.obtenir(7) == c
    assert ens.ajouter(3, 4, TypeContrainte.SEPARER).identifiant == 8


def test_verification_sur_un_plan():
    eleves = [Eleve(1, "A"), Eleve(2, "B"), Eleve(3, "C")]
    disp = Disposition.depuis_jetons([["desk", "desk", "desk"]])
    plan = generer_plan(eleves, disp, ConfigurationPlan())
    separer = ContraintePaire.creer(1, 2, TypeContrainte.SEPARER)
    regrouper = ContraintePaire.creer(1, 3, TypeContrainte.REGROUPER)
    assert verifier_contraintes(plan, [separer, regrouper]) == [separer, regrouper]
    assert verifier_contraintes(plan, [ContraintePaire.creer(1, 3, TypeContrainte.SEPARER)]) == []
