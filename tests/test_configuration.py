from __future__ import annotations

import pytest

from plansalle.configuration import ConfigurationPlan, PreferencePlacement, ReglePriorite
from plansalle.erreurs import ErreurValidation


def test_drapeaux_premier_vrai_l_emporte():
    assert PreferencePlacement.depuis_drapeaux(
        {"seatHighLow": True, "seatAlphabetical": True}
    ) is PreferencePlacement.ALPHABETIQUE
    assert PreferencePlacement.depuis_drapeaux(
        {"seatMaleFemale": True, "seatRandomize": True}
    ) is PreferencePlacement.ALEATOIRE
    assert PreferencePlacement.depuis_drapeaux({"seatHighLow": False}) is PreferencePlacement.AUCUNE


def test_priorites_premier_vrai_l_emporte():
    assert ReglePriorite.depuis_drapeaux({"ebdIsPriority": True, "ellIsPriority": True}) is ReglePriorite.ELL
    assert ReglePriorite.depuis_drapeaux(
        {"ebdIsPriority": True, "fiveZeroFourIsPriority": True}
    ) is ReglePriorite.PAI_504
    assert ReglePriorite.depuis_drapeaux({}) is ReglePriorite.AUCUNE


@pytest.mark.parametrize("texte", ["highLow", "high_low", "HIGH-LOW", " highlow "])
def test_lecture_tolerante(texte):
    assert PreferencePlacement.depuis_texte(texte) is PreferencePlacement.NOTE_HAUTE_BASSE


@pytest.mark.parametrize("texte", ["504", "plan504", "fiveZeroFour", "has504"])
def test_alias_504(texte):
    assert ReglePriorite.depuis_texte(texte) is ReglePriorite.PAI_504


def test_valeurs_inconnues_refusees():
    with pytest.raises(ErreurValidation):
        PreferencePlacement.depuis_texte("byHeight")
    with pytest.raises(ErreurValidation):
        ReglePriorite.depuis_texte("gifted")


def test_options_prioritaires_sur_les_drapeaux():
    config = ConfigurationPlan.depuis_options(
        {"ordering": "maleFemale"},
        {"seatAlphabetical": True, "ellIsPriority": True},
    )
    assert config.ordre is PreferencePlacement.GARCON_FILLE
    assert config.priorite is ReglePriorite.ELL
    assert config.espacer is False


def test_options_par_defaut():
    assert ConfigurationPlan.depuis_options(None) == ConfigurationPlan()


def test_spread_doit_etre_booleen():
    with pytest.raises(ErreurValidation):
        ConfigurationPlan.depuis_options({"spread": "yes"})


def test_code_machine_symetrique():
    config = ConfigurationPlan(PreferencePlacement.ALEATOIRE, ReglePriorite.EBD, True)
    assert config.code_machine() == {"ordering": "random", "priority": "ebd", "spread": True}
    assert ConfigurationPlan.depuis_options(config.code_machine()) == config
