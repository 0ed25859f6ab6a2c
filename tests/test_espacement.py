from __future__ import annotations

from plansalle.modele.eleve import Eleve
from plansalle.moteur.espacement import espacer


def _eleves(n):
    return [Eleve(i, f"S{i}") for i in range(1, n + 1)]


def test_deux_eleves_cinq_pupitres():
    s1, s2 = _eleves(2)
    assert espacer([s1, s2], 5) == [None, s1, None, None, s2]


def test_un_pupitre_libre():
    s1, s2, s3 = _eleves(3)
    assert espacer([s1, s2, s3], 4) == [s1, s2, None, s3]


def test_autant_de_vides_que_d_eleves():
    s1, s2, s3 = _eleves(3)
    assert espacer([s1, s2, s3], 6) == [None, s1, None, s2, None, s3]


def test_longueur_egale_au_nombre_de_pupitres():
    for n, pupitres in [(1, 4), (2, 5), (4, 9), (7, 8)]:
        espaces = espacer(_eleves(n), pupitres)
        assert len(espaces) == pupitres
        assert [e for e in espaces if e is not None] == _eleves(n)


def test_sans_pupitre_libre_inchange():
    eleves = _eleves(4)
    assert espacer(eleves, 4) == eleves
    assert espacer(eleves, 2) == eleves  # la troncature relève du placement
    assert espacer(eleves, 4) is not eleves


def test_liste_vide():
    assert espacer([], 3) == [None, None, None]
    assert espacer([], 0) == []


def test_entree_non_modifiee():
    eleves = _eleves(2)
    espacer(eleves, 6)
    assert eleves == _eleves(2)
