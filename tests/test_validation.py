from __future__ import annotations

import pytest

from plansalle.erreurs import ErreurValidation
from plansalle.validation import disposition_depuis_payload, eleve_depuis_payload, eleves_depuis_payload


def test_eleve_complet():
    e = eleve_depuis_payload(
        {"studentId": 12, "name": "Alice", "grade": "85.5", "gender": "F", "isESE": True, "has504": None}
    )
    assert e.identifiant() == 12
    assert e.note() == 85.5
    assert e.est_ese() and not e.a_un_504()


def test_alias_id_et_champs_facultatifs():
    e = eleve_depuis_payload({"id": "a7", "name": "Bruno"})
    assert e.identifiant() == "a7"
    assert e.note() is None and e.genre() is None


@pytest.mark.parametrize(
    "brut",
    [
        {"name": "Sans id"},
        {"studentId": 1},
        {"studentId": 1, "name": 42},
        {"studentId": 1, "name": "A", "grade": "abc"},
        {"studentId": 1, "name": "A", "grade": True},
        {"studentId": 1, "name": "A", "grade": "nan"},
        {"studentId": 1, "name": "A", "grade": float("nan")},
        {"studentId": 1, "name": "A", "grade": float("inf")},
        {"studentId": [1], "name": "A"},
        {"studentId": {"id": 1}, "name": "A"},
        {"studentId": True, "name": "A"},
        {"studentId": 1, "name": "A", "gender": 3},
        {"studentId": 1, "name": "A", "isELL": "oui"},
        "Alice",
    ],
)
def test_eleve_invalide(brut):
    with pytest.raises(ErreurValidation):
        eleve_depuis_payload(brut)


def test_liste_eleves():
    eleves = eleves_depuis_payload([{"studentId": 2, "name": "B"}, {"studentId": 1, "name": "A"}])
    assert [e.identifiant() for e in eleves] == [2, 1]
    with pytest.raises(ErreurValidation):
        eleves_depuis_payload({"studentId": 1, "name": "A"})
    with pytest.raises(ErreurValidation):
        eleves_depuis_payload([{"studentId": 1, "name": "A"}, {"studentId": 1, "name": "A bis"}])


def test_disposition():
    disp = disposition_depuis_payload([["desk", None], ["teacher-desk", "desk"]])
    assert disp.nb_pupitres() == 2
    assert disposition_depuis_payload([]).nb_pupitres() == 0


@pytest.mark.parametrize(
    "layout",
    [
        "desk",
        None,
        ["desk", "desk"],
        [["desk", "desk"], ["desk"]],
        [["desk", "sofa"]],
    ],
)
def test_disposition_invalide(layout):
    with pytest.raises(ErreurValidation):
        disposition_depuis_payload(layout)


def test_note_entiere_convertie():
    assert eleve_depuis_payload({"studentId": 1, "name": "A", "grade": 90}).note() == 90.0


def test_note_non_finie_refusee_dans_la_liste():
    with pytest.raises(ErreurValidation, match="non finie"):
        eleves_depuis_payload(
            [
                {"studentId": 1, "name": "A", "grade": 50},
                {"studentId": 2, "name": "B", "grade": "nan"},
                {"studentId": 3, "name": "C", "grade": 90},
            ]
        )
