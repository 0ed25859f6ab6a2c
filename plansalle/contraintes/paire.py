from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Mapping, Optional, Tuple

from ..erreurs import ErreurValidation
from ..modele.position import Position
from .types import TypeContrainte


def normaliser_paire(id_1: Hashable, id_2: Hashable) -> Tuple[Hashable, Hashable]:
    """Retourne la paire avec le plus petit identifiant en premier."""
    if id_1 == id_2:
        raise ErreurValidation(f"Une contrainte relie deux élèves distincts (id={id_1!r} deux fois)")
    try:
        return (id_1, id_2) if id_1 < id_2 else (id_2, id_1)  # type: ignore[operator]
    except TypeError as exc:
        raise ErreurValidation(f"Identifiants non comparables : {id_1!r}, {id_2!r}") from exc


@dataclass(frozen=True)
class ContraintePaire:
    """Contrainte entre deux élèves, désignés par leurs identifiants.

    Attributs
    ---------
    id_1, id_2 : Hashable
        Identifiants des élèves, `id_1 < id_2` (voir `creer`).
    type : TypeContrainte
        `SEPARER` : les deux élèves ne doivent pas se toucher (diagonales comprises) ;
        `REGROUPER` : ils doivent être côte à côte dans la même rangée.
    identifiant : Optional[int]
        Identifiant attribué par la collection, `None` hors collection.
    """

    id_1: Hashable
    id_2: Hashable
    type: TypeContrainte
    identifiant: Optional[int] = None

    @classmethod
    def creer(
            cls,
            id_a: Hashable,
            id_b: Hashable,
            type_c: TypeContrainte,
            identifiant: Optional[int] = None,
    ) -> "ContraintePaire":
        """Construit une contrainte normalisée (plus petit identifiant en premier)."""
        id_1, id_2 = normaliser_paire(id_a, id_b)
        return cls(id_1=id_1, id_2=id_2, type=type_c, identifiant=identifiant)

    def cle(self) -> Tuple[Hashable, Hashable]:
        """Clé d'unicité : la paire normalisée, sans le type."""
        return self.id_1, self.id_2

    def implique(self, id_eleve: Hashable) -> bool:
        return id_eleve == self.id_1 or id_eleve == self.id_2

    def est_satisfaite(self, affectation: Mapping[Hashable, Position]) -> bool:
        """Indique si la contrainte est satisfaite ; vraie si l'un des deux n'est pas placé."""
        pa: Optional[Position] = affectation.get(self.id_1)
        pb: Optional[Position] = affectation.get(self.id_2)
        if pa is None or pb is None:
            return True
        if self.type is TypeContrainte.SEPARER:
            return not pa.voisine_de(pb)
        return pa.cote_a_cote(pb)

    def texte_humain(self) -> str:
        if self.type is TypeContrainte.SEPARER:
            return f"Les élèves {self.id_1} et {self.id_2} doivent être séparés"
        return f"Les élèves {self.id_1} et {self.id_2} doivent être côte à côte"

    def code_machine(self) -> Dict[str, Any]:
        """Représentation sérialisable, clés de l'API (`studentId1`, ...)."""
        code: Dict[str, Any] = {
            "studentId1": self.id_1,
            "studentId2": self.id_2,
            "constraintType": self.type.value,
        }
        if self.identifiant is not None:
            code["constraintId"] = self.identifiant
        return code


def contrainte_depuis_code(code: Mapping[str, Any]) -> ContraintePaire:
    """Reconstitue une contrainte depuis un dict « code_machine ».

    Lève `ErreurValidation` si un identifiant manque ou est mal typé, ou si le type est inconnu.
    """
    if not isinstance(code, Mapping):
        raise ErreurValidation(f"Contrainte attendue sous forme d'objet, reçu {type(code).__name__}")
    try:
        id_a = code["studentId1"]
        id_b = code["studentId2"]
    except KeyError as exc:
        raise ErreurValidation(f"Contrainte incomplète, clé manquante : {exc}") from exc
    for sid in (id_a, id_b):
        if isinstance(sid, bool) or not isinstance(sid, (int, str)):
            raise ErreurValidation(f"Identifiant d'élève entier ou texte attendu, reçu {sid!r}")
    type_c = TypeContrainte.depuis_texte(code.get("constraintType", ""))
    identifiant = code.get("constraintId")
    if identifiant is not None and (isinstance(identifiant, bool) or not isinstance(identifiant, int)):
        raise ErreurValidation(f"Identifiant de contrainte entier attendu, reçu {identifiant!r}")
    return ContraintePaire.creer(id_a, id_b, type_c, identifiant=identifiant)
