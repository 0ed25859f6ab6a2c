from __future__ import annotations

from typing import Collection, Dict, Hashable, Iterable, Iterator, List, Tuple

from ..erreurs import ContrainteDupliquee, ContrainteIntrouvable
from .paire import ContraintePaire, normaliser_paire
from .types import TypeContrainte


class EnsembleContraintes:
    """Collection des contraintes entre élèves d'une classe.

    Une seule contrainte par paire d'élèves, quel que soit l'ordre de saisie :
    une seconde déclaration lève `ContrainteDupliquee`. Les identifiants sont
    attribués par ordre de création.
    """

    def __init__(self, contraintes: Iterable[ContraintePaire] = ()) -> None:
        self._par_id: Dict[int, ContraintePaire] = {}
        self._par_paire: Dict[Tuple[Hashable, Hashable], int] = {}
        self._prochain_id: int = 1
        for c in contraintes:
            self._inserer(c)

    def _inserer(self, contrainte: ContraintePaire) -> ContraintePaire:
        if contrainte.cle() in self._par_paire:
            raise ContrainteDupliquee(
                f"Une contrainte existe déjà entre les élèves {contrainte.id_1} et {contrainte.id_2}"
            )
        identifiant = contrainte.identifiant
        if identifiant is None or identifiant in self._par_id:
            identifiant = self._prochain_id
        contrainte = ContraintePaire(contrainte.id_1, contrainte.id_2, contrainte.type, identifiant)
        self._par_id[identifiant] = contrainte
        self._par_paire[contrainte.cle()] = identifiant
        self._prochain_id = max(self._prochain_id, identifiant + 1)
        return contrainte

    # --- Opérations ----------------------------------------------------------

    def ajouter(self, id_a: Hashable, id_b: Hashable, type_c: TypeContrainte) -> ContraintePaire:
        """Crée une contrainte (paire normalisée) et la retourne avec son identifiant."""
        return self._inserer(ContraintePaire.creer(id_a, id_b, type_c))

    def obtenir(self, identifiant: int) -> ContraintePaire:
        try:
            return self._par_id[identifiant]
        except KeyError:
            raise ContrainteIntrouvable(f"Contrainte {identifiant} introuvable") from None

    def entre(self, id_a: Hashable, id_b: Hashable) -> ContraintePaire | None:
        """Retourne la contrainte liant deux élèves (dans un sens ou l'autre), ou `None`."""
        identifiant = self._par_paire.get(normaliser_paire(id_a, id_b))
        return None if identifiant is None else self._par_id[identifiant]

    def pour_eleve(self, id_eleve: Hashable) -> List[ContraintePaire]:
        """Contraintes où l'élève apparaît, d'un côté ou de l'autre."""
        return [c for c in self._par_id.values() if c.implique(id_eleve)]

    def pour_periode(self, ids_eleves: Collection[Hashable]) -> List[ContraintePaire]:
        """Contraintes dont le premier élève appartient à la période (liste d'identifiants)."""
        return [c for c in self._par_id.values() if c.id_1 in ids_eleves]

    def modifier_type(self, identifiant: int, type_c: TypeContrainte) -> ContraintePaire:
        ancienne = self.obtenir(identifiant)
        nouvelle = ContraintePaire(ancienne.id_1, ancienne.id_2, type_c, identifiant)
        self._par_id[identifiant] = nouvelle
        return nouvelle

    def supprimer(self, identifiant: int) -> None:
        contrainte = self.obtenir(identifiant)
        del self._par_id[identifiant]
        del self._par_paire[contrainte.cle()]

    def __iter__(self) -> Iterator[ContraintePaire]:
        return iter(list(self._par_id.values()))

    def __len__(self) -> int:
        return len(self._par_id)
