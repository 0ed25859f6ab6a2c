from __future__ import annotations

from typing import Hashable, Optional


class Eleve:
    """Modélise un élève de la liste d'appel d'une période.


    Paramètres du constructeur
    --------------------------
    identifiant : Hashable
    Identifiant opaque (ex. `studentId` côté API).
    nom : str
    Nom affiché tel que saisi (ex. « Alice Dupont »).
    note : Optional[float]
    Moyenne de l'élève, `None` si inconnue.
    genre : Optional[str]
    Genre (libre selon le contexte, ex. « F », « M »).
    ese, a_504, ell, ebd : bool
    Drapeaux d'aménagement (ESE, plan 504, ELL, EBD), indépendants.


    Détails d'implémentation
    ------------------------
    - L'élève n'est jamais modifié par le moteur : aucune méthode de mutation.
    - Égalité et hachage reposent sur l'identifiant seul.
    """

    def __init__(
            self,
            identifiant: Hashable,
            nom: str,
            *,
            note: Optional[float] = None,
            genre: Optional[str] = None,
            ese: bool = False,
            a_504: bool = False,
            ell: bool = False,
            ebd: bool = False,
    ) -> None:
        self._identifiant: Hashable = identifiant
        self._nom: str = nom
        self._note: Optional[float] = note
        self._genre: Optional[str] = genre
        self._ese: bool = bool(ese)
        self._a_504: bool = bool(a_504)
        self._ell: bool = bool(ell)
        self._ebd: bool = bool(ebd)

    def identifiant(self) -> Hashable:
        """Retourne l'identifiant opaque."""
        return self._identifiant

    def nom(self) -> str:
        """Retourne le nom affiché."""
        return self._nom

    def note(self) -> Optional[float]:
        """Retourne la note, ou `None` si absente."""
        return self._note

    def genre(self) -> Optional[str]:
        """Retourne le genre, ou `None` si absent."""
        return self._genre

    def est_ese(self) -> bool:
        return self._ese

    def a_un_504(self) -> bool:
        return self._a_504

    def est_ell(self) -> bool:
        return self._ell

    def est_ebd(self) -> bool:
        return self._ebd

    # --- Protocole de comparaison / hachage ---
    def __str__(self) -> str:  # pragma: no cover - représentation
        return f"{self._nom} ({self._genre or '?'})"

    def __repr__(self) -> str:  # pragma: no cover - représentation
        return f"Eleve({self._identifiant!r}, {self._nom!r})"

    def __hash__(self) -> int:
        return hash(self._identifiant)

    def __eq__(self, autre: object) -> bool:
        return isinstance(autre, Eleve) and self._identifiant == autre._identifiant
