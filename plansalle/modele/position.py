from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Représente une *case précise* de la disposition.

    Attributs
    ---------
    rangee : int
    Indice de rangée, du haut vers le bas (0-indexé).
    colonne : int
    Indice de colonne, de gauche à droite (0-indexé).


    Cette classe est immuable pour garantir la stabilité des clés
    dans les dictionnaires/ensembles.
    """

    rangee: int
    colonne: int

    def cle(self) -> str:
        """Clé texte « rangee,colonne » utilisée dans les payloads JSON."""
        return f"{self.rangee},{self.colonne}"

    def voisine_de(self, autre: "Position") -> bool:
        """Indique si `autre` touche cette case (y compris en diagonale)."""
        if self == autre:
            return False
        return abs(self.rangee - autre.rangee) <= 1 and abs(self.colonne - autre.colonne) <= 1

    def cote_a_cote(self, autre: "Position") -> bool:
        """Indique si `autre` est juste à gauche ou à droite dans la même rangée."""
        return self.rangee == autre.rangee and abs(self.colonne - autre.colonne) == 1
