from __future__ import annotations

import logging
import random
from collections import deque
from typing import Callable, Dict, List, Optional, Sequence

from ..configuration import PreferencePlacement
from ..modele.eleve import Eleve

logger = logging.getLogger(__name__)

StrategieOrdre = Callable[[List[Eleve], random.Random], List[Eleve]]

_STRATEGIES: Dict[PreferencePlacement, StrategieOrdre] = {}

# Valeurs sentinelles : une note ou un genre absent passe en dernier / en premier
_NOTE_PLANCHER: float = float("-inf")
_GENRE_PLANCHER: str = ""


def strategie(preference: PreferencePlacement):
    """Décorateur enregistrant une stratégie d'ordonnancement pour une préférence."""

    def deco(fonction: StrategieOrdre) -> StrategieOrdre:
        _STRATEGIES[preference] = fonction
        return fonction

    return deco


def strategie_de(preference: PreferencePlacement) -> Optional[StrategieOrdre]:
    """Retourne la stratégie enregistrée pour `preference`, ou `None` si absente."""
    return _STRATEGIES.get(preference)


def ordonner(
        eleves: Sequence[Eleve],
        preference: PreferencePlacement,
        *,
        rng: Optional[random.Random] = None,
) -> List[Eleve]:
    """
    Réordonne la liste selon la préférence (une seule stratégie par exécution).

    Travaille toujours sur une copie : la séquence reçue n'est jamais modifiée.
    `rng` rend la stratégie aléatoire reproductible.
    """
    copie: List[Eleve] = list(eleves)
    fonction = _STRATEGIES.get(preference)
    if fonction is None:
        raise KeyError(f"Aucune stratégie enregistrée pour {preference}")
    tirage: random.Random = rng if rng is not None else random.Random()
    ordonnes = fonction(copie, tirage)
    logger.debug("ordonnancement %s : %d élèves", preference.value, len(ordonnes))
    return ordonnes


def entrelacer(tries: Sequence[Eleve]) -> List[Eleve]:
    """
    Prend alternativement en tête puis en queue de la séquence triée :
    premier, dernier, deuxième, avant-dernier, ...
    """
    file: deque[Eleve] = deque(tries)
    resultat: List[Eleve] = []
    while file:
        resultat.append(file.popleft())
        if file:
            resultat.append(file.pop())
    return resultat


# --- Stratégies ------------------------------------------------------------

@strategie(PreferencePlacement.ALPHABETIQUE)
def _ordre_alphabetique(eleves: List[Eleve], rng: random.Random) -> List[Eleve]:
    # tri stable, comparaison de chaînes par défaut (sensible à la casse)
    return sorted(eleves, key=lambda e: e.nom())


@strategie(PreferencePlacement.ALEATOIRE)
def _ordre_aleatoire(eleves: List[Eleve], rng: random.Random) -> List[Eleve]:
    # Fisher–Yates : du dernier indice jusqu'à 1
    for i in range(len(eleves) - 1, 0, -1):
        j = rng.randint(0, i)
        eleves[i], eleves[j] = eleves[j], eleves[i]
    return eleves


@strategie(PreferencePlacement.NOTE_HAUTE_BASSE)
def _ordre_note_haute_basse(eleves: List[Eleve], rng: random.Random) -> List[Eleve]:
    def cle(e: Eleve) -> float:
        note = e.note()
        return _NOTE_PLANCHER if note is None else float(note)

    # reverse=True conserve la stabilité des ex æquo
    return entrelacer(sorted(eleves, key=cle, reverse=True))


@strategie(PreferencePlacement.GARCON_FILLE)
def _ordre_garcon_fille(eleves: List[Eleve], rng: random.Random) -> List[Eleve]:
    return entrelacer(sorted(eleves, key=lambda e: e.genre() or _GENRE_PLANCHER))


@strategie(PreferencePlacement.AUCUNE)
def _ordre_inchange(eleves: List[Eleve], rng: random.Random) -> List[Eleve]:
    return eleves
