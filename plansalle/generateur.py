from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from .configuration import ConfigurationPlan
from .modele.disposition import Disposition
from .modele.eleve import Eleve
from .modele.plan import ResultatPlan
from .moteur.espacement import espacer
from .moteur.ordonnancement import ordonner
from .moteur.placement import placer
from .moteur.priorite import promouvoir

logger = logging.getLogger(__name__)

ETIQUETTE_ENSEIGNANT_DEFAUT: str = "Enseignant"


def construire_etiquette(titre: Optional[str], nom_famille: Optional[str]) -> str:
    """Construit l'étiquette du bureau (« Mme Durand ») ; défaut si rien n'est fourni."""
    morceaux = [m.strip() for m in (titre, nom_famille) if m and m.strip()]
    return " ".join(morceaux) or ETIQUETTE_ENSEIGNANT_DEFAUT


def ordre_de_placement(
        eleves: Sequence[Eleve],
        disposition: Disposition,
        configuration: ConfigurationPlan,
        *,
        rng: Optional[random.Random] = None,
) -> List[Optional[Eleve]]:
    """
    Séquence finale consommée par le placement : ordonnancement, priorité,
    puis espacement si demandé.
    """
    ordonnes = ordonner(eleves, configuration.ordre, rng=rng)
    promus = promouvoir(ordonnes, configuration.priorite)
    if configuration.espacer:
        return espacer(promus, disposition.nb_pupitres())
    return list(promus)


def generer_plan(
        eleves: Sequence[Eleve],
        disposition: Disposition,
        configuration: ConfigurationPlan,
        *,
        etiquette_enseignant: str = ETIQUETTE_ENSEIGNANT_DEFAUT,
        rng: Optional[random.Random] = None,
) -> ResultatPlan:
    """
    Construit un plan de classe complet à partir d'entrées déjà validées.

    Fonction pure : aucune entrée n'est modifiée, un nouveau `ResultatPlan`
    est créé à chaque appel. Les contraintes entre élèves ne sont pas
    consultées ici (voir `plansalle.contraintes.ajustement`).
    """
    logger.debug(
        "génération : %d élèves, %d pupitres, ordre=%s, priorité=%s, espacer=%s",
        len(eleves), disposition.nb_pupitres(),
        configuration.ordre.value, configuration.priorite.value, configuration.espacer,
    )
    sequence = ordre_de_placement(eleves, disposition, configuration, rng=rng)
    return placer(disposition, sequence, etiquette_enseignant)
