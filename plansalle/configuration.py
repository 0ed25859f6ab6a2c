from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .erreurs import ErreurValidation


def _normaliser(valeur: Any) -> str:
    """« highLow », « high_low », « HIGH-LOW » -> « highlow »."""
    return str(valeur).strip().lower().replace("_", "").replace("-", "")


class PreferencePlacement(str, Enum):
    """Stratégie d'ordonnancement de la liste d'élèves (une seule par exécution)."""

    ALPHABETIQUE = "alphabetical"
    ALEATOIRE = "random"
    NOTE_HAUTE_BASSE = "highLow"
    GARCON_FILLE = "maleFemale"
    AUCUNE = "none"

    @classmethod
    def depuis_texte(cls, valeur: Any) -> "PreferencePlacement":
        """Lit une valeur d'option, insensible à la casse et aux séparateurs."""
        cle = _normaliser(valeur)
        for membre in cls:
            if _normaliser(membre.value) == cle:
                return membre
        raise ErreurValidation(f"Préférence de placement inconnue: {valeur!r}")

    @classmethod
    def depuis_drapeaux(cls, drapeaux: Mapping[str, Any]) -> "PreferencePlacement":
        """Résout les booléens indépendants de la classe : le premier vrai l'emporte."""
        for nom, preference in PRECEDENCE_PREFERENCES:
            if drapeaux.get(nom):
                return preference
        return cls.AUCUNE


class ReglePriorite(str, Enum):
    """Aménagement dont les élèves sont placés en premier."""

    ESE = "ese"
    ELL = "ell"
    PAI_504 = "plan504"
    EBD = "ebd"
    AUCUNE = "none"

    @classmethod
    def depuis_texte(cls, valeur: Any) -> "ReglePriorite":
        cle = _normaliser(valeur)
        if cle in {"504", "fivezerofour", "has504"}:
            return cls.PAI_504
        for membre in cls:
            if _normaliser(membre.value) == cle:
                return membre
        raise ErreurValidation(f"Règle de priorité inconnue: {valeur!r}")

    @classmethod
    def depuis_drapeaux(cls, drapeaux: Mapping[str, Any]) -> "ReglePriorite":
        """Résout les booléens `*IsPriority` : le premier vrai l'emporte."""
        for nom, regle in PRECEDENCE_PRIORITES:
            if drapeaux.get(nom):
                return regle
        return cls.AUCUNE


# Ordre de précédence des drapeaux hérités (clés telles que renvoyées par l'API classe)
PRECEDENCE_PREFERENCES: List[Tuple[str, PreferencePlacement]] = [
    ("seatAlphabetical", PreferencePlacement.ALPHABETIQUE),
    ("seatRandomize", PreferencePlacement.ALEATOIRE),
    ("seatHighLow", PreferencePlacement.NOTE_HAUTE_BASSE),
    ("seatMaleFemale", PreferencePlacement.GARCON_FILLE),
]

PRECEDENCE_PRIORITES: List[Tuple[str, ReglePriorite]] = [
    ("eseIsPriority", ReglePriorite.ESE),
    ("ellIsPriority", ReglePriorite.ELL),
    ("fiveZeroFourIsPriority", ReglePriorite.PAI_504),
    ("ebdIsPriority", ReglePriorite.EBD),
]


@dataclass(frozen=True)
class ConfigurationPlan:
    """Réglages d'une génération de plan.

    Attributs
    ---------
    ordre : PreferencePlacement
        Stratégie d'ordonnancement.
    priorite : ReglePriorite
        Aménagement prioritaire (placé devant).
    espacer : bool
        Répartit les pupitres libres dans la liste (action « espacer les élèves »).
    """

    ordre: PreferencePlacement = PreferencePlacement.AUCUNE
    priorite: ReglePriorite = ReglePriorite.AUCUNE
    espacer: bool = False

    @classmethod
    def depuis_options(
            cls,
            options: Optional[Mapping[str, Any]],
            drapeaux_classe: Optional[Mapping[str, Any]] = None,
    ) -> "ConfigurationPlan":
        """
        Normalise les options d'un payload.

        Champs reconnus (tous facultatifs) :
          - ordering: "alphabetical" | "random" | "highLow" | "maleFemale" | "none"
          - priority: "ese" | "ell" | "plan504" | "ebd" | "none"
          - spread: bool

        Si `ordering` / `priority` sont absents, on retombe sur les drapeaux
        hérités de la classe (`seatAlphabetical`, `eseIsPriority`, ...).
        """
        o: Dict[str, Any] = {**(options or {})}
        drapeaux: Mapping[str, Any] = drapeaux_classe or {}

        if o.get("ordering") is not None:
            ordre = PreferencePlacement.depuis_texte(o["ordering"])
        else:
            ordre = PreferencePlacement.depuis_drapeaux(drapeaux)

        if o.get("priority") is not None:
            priorite = ReglePriorite.depuis_texte(o["priority"])
        else:
            priorite = ReglePriorite.depuis_drapeaux(drapeaux)

        espacer_brut = o.get("spread", False)
        if not isinstance(espacer_brut, bool):
            raise ErreurValidation(f"Option 'spread' non booléenne: {espacer_brut!r}")

        return cls(ordre=ordre, priorite=priorite, espacer=espacer_brut)

    def code_machine(self) -> Dict[str, Any]:
        """Représentation sérialisable, symétrique de `depuis_options`."""
        return {"ordering": self.ordre.value, "priority": self.priorite.value, "spread": self.espacer}
