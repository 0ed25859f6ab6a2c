from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Mapping, Optional, Tuple

from celery import shared_task
from django.conf import settings

from .configuration import ConfigurationPlan
from .contraintes.ajustement import AjusteurCPSAT
from .contraintes.paire import ContraintePaire, contrainte_depuis_code
from .contraintes.verification import verifier_contraintes
from .erreurs import ErreurValidation
from .generateur import construire_etiquette, generer_plan
from .modele.disposition import Disposition
from .modele.eleve import Eleve
from .modele.plan import ResultatPlan
from .validation import disposition_depuis_payload, eleves_depuis_payload

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- helpers de conversion

def _parse_options(options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Normalise les options hors configuration du moteur et pose les défauts.

    Champs reconnus (tous facultatifs) :
      - random_seed: int | null   (défaut : settings.PLANSALLE_GRAINE)
      - apply_constraints: bool   (passe d'ajustement CP-SAT, défaut False)
      - time_budget_ms: int       (défaut : settings.PLANSALLE_BUDGET_CONTRAINTES_MS)
    """
    o: Dict[str, Any] = {**(options or {})}

    seed_raw: Any = o.get("random_seed", None)
    if seed_raw is None:
        o["random_seed"] = getattr(settings, "PLANSALLE_GRAINE", None)
    else:
        try:
            o["random_seed"] = int(seed_raw)
        except (TypeError, ValueError) as exc:
            raise ErreurValidation(f"Graine invalide: {seed_raw!r}") from exc

    appliquer = o.get("apply_constraints", False)
    if not isinstance(appliquer, bool):
        raise ErreurValidation(f"Option 'apply_constraints' non booléenne: {appliquer!r}")
    o["apply_constraints"] = appliquer
    try:
        o["time_budget_ms"] = int(o.get("time_budget_ms", getattr(settings, "PLANSALLE_BUDGET_CONTRAINTES_MS", 10_000)))
    except (TypeError, ValueError) as exc:
        raise ErreurValidation(f"Budget invalide: {o.get('time_budget_ms')!r}") from exc
    return o


def _etiquette_depuis_payload(teacher: Any) -> str:
    """Étiquette du bureau : « titre nom » de l'enseignant, sinon la valeur des settings."""
    defaut: str = getattr(settings, "PLANSALLE_ETIQUETTE_ENSEIGNANT", "Enseignant")
    if not isinstance(teacher, Mapping):
        return defaut
    titre = teacher.get("title")
    nom = teacher.get("lastName")
    if not (isinstance(titre, str) and titre.strip()) and not (isinstance(nom, str) and nom.strip()):
        return defaut
    return construire_etiquette(titre if isinstance(titre, str) else None, nom if isinstance(nom, str) else None)


def _contraintes_depuis_payload(brutes: Any) -> List[ContraintePaire]:
    if brutes is None:
        return []
    if not isinstance(brutes, list):
        raise ErreurValidation(f"Liste de contraintes attendue, reçu {type(brutes).__name__}")
    return [contrainte_depuis_code(c) for c in brutes]


def _lire_payload(
        payload: Mapping[str, Any],
) -> Tuple[List[Eleve], Disposition, ConfigurationPlan, Dict[str, Any], str, List[ContraintePaire]]:
    """Valide l'ensemble du payload avant toute exécution du moteur."""
    if not isinstance(payload, Mapping):
        raise ErreurValidation("Payload JSON objet attendu")
    eleves = eleves_depuis_payload(payload.get("students"))
    disposition = disposition_depuis_payload(payload.get("layout"))
    options_brutes = payload.get("options") or {}
    if not isinstance(options_brutes, Mapping):
        raise ErreurValidation("'options' doit être un objet")
    classe = payload.get("classroom") or {}
    if not isinstance(classe, Mapping):
        raise ErreurValidation("'classroom' doit être un objet")
    configuration = ConfigurationPlan.depuis_options(options_brutes, classe)
    options = _parse_options(options_brutes)
    etiquette = _etiquette_depuis_payload(payload.get("teacher"))
    contraintes = _contraintes_depuis_payload(payload.get("constraints"))
    return eleves, disposition, configuration, options, etiquette, contraintes


def executer_payload(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Exécution synchrone d'un payload complet ; partagée par la tâche et la CLI.

      - valide et traduit le payload en élèves / disposition / configuration,
      - génère le plan,
      - applique (sur demande seulement) la passe d'ajustement aux contraintes,
      - rend une structure JSON.
    """
    try:
        eleves, disposition, configuration, options, etiquette, contraintes = _lire_payload(payload)
    except ErreurValidation as exc:
        logger.info("payload refusé : %s", exc)
        return {"status": "FAILURE", "error": str(exc)}

    rng = random.Random(options["random_seed"])
    plan: ResultatPlan = generer_plan(
        eleves, disposition, configuration, etiquette_enseignant=etiquette, rng=rng
    )

    bloc_contraintes: Dict[str, Any] = {"applied": False}
    if options["apply_constraints"] and contraintes:
        ajusteur = AjusteurCPSAT(seed=options["random_seed"], budget_temps_ms=options["time_budget_ms"])
        ajustement = ajusteur.ajuster(plan, contraintes)
        plan = ajustement.plan
        bloc_contraintes = {
            "applied": True,
            "status": ajustement.statut,
            "moved": ajustement.deplacements,
            "violations_before": [c.code_machine() for c in ajustement.violations_avant],
        }
    bloc_contraintes["violations"] = [c.code_machine() for c in verifier_contraintes(plan, contraintes)]

    return {
        "status": "SUCCESS",
        **plan.en_json(),
        "configuration": configuration.code_machine(),
        "random_seed": options["random_seed"],
        "constraints": bloc_contraintes,
    }


# --------------------------------------------------------------------------- tâche principale

@shared_task(bind=True)
def t_generer_plan(self, payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Tâche asynchrone de génération d'un plan de classe.
    Chaque exécution est indépendante ; l'appelant ignore les résultats périmés.
    """
    logger.info("génération demandée (tâche %s)", getattr(self.request, "id", None))
    resultat = executer_payload(payload)
    logger.info("génération terminée (tâche %s) : %s", getattr(self.request, "id", None), resultat["status"])
    return resultat
