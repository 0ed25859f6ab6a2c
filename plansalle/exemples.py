from __future__ import annotations

import json
import random
from typing import List

from .configuration import ConfigurationPlan, PreferencePlacement, ReglePriorite
from .contraintes.ajustement import AjusteurCPSAT
from .contraintes.ensemble import EnsembleContraintes
from .contraintes.types import TypeContrainte
from .contraintes.verification import verifier_contraintes
from .generateur import construire_etiquette, generer_plan
from .modele.disposition import Disposition
from .modele.eleve import Eleve


def construire_exemple() -> None:
    """
    construit une salle, une liste d'élèves et un jeu de contraintes, puis génère le plan.

    affiche le plan de base, les contraintes violées, puis le plan ajusté par CP-SAT.
    """
    # pour la reproductibilité de la démonstration
    rng = random.Random(42)

    # salle : 4 rangs de 5 cases, une allée centrale, bureau en haut à droite
    disposition = Disposition.depuis_jetons(
        [
            [None, None, None, None, "teacher-desk"],
            ["desk", "desk", None, "desk", "desk"],
            ["desk", "desk", None, "desk", "desk"],
            ["desk", "desk", None, "desk", "desk"],
        ]
    )

    # élèves : 10 élèves, notes et genres variés
    prenoms = ["Alice", "Bruno", "Chloé", "David", "Emma", "Farid", "Gaëlle", "Hugo", "Inès", "Jules"]
    eleves: List[Eleve] = [
        Eleve(
            i + 1,
            prenom,
            note=float(40 + (i * 37) % 60),
            genre="F" if i % 2 == 0 else "M",
            ese=(i == 7),
            ell=(i == 3),
        )
        for i, prenom in enumerate(prenoms)
    ]

    configuration = ConfigurationPlan(
        ordre=PreferencePlacement.NOTE_HAUTE_BASSE,
        priorite=ReglePriorite.ESE,
        espacer=True,
    )
    plan = generer_plan(
        eleves, disposition, configuration,
        etiquette_enseignant=construire_etiquette("Mme", "Durand"),
        rng=rng,
    )
    print("=== plan généré ===")
    print(plan)

    contraintes = EnsembleContraintes()
    contraintes.ajouter(8, 1, TypeContrainte.SEPARER)
    contraintes.ajouter(2, 9, TypeContrainte.REGROUPER)

    violees = verifier_contraintes(plan, list(contraintes))
    print("\n=== contraintes violées (non appliquées par le moteur) ===")
    for c in violees:
        print(f" - {c.texte_humain()}")

    ajustement = AjusteurCPSAT(seed=42, budget_temps_ms=5_000).ajuster(plan, list(contraintes))
    print(f"\n=== plan ajusté ({ajustement.statut}, {ajustement.deplacements} déplacement(s)) ===")
    print(ajustement.plan)

    print("\n=== export JSON ===")
    print(json.dumps(ajustement.plan.en_json()["diagnostic"], ensure_ascii=False, indent=2))


def main() -> None:
    """point d'entrée du module CLI."""
    construire_exemple()


def run_exemple() -> None:
    # alias pour __main__.py
    return construire_exemple()


if __name__ == "__main__":
    main()
