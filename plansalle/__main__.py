# plansalle/__main__.py
from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path


def _run_exemple() -> int:
    # importe tardivement pour éviter d’imposer des dépendances quand on affiche juste l’aide
    try:
        from .exemples import run_exemple
    except ImportError as e:
        print("Impossible d’importer plansalle.exemples.run_exemple :", e, file=sys.stderr)
        return 1
    run_exemple()
    return 0


def _run_generer(chemin: str, en_json: bool) -> int:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "siteplans.settings.dev")
    import django

    django.setup()
    from .tasks import executer_payload

    try:
        payload = json.loads(Path(chemin).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Lecture du payload impossible ({chemin}) : {e}", file=sys.stderr)
        return 1

    resultat = executer_payload(payload)
    if resultat["status"] != "SUCCESS":
        print(resultat["error"], file=sys.stderr)
        return 2

    if en_json:
        print(json.dumps(resultat, ensure_ascii=False, indent=2))
        return 0

    for rangee in resultat["grid"]:
        print(" | ".join(f"{c['content'] or ('_' if c['cell'] == 'desk' else ''):^12s}" for c in rangee))
    non_places = resultat["diagnostic"]["unplaced"]
    if non_places:
        print(f"\n{len(non_places)} élève(s) non placé(s) : {non_places}", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="plansalle",
        description="Génération de plans de classe."
    )
    sub = parser.add_subparsers(dest="cmd")

    p_ex = sub.add_parser("exemple", help="Exécute le scénario d’exemple.")
    p_ex.set_defaults(func=lambda args: _run_exemple())

    p_gen = sub.add_parser("generer", help="Génère un plan depuis un payload JSON.")
    p_gen.add_argument("payload", help="Chemin du fichier JSON (students, layout, options, ...).")
    p_gen.add_argument("--json", action="store_true", help="Affiche le résultat JSON complet.")
    p_gen.set_defaults(func=lambda args: _run_generer(args.payload, args.json))

    # défaut: si aucune sous-commande n’est fournie, on lance l’exemple
    args = parser.parse_args(argv)
    if not args.cmd:
        return _run_exemple()

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
