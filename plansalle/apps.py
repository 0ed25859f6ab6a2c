# plansalle/apps.py
from django.apps import AppConfig


class PlansalleConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "plansalle"
    verbose_name = "Plan de classe"

    def ready(self):
        # enregistre les stratégies d'ordonnancement
        from .moteur import ordonnancement  # noqa: F401
