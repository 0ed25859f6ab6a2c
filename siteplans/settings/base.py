from pathlib import Path
import os


def _level(env_name: str, default: str = "INFO") -> str:
    val = os.getenv(env_name, default).upper()
    return val if val in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"} else default


def _int_or_none(env_name: str):
    val = os.getenv(env_name, "").strip()
    try:
        return int(val) if val else None
    except ValueError:
        return None


BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-only-change-me")
DEBUG = False  # override in dev

ALLOWED_HOSTS = os.getenv("DJANGO_ALLOWED_HOSTS", "").split(",") if os.getenv("DJANGO_ALLOWED_HOSTS") else []

INSTALLED_APPS = [
    "plansalle",
]

# DB: aucune table propre au moteur ; sqlite suffit pour les outils Django
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# locales
LANGUAGE_CODE = "fr-fr"
TIME_ZONE = "Europe/Paris"
USE_I18N = True
USE_TZ = True
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# --- Moteur de plan de classe ---
# Étiquette du bureau quand le payload ne fournit pas d'enseignant
PLANSALLE_ETIQUETTE_ENSEIGNANT = os.getenv("PLANSALLE_ETIQUETTE_ENSEIGNANT", "Enseignant")
# Graine par défaut de la stratégie aléatoire (None = tirage libre)
PLANSALLE_GRAINE = _int_or_none("PLANSALLE_GRAINE")
# Budget CP-SAT de la passe d'ajustement aux contraintes
PLANSALLE_BUDGET_CONTRAINTES_MS = int(os.getenv("PLANSALLE_BUDGET_CONTRAINTES_MS", "10000"))

# LOGS
# comments in English
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "require_debug_false": {"()": "django.utils.log.RequireDebugFalse"},
    },
    "formatters": {
        "console": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "console"},
        "mail_admins": {
            "class": "django.utils.log.AdminEmailHandler",
            "level": "ERROR",
            "filters": ["require_debug_false"],
        },
    },
    "root": {
        "handlers": ["console"],
        "level": _level("DJANGO_LOG_LEVEL", "INFO"),
    },
    "loggers": {
        # Engine: per-stage debug, truncation warnings
        "plansalle": {
            "handlers": ["console"],
            "level": _level("PLANSALLE_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
        # Only task errors go to mail_admins to avoid noise
        "plansalle.tasks": {
            "handlers": ["console", "mail_admins"],
            "level": _level("PLANSALLE_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
        "celery": {
            "handlers": ["console"],
            "level": _level("CELERY_LOG_LEVEL", "WARNING"),
            "propagate": False,
        },
    },
}

# --- Redis / Celery ---
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/1")
CELERY_TASK_SERIALIZER = "json"
CELERY_RESULT_SERIALIZER = "json"
CELERY_ACCEPT_CONTENT = ["json"]
CELERY_RESULT_EXPIRES = 3600  # 1h
CELERY_TASK_TIME_LIMIT = 60
CELERY_TASK_SOFT_TIME_LIMIT = 50
