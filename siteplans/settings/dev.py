from .base import *
from .base import _int_or_none, _level
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env.dev into process env for local development only.
load_dotenv(Path(BASE_DIR) / ".env.dev")


DEBUG = True
ALLOWED_HOSTS = []

# Re-read engine settings: .env.dev is loaded after base.py
PLANSALLE_ETIQUETTE_ENSEIGNANT = os.getenv("PLANSALLE_ETIQUETTE_ENSEIGNANT", PLANSALLE_ETIQUETTE_ENSEIGNANT)
PLANSALLE_GRAINE = _int_or_none("PLANSALLE_GRAINE")

# Without a local Redis, run tasks in-process
if os.getenv("CELERY_EAGER", "1") == "1":
    CELERY_TASK_ALWAYS_EAGER = True
    CELERY_TASK_EAGER_PROPAGATES = True
    CELERY_BROKER_URL = "memory://"
    CELERY_RESULT_BACKEND = "cache+memory://"

LOGGING["loggers"]["plansalle"]["level"] = _level("PLANSALLE_LOG_LEVEL", "DEBUG")
