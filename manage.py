#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import sys


def main():
    """Entrypoint for Django management commands (celery worker config, shell, checks)."""
    # Default to dev; production must override via environment.
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "siteplans.settings.dev")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Django is not installed or not on PYTHONPATH."
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
