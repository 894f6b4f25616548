"""Entry point: python -m todo_cli"""

import sys

from pydantic import ValidationError

from todo_cli.cli.app import TodoApp
from todo_cli.config import TodoSettings
from todo_cli.logging import Loggers, configure_logging
from todo_cli.manager import TaskManager
from todo_cli.store import create_store


def main() -> int:
    try:
        settings = TodoSettings()
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2

    configure_logging(settings)
    Loggers.config().debug(
        "settings_loaded",
        backend=settings.storage_backend,
        tasks_path=str(settings.tasks_path),
    )

    store = create_store(settings)
    manager = TaskManager(store)
    app = TodoApp(manager, settings)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
