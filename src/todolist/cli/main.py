"""Console entry point: ``todo <command> [arguments]``."""

import sys

from todolist.cli.app import TodoApp


def main(argv: list[str] | None = None) -> int:
    app = TodoApp()
    return app.run(sys.argv[1:] if argv is None else argv)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
