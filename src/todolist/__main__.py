"""Entry point: python -m todolist"""

from todolist.cli.main import run

if __name__ == "__main__":
    run()
