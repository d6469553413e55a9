"""Module entrypoint for `python -m coursegate`."""

from coursegate.cli import run

if __name__ == "__main__":
    run()
