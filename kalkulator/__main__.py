import logging
import os

from kalkulator.app import main as run_app
from kalkulator.logging_config import setup_logging


def main() -> None:
    level_name = os.environ.get("KALKULATOR_LOG_LEVEL", "INFO").upper()
    setup_logging(level=getattr(logging, level_name, logging.INFO))
    run_app()


if __name__ == "__main__":
    main()
