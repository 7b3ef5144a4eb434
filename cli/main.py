"""CLI entry point."""

import sys
import os

from common.logging_config import setup_logging
from cli.commands import get_session
from cli.repl import repl_loop


def main() -> None:
    """Entry point for CLI."""
    log_level = 'DEBUG' if '--debug' in sys.argv else os.getenv('LOG_LEVEL', 'WARNING')

    logger = setup_logging('cli', log_level=log_level)
    setup_logging('registry', log_level=log_level)

    if '--debug' in sys.argv:
        logger.info("Debug logging enabled")
        sys.argv.remove('--debug')

    logger.info("CLI starting...")
    session = get_session()
    try:
        repl_loop(session)
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise
    finally:
        session.close()
        logger.info("CLI exiting")


if __name__ == "__main__":
    main()
