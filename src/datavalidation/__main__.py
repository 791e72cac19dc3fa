"""Main entry point for the data validation demonstration."""
import logging
import sys

from .config import Config
from .demo import run_demo
from .errors import ConfigurationError, InputExhaustedError, RetryLimitExceededError
from .logging_setup import log_operation, setup_logging
from .sources import ConsoleSource


def main() -> int:
    """Main program entry point."""
    try:
        config = Config.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    # Set up logging
    setup_logging(config.LOG_DIR, config.log_level)

    status = 0
    try:
        log_operation("Demo started", f"element={config.ELEMENT.name}")
        run_demo(
            ConsoleSource(),
            config.ELEMENT,
            max_retries=config.MAX_RETRIES,
            discard_limit=config.DISCARD_LIMIT,
        )
    except KeyboardInterrupt:
        print("\nProgram terminated by user.")
        status = 130
    except InputExhaustedError as e:
        logging.error(f"Input ended early: {e}")
        print("\nInput ended before a valid value was entered.")
        status = 1
    except RetryLimitExceededError as e:
        logging.error(str(e))
        print(f"\n{e}.")
        status = 1
    finally:
        logging.info("Demo finished")
    return status


if __name__ == "__main__":
    sys.exit(main())
