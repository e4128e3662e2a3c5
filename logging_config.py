import logging
import os
from datetime import datetime


def setup_logging(module_name, level="INFO", log_dir=None, console=True):
    """
    Set up logging configuration for a front-end.
    Returns the path to the log file, or None if there is none.
    """
    handlers = []
    log_file = None

    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        # Create a timestamped log file for this module
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"{module_name}_{timestamp}.log")

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.ERROR)  # Only errors to file
        handlers.append(file_handler)

    if console:
        # curses front-ends pass console=False, output would garble the screen
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )

    return log_file
