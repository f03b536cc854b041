import logging
import coloredlogs
import os

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LEVEL = 'INFO'

def is_valid_level(level_name) -> bool:
    """Whether level_name is a level the logging module knows, e.g. "DEBUG" or "warning"."""
    return isinstance(logging.getLevelName(str(level_name).upper()), int)

def setup_logging():
    """
    Sets up the embedkit logger with colored console output and optional file logging.

    The level is read from EMBEDKIT_LOG_LEVEL and the log file from EMBEDKIT_LOG_FILE.
    An unknown level falls back to INFO. Calling this again reconfigures the
    same logger.
    """
    logger = logging.getLogger('EmbedKit')
    requested_level = os.getenv("EMBEDKIT_LOG_LEVEL", DEFAULT_LEVEL).upper()
    level = requested_level if is_valid_level(requested_level) else DEFAULT_LEVEL
    logger.setLevel(level)

    # Keep library records out of the host application's root handlers
    logger.propagate = False

    # Remove any existing handlers to avoid duplicate logs
    if logger.hasHandlers():
        logger.handlers.clear()

    field_styles = coloredlogs.DEFAULT_FIELD_STYLES
    level_styles = {
        'debug': {'color': 'blue'},
        'info': {'color': 'white'},
        'warning': {'color': 'yellow'},
        'error': {'color': 'red'},
        'critical': {'color': 'red', 'bold': True}
    }

    coloredlogs.install(
        level=level,
        logger=logger,
        fmt=LOG_FORMAT,
        field_styles=field_styles,
        level_styles=level_styles
    )

    log_file = os.getenv("EMBEDKIT_LOG_FILE")
    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    if level != requested_level:
        logger.warning(f"Unknown log level {requested_level!r} in EMBEDKIT_LOG_LEVEL, falling back to {DEFAULT_LEVEL}.")

    return logger

# Create a logger instance to be imported by other modules
log = setup_logging()
