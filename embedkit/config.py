import os
import json
from .logger import log, setup_logging, is_valid_level

def setup_os(config_path: str = None) -> bool:
    """
    Reads configuration from a JSON file and sets environment variables.

    Nested keys are flattened, so {"embedkit": {"log_level": "DEBUG"}} becomes
    EMBEDKIT_LOG_LEVEL=DEBUG. The logger is reconfigured afterwards so the
    new level and log file take effect. Without config_path, config.json in
    the current working directory is read.
    """
    def set_env_vars(config_dict, prefix=''):
        for key, value in config_dict.items():
            new_key = f"{prefix.upper()}_{key.upper()}" if prefix else key.upper()
            if isinstance(value, dict):
                set_env_vars(value, new_key)
            else:
                os.environ[new_key] = str(value)

    if config_path is None:
        config_path = os.path.join(os.getcwd(), 'config.json')

    try:
        with open(config_path, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        log.critical(f"Error: config file not found at {config_path}")
        return False
    except json.JSONDecodeError:
        log.critical(f"Error: Could not decode {config_path}.")
        return False

    set_env_vars(config)

    log_level = os.getenv("EMBEDKIT_LOG_LEVEL")
    if log_level is not None and not is_valid_level(log_level):
        log.critical(f"Error: Unknown log level {log_level!r} in {config_path}.")
        return False

    setup_logging()
    log.info("Environment variables set up successfully.")
    return True
