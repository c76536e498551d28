from dotenv import load_dotenv

from multilang.logging import configure_logging, get_module_logger
from multilang.services import get_settings
from server.server import create_app

load_dotenv()
configure_logging()

logger = get_module_logger()


def list_configs():
    """List all configuration settings keys"""
    config_settings = {"settings": []}

    for key, value in get_settings().model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


server_app = create_app()
list_configs()
