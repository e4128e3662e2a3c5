import os

class Config:
    """Default settings. Each can be overridden by an environment variable of
       the same name prefixed with NATDED_.
    """
    DEFAULT_GOAL = "A or B -> A or B"
    HOST = "127.0.0.1"
    PORT = 5000
    DEBUG = False
    LOG_LEVEL = "INFO"
    LOG_DIR = "logs"
    SECRET_KEY = "natded-dev"

def coerce(value, default):
    if isinstance(default, bool):
        return value.strip().lower() in ("1", "true", "yes", "on")
    elif isinstance(default, int):
        return int(value)
    return value

def load_config(environ=None, prefix="NATDED_"):
    """Return a dictionary of settings, taking defaults from Config and
       overrides from the environment.
    """
    if environ is None:
        environ = os.environ
    settings = {key: getattr(Config, key) for key in dir(Config) if key.isupper()}
    for key, default in settings.items():
        value = environ.get(prefix+key)
        if value is not None:
            settings[key] = coerce(value, default)
    return settings
