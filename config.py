import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./sessions.db")
    DB_ECHO = bool(data.get("DB_ECHO", False))
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    SESSION_TTL_SECONDS = int(data.get("SESSION_TTL_SECONDS", 2 * 24 * 60 * 60))
    SESSION_ID_MAX_ATTEMPTS = int(data.get("SESSION_ID_MAX_ATTEMPTS", 3))
    REAPER_INTERVAL_SECONDS = int(data.get("REAPER_INTERVAL_SECONDS", 300))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
