import os
from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, Field

from .factorial import DEFAULT_LIMIT

ENV_NAMES = {
    "user_name": "SNIPPET_USER_NAME",
    "factorial_n": "SNIPPET_FACTORIAL_N",
    "max_factorial": "SNIPPET_MAX_FACTORIAL",
    "log_level": "SNIPPET_LOG_LEVEL",
}


class Settings(BaseModel):
    user_name: str = "Alice"
    factorial_n: int = 5
    max_factorial: int = Field(DEFAULT_LIMIT, ge=0, le=DEFAULT_LIMIT)
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """
    Read settings from a .env file (searched upwards from the working
    directory) and the environment; real environment variables win.
    Unset variables fall back to the model defaults.
    """
    dotenv_path = find_dotenv(usecwd=True)
    values = {**(dotenv_values(dotenv_path) if dotenv_path else {}), **os.environ}

    env = {field: values.get(name) for field, name in ENV_NAMES.items()}
    return Settings(**{k: v for k, v in env.items() if v is not None})
