import os
from typing import Dict, Optional

from dotenv import find_dotenv, load_dotenv

from lenient_bool.errors import UnrecognizedTokenError
from lenient_bool.utils.casting import to_bool
from lenient_bool.utils.logger import Logger

logger = Logger(name="env_config")


class Env:
    """Boolean feature flags read from the process environment."""

    @classmethod
    def load(cls, dotenv_path: Optional[str] = None, override: bool = False) -> bool:
        """Populate ``os.environ`` from a ``.env`` file.

        :param dotenv_path: Explicit file to load; when omitted the search
            starts in the current working directory and walks upward.
        :param override: Whether file values replace variables already set.
        :return: ``True`` if a file was found and contained at least one variable.
        """
        path = dotenv_path or find_dotenv(usecwd=True)
        if not path:
            logger.debug("No .env file found")
            return False
        return load_dotenv(path, override=override)

    @classmethod
    def flag(cls, name: str, default: Optional[bool] = None, strict: bool = True) -> Optional[bool]:
        """Read ``name`` from the environment and parse it as a boolean.

        :param name: Environment variable name.
        :param default: Value returned when the variable is unset, or when it
            is unrecognised and ``strict`` is off.
        :param strict: Raise on unrecognised values instead of falling back.
        :return: Parsed flag value or ``default``.
        :raises ValueError: If the value is unrecognised and ``strict`` is set.
        """
        raw = os.getenv(name)
        if raw is None:
            return default

        try:
            return to_bool(raw)
        except UnrecognizedTokenError as exc:
            if strict:
                raise ValueError(f"Invalid boolean for environment variable {name}: {raw!r}") from exc
            logger.warning(f"Ignoring unrecognised boolean {raw!r} in {name}; using default {default}")
            return default

    @classmethod
    def require_flags(cls, *names: str) -> Dict[str, bool]:
        missing_vars = [name for name in names if os.getenv(name) is None]
        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )

        return {name: cls.flag(name) for name in names}

Env.load()
