import datetime
import functools
import logging
import os
import time
import uuid
from typing import Optional, Union

# Loggers configured by setup_logging: the application namespace plus the
# top-level packages, which log under their module names.
APP_LOGGER_NAME = "point_controller"
PACKAGE_LOGGERS = (APP_LOGGER_NAME, "core", "interface", "renderer", "config", "utils", "main")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# ID unique pour chaque session
SESSION_ID = uuid.uuid4().hex[:8]

LOG_FILE_PATH: Optional[str] = None

logger = logging.getLogger(APP_LOGGER_NAME)


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: Union[int, str] = "INFO", log_dir: Optional[str] = None) -> Optional[str]:
    """Configure console (and optionally per-session file) logging.

    Calling it again replaces the handlers installed by the previous call, so
    tests and the CLI can reconfigure freely. Returns the session log file
    path when ``log_dir`` is given.
    """
    global LOG_FILE_PATH

    numeric_level = _resolve_level(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    LOG_FILE_PATH = None
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        now = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        LOG_FILE_PATH = os.path.join(log_dir, f"point_controller_{now}_{SESSION_ID}.log")
        # Entête du fichier de log
        with open(LOG_FILE_PATH, "a", encoding="utf-8") as f:
            f.write(f"# Log de session - ID: {SESSION_ID}\n")
            f.write(f"# Niveau de log: {logging.getLevelName(numeric_level)}\n")
            f.write(f"# Début: {now}\n\n")
        handlers.append(logging.FileHandler(LOG_FILE_PATH, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        handler._point_controller = True  # type: ignore[attr-defined]

    for name in PACKAGE_LOGGERS:
        package_logger = logging.getLogger(name)
        for old in [h for h in package_logger.handlers if getattr(h, "_point_controller", False)]:
            package_logger.removeHandler(old)
            old.close()
        package_logger.setLevel(numeric_level)
        for handler in handlers:
            package_logger.addHandler(handler)

    logger.info("Point controller logging initialized (level=%s)", logging.getLevelName(numeric_level))
    return LOG_FILE_PATH


def get_current_log_level() -> int:
    return logger.getEffectiveLevel()


def log_calls(func):
    """Décorateur pour logger les appels de fonctions et mesurer leur temps d'exécution."""
    call_logger = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not call_logger.isEnabledFor(logging.DEBUG):
            return func(*args, **kwargs)

        call_logger.debug("Appel %s args=%s kwargs=%s", func.__qualname__, args, kwargs)
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start_time
        call_logger.debug("Retour %s: %s", func.__qualname__, result)
        call_logger.debug("Temps d'exécution %s: %.6f s", func.__qualname__, elapsed)
        return result

    return wrapper


def log_application_start() -> None:
    logger.info("Point Controller application starting")
    logger.debug("Current working directory: %s", os.getcwd())


def log_application_stop() -> None:
    logger.info("Point Controller application stopped")


def log_component_initialization(component: str) -> None:
    logger.info("Initializing component: %s", component)


def log_user_action(action: str, details: str = "") -> None:
    """Log a user action such as a key press (debug level)."""
    if details:
        logger.debug("User action: %s (%s)", action, details)
    else:
        logger.debug("User action: %s", action)


def log_error_with_context(error_msg: str, context: str = "", exception: Optional[BaseException] = None) -> None:
    """Log an error with where it happened and, if given, the exception and traceback."""
    message = f"{error_msg} [context={context}]" if context else error_msg
    if exception is not None:
        logger.error("%s: %s", message, exception, exc_info=exception)
    else:
        logger.error(message)


def log_warning_with_context(warning_msg: str, context: str = "") -> None:
    if context:
        logger.warning("%s [context=%s]", warning_msg, context)
    else:
        logger.warning(warning_msg)
