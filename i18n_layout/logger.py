import logging
from pathlib import Path

LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE = LOG_DIR / "app.log"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Off mode keeps warnings and errors, without handlers of its own they go to the root logger
OFF_LEVEL = logging.WARNING

# Cache for log mode to avoid repeated config reads
_log_mode_cache = None

# Names of loggers handed out by get_logger
_managed_loggers = set()


def _get_log_mode():
    """Get log mode from configuration."""
    global _log_mode_cache
    if _log_mode_cache is not None:
        return _log_mode_cache

    try:
        from i18n_layout.config import load_config
        log_mode = load_config().get('log_mode', 'off')
    except ImportError:
        # config is still being imported; its own logger is refreshed by initialize_app
        return 'off'

    _log_mode_cache = log_mode
    return log_mode


def _apply_log_mode(logger: logging.Logger, log_mode: str) -> None:
    """Set level and handlers of a logger according to log_mode."""
    if log_mode == 'debug':
        level = logging.DEBUG
    elif log_mode == 'off':
        level = OFF_LEVEL
    else:
        level = logging.INFO

    logger.setLevel(level)
    log_format = logging.Formatter(LOG_FORMAT)

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    console_handlers = [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]

    if log_mode == 'off':
        for handler in file_handlers + console_handlers:
            handler.close()
            logger.removeHandler(handler)
        return

    if not file_handlers:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        f_handler = logging.FileHandler(LOG_FILE, encoding='utf-8', delay=True)
        f_handler.setLevel(logging.DEBUG)
        f_handler.setFormatter(log_format)
        logger.addHandler(f_handler)

    if not console_handlers:
        c_handler = logging.StreamHandler()
        c_handler.setFormatter(log_format)
        logger.addHandler(c_handler)
        console_handlers = [c_handler]

    for handler in console_handlers:
        handler.setLevel(level)


def refresh_loggers():
    """Clear the log mode cache and re-apply it to every logger created by get_logger."""
    global _log_mode_cache
    _log_mode_cache = None

    log_mode = _get_log_mode()
    for logger_name in sorted(_managed_loggers):
        _apply_log_mode(logging.getLogger(logger_name), log_mode)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    _managed_loggers.add(name)
    _apply_log_mode(logger, _get_log_mode())
    return logger
