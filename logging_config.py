import datetime
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

DEFAULT_LOG_DIR = "logs"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _resolve_log_dir(log_dir: Optional[Union[str, Path]]) -> Path:
    if log_dir is None:
        log_dir = os.getenv("FACTORIAL_LOG_DIR", DEFAULT_LOG_DIR)
    return Path(log_dir)


def _resolve_level(level: Optional[Union[str, int]]) -> int:
    if level is None:
        level = os.getenv("FACTORIAL_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def archive_to_history(current_path: Path, history_dir: Path, service_label: str) -> Optional[Path]:
    """
    Moves the previous session's log into the history file.

    The content is appended to history/{service_label}_history.log under a
    session header, then the current log is truncated.

    :param current_path: Path of the current session log
    :param history_dir: History directory
    :param service_label: Service name used in the header and file name
    :return: Path of the history file, or None if there was nothing to archive
    """
    if not current_path.exists():
        return None

    with open(current_path, 'r', encoding='utf-8') as f:
        current_content = f.read().strip()
    if not current_content:
        return None

    timestamp = datetime.datetime.now().strftime(DATE_FORMAT)
    separator = "=" * 80
    session_header = (
        f"\n\n{separator}\n"
        f"SESSION: {service_label}\n"
        f"ARCHIVED AT: {timestamp}\n"
        f"{separator}\n\n"
    )

    history_path = history_dir / f'{service_label}_history.log'
    with open(history_path, 'a', encoding='utf-8') as f:
        f.write(session_header)
        f.write(current_content)
        f.write("\n")

    # Truncate the current log
    with open(current_path, 'w', encoding='utf-8'):
        pass

    return history_path


def setup_logging(service_name: str,
                  log_dir: Optional[Union[str, Path]] = None,
                  level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Configures logging for the given service.

    Layout:
    {log_dir}/                     - current session logs
        {service_name}.log
        all.log
    {log_dir}/history/             - archived sessions
        {service_name}_history.log
        all_history.log

    :param service_name: Service name
    :param log_dir: Log directory, defaults to $FACTORIAL_LOG_DIR or 'logs'
    :param level: Log level, defaults to $FACTORIAL_LOG_LEVEL or INFO
    :return: Logger for the service
    """
    logs_dir = _resolve_log_dir(log_dir)
    history_dir = logs_dir / 'history'
    log_level = _resolve_level(level)

    logs_dir.mkdir(parents=True, exist_ok=True, mode=0o755)
    history_dir.mkdir(exist_ok=True, mode=0o755)

    current_log_path = logs_dir / f'{service_name}.log'
    current_all_log_path = logs_dir / 'all.log'

    logger = logging.getLogger(service_name)

    # Close handlers from a previous setup before touching their files
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    archive_to_history(current_log_path, history_dir, service_name)

    root_logger = logging.getLogger()
    all_handler_exists = any(
        isinstance(handler, RotatingFileHandler)
        and handler.baseFilename == os.path.abspath(current_all_log_path)
        for handler in root_logger.handlers
    )
    # all.log is archived only once per process, when its handler is first attached
    if not all_handler_exists:
        archive_to_history(current_all_log_path, history_dir, 'all')

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    service_handler = RotatingFileHandler(
        str(current_log_path),
        maxBytes=10*1024*1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    service_handler.setFormatter(formatter)
    service_handler.setLevel(log_level)

    # stderr, so stdout stays reserved for program output
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    logger.setLevel(log_level)
    logger.addHandler(service_handler)
    logger.addHandler(console_handler)

    if not all_handler_exists:
        all_handler = RotatingFileHandler(
            str(current_all_log_path),
            maxBytes=20*1024*1024,  # 20 MB
            backupCount=5,
            encoding='utf-8'
        )
        all_handler.setFormatter(formatter)
        all_handler.setLevel(log_level)
        root_logger.addHandler(all_handler)
        root_logger.setLevel(log_level)

    return logger


def get_recent_history(service_name: Optional[str] = None,
                       lines: int = 50,
                       from_history: bool = True,
                       log_dir: Optional[Union[str, Path]] = None) -> List[str]:
    """
    Returns the last records from the history or the current log.

    :param service_name: Service name or 'all' for the shared log
    :param lines: Number of lines to return
    :param from_history: True - from history, False - from the current log
    :param log_dir: Log directory, defaults to $FACTORIAL_LOG_DIR or 'logs'
    :return: List of lines
    :raises FileNotFoundError: If the log file does not exist
    """
    if service_name is None:
        service_name = 'all'

    logs_dir = _resolve_log_dir(log_dir)
    if from_history:
        file_path = logs_dir / 'history' / f'{service_name}_history.log'
    else:
        file_path = logs_dir / f'{service_name}.log'

    with open(file_path, 'r', encoding='utf-8') as f:
        content = f.readlines()

    return content[-lines:] if len(content) > lines else content
