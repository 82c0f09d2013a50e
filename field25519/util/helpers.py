"""
Copyright (c) 2026, the field25519 developers
See LICENSE for details
"""

import json
import logging
from logging import Handler, Logger
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import shutil
import sys
from tempfile import TemporaryDirectory
import traceback
from typing import Any, Dict, Optional, Union

from field25519 import FieldError


def formatTraceback(err: Exception) -> str:
    """
    Format a traceback for an error so that it can go into logs.

    Args:
        err: The error the traceback is extracted from.

    Returns:
        The __str__() of the error, followed by the standard formatting
            of the traceback on the following lines.
    """
    return "".join(traceback.format_exception(None, err, err.__traceback__))


def mkdir(path: Union[Path, str]) -> bool:
    """
    Create the directory if it doesn't exist.

    Args:
        path: the directory path.

    Returns:
        False if a file is in the way, True otherwise.
    """
    if os.path.isdir(path):
        return True
    if os.path.isfile(path):
        return False
    os.makedirs(path)
    return True


class LogSettings:
    """
    Used to track a few logging-related settings.
    """

    root = logging.getLogger("field25519")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: Dict[str, Handler] = {}


LogSettings.root.setLevel(logging.NOTSET)

logFormat = "%(asctime)s %(module)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Prepare for using getLogger. Logs to stderr. If filepath is provided, log
    outputs will also be saved to a rotating log file at the specified
    location. Loggers already created and those created later have their
    levels set according to logLvl and lvlMap. Calling this more than once
    does not duplicate handlers.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The default logging level used for all new loggers without
            entries in the lvlMap.
        lvlMap: The name->level mapping will be added to the stored level dict,
            which is referenced when loggers are created using getLogger.
    """
    LogSettings.defaultLevel = logLvl
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))

    formatter = logging.Formatter(logFormat)
    if filepath:
        key = f"file:{os.path.abspath(filepath)}"
        if key not in LogSettings.handlers:
            fileHandler = RotatingFileHandler(
                filepath, mode="a", maxBytes=5 * 1024 * 1024, backupCount=2
            )
            fileHandler.setFormatter(formatter)
            LogSettings.root.addHandler(fileHandler)
            LogSettings.handlers[key] = fileHandler
    if "stream" not in LogSettings.handlers and not sys.executable.endswith(
        "pythonw.exe"
    ):
        # Skip adding the stream handler for pythonw in windows.
        printHandler = logging.StreamHandler()
        printHandler.setFormatter(formatter)
        LogSettings.root.addHandler(printHandler)
        LogSettings.handlers["stream"] = printHandler


def getLogger(name: str) -> Logger:
    """
    Gets a named logger. If the name has a log level registered with
    prepareLogging, that level will be used, otherwise the default is used.

    Args:
        name: The logger name.
    """
    l = LogSettings.root.getChild(name)
    l.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = l
    return l


logNameToLevel = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def logLvl(lvl: Union[int, str]) -> int:
    """
    Parse a logging level, given either as a number or by name.

    Args:
        lvl: e.g. 10, "10", "debug" or "DEBUG".

    Returns:
        The numeric level.

    Raises:
        FieldError if the level is not recognized.
    """
    try:
        return int(lvl)
    except (TypeError, ValueError):
        name = str(lvl).upper()
        if name in logNameToLevel:
            return logNameToLevel[name]
        raise FieldError(f"unknown log level {lvl!r}")


def fetchSettingsFile(filepath: Union[Path, str]) -> Dict[str, Any]:
    """
    Fetches the JSON settings file, creating an empty json object if necessary.

    Raises:
        FieldError if the file does not hold a JSON object.
    """
    if not os.path.isfile(filepath):
        with open(filepath, "w+") as f:
            f.write("{}")
    with open(filepath) as f:
        try:
            settings = json.load(f)
        except json.JSONDecodeError as e:
            raise FieldError(f"malformed settings file {filepath}: {e}") from e
    if not isinstance(settings, dict):
        raise FieldError(f"settings file {filepath} must hold a JSON object")
    return settings


def saveFile(path: Union[Path, str], contents: str):
    """
    Atomic file save.
    """
    with TemporaryDirectory() as tempDir:
        tmpPath = os.path.join(tempDir, "tmp.tmp")
        with open(tmpPath, "w") as f:
            f.write(contents)
            f.flush()
            os.fsync(f.fileno())
        shutil.move(tmpPath, path)


def saveJSON(path: Union[Path, str], obj: Any, **kwargs):
    """
    Atomic JSON save. Keyword arguments are passed to json.dumps.
    """
    saveFile(path, json.dumps(obj, **kwargs))
