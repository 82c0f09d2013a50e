"""
Copyright (c) 2026, the field25519 developers
See LICENSE for details

Configuration settings for the field25519 command line tool.
"""

import os

from appdirs import AppDirs

from field25519 import FieldError
from field25519.util import helpers


# Set the data directory in an OS-appropriate location. It is created when a
# configuration is first loaded.
_ad = AppDirs("field25519", False)
DATA_DIR = _ad.user_data_dir

# The configuration file name.
CONFIG_NAME = "field25519.conf"

# Output formats. hex is the little-endian encoding, int the decimal value.
HEX = "hex"
INT = "int"
FORMATS = (HEX, INT)

DefaultSettings = {"format": HEX, "loglevel": "INFO"}

log = helpers.getLogger("CONFIG")


class FieldConfig:
    """
    FieldConfig is configuration settings. The configuration file is JSON
    formatted.
    """

    def __init__(self, dataDir=None):
        """
        Args:
            dataDir (str): optional. The directory holding the configuration
                file. Defaults to DATA_DIR.
        """
        self.dataDir = dataDir if dataDir else DATA_DIR
        if not helpers.mkdir(self.dataDir):
            raise FieldError(f"data directory {self.dataDir} is a file")
        self.path = os.path.join(self.dataDir, CONFIG_NAME)
        self.file = helpers.fetchSettingsFile(self.path)
        self.normalize()

    def set(self, k, v):
        """
        Set the configuration option. The configuration is not saved, so `save`
        should be called separately.

        Args:
            k (str): The setting key.
            v (JSON-encodable): The value.
        """
        self.file[k] = v

    def get(self, *keys):
        """
        Retrieve the setting at the provided key path. Multiple keys can be
        provided, with each successive key being retrieved from the previous
        key's value.

        Args:
            *keys (str): Recursive key list.

        Returns:
            mixed: The configuration value.
        """
        d = self.file
        rVal = None
        for k in keys:
            if not isinstance(d, dict) or k not in d:
                return None
            rVal = d = d[k]
        return rVal

    def normalize(self):
        """
        Fill in missing settings and replace invalid ones with defaults.
        """
        file = self.file
        for k, v in DefaultSettings.items():
            if k not in file:
                file[k] = v
        if file["format"] not in FORMATS:
            log.warning(f"unknown output format {file['format']!r}, using {HEX}")
            file["format"] = HEX
        try:
            helpers.logLvl(file["loglevel"])
        except FieldError:
            log.warning(f"unknown log level {file['loglevel']!r}, using INFO")
            file["loglevel"] = DefaultSettings["loglevel"]

    def save(self):
        """
        Save the file.
        """
        helpers.saveJSON(self.path, self.file, indent=4, sort_keys=True)


def load(dataDir=None):
    """
    Load and return the configuration.

    Args:
        dataDir (str): optional. See FieldConfig.

    Returns:
        FieldConfig: The configuration.
    """
    return FieldConfig(dataDir)
