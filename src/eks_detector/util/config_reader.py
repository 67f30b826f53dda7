# (c) Copyright IBM Corp. 2025

import yaml

from eks_detector.log import logger


class ConfigReader:
    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        self.data = {}
        if file_path:
            self.load_file()
        else:
            logger.debug("ConfigReader: No configuration file specified")

    def load_file(self) -> None:
        """Loads and parses the YAML file"""
        try:
            with open(self.file_path, "r", encoding="utf-8") as file:
                self.data = yaml.safe_load(file) or {}
        except FileNotFoundError:
            logger.warning(
                f"ConfigReader: Configuration file has not found: {self.file_path}"
            )
        except yaml.YAMLError as e:
            logger.warning(f"ConfigReader: Error parsing YAML file: {e}")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(
                f"ConfigReader: Configuration file can't be read: {self.file_path} ({e})"
            )
            self.data = {}

        if not isinstance(self.data, dict):
            logger.warning(
                f"ConfigReader: Expected a mapping at the top of {self.file_path}"
            )
            self.data = {}

    def section(self, name: str) -> dict:
        """Returns the mapping stored under <name>, or an empty dict"""
        value = self.data.get(name)
        if isinstance(value, dict):
            return value
        return {}
