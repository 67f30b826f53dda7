# (c) Copyright IBM Corp. 2025

"""
Base class for the probes used by the detector.  Probes inspect one aspect of
the environment (files, the API server, cgroups) and report what they found as
a plain string.  An empty string means "not found" or "not applicable"; probes
never raise.
"""

from typing import Optional

from eks_detector.log import logger
from eks_detector.options import DetectorOptions


class BaseProbe(object):
    """
    Base class for all probes.  Holds the options shared by every probe.
    """

    def __init__(self, options: Optional[DetectorOptions] = None) -> None:
        self.options = options or DetectorOptions()

    def read_file(self, path: str) -> str:
        """
        Reads the complete content of <path>.

        @param path: the file to read
        @return: the file content or "" if it can't be read
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError):
            logger.debug("%s.read_file: %s", self.__class__.__name__, path, exc_info=True)
            return ""
