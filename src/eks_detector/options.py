# (c) Copyright IBM Corp. 2025

"""
Option class for the EKS resource detector

DetectorOptions holds the filesystem locations, API server endpoints and
request settings used by the probes.  The locations are constants of the
Kubernetes service account and cgroup conventions; they are attributes here so
tests (and unusual deployments) can pass different ones in code.

The priority of the tunable settings is as follows:
keyword arguments > environment variables > configuration file (yaml) > default value
"""

import logging
import math
import os
from typing import Any, Dict

from eks_detector.exceptions import InvalidOptionError
from eks_detector.log import logger
from eks_detector.util.config import parse_log_level, parse_timeout_ms
from eks_detector.util.config_reader import ConfigReader

SERVICE_ACCOUNT_DIR = "/var/run/secrets/kubernetes.io/serviceaccount"
TOKEN_PATH = SERVICE_ACCOUNT_DIR + "/token"
CERT_PATH = SERVICE_ACCOUNT_DIR + "/ca.crt"
CGROUP_PATH = "/proc/self/cgroup"

API_DEFAULT_HOST = "kubernetes.default.svc"
API_DEFAULT_PORT = 443
AWS_AUTH_PATH = "/api/v1/namespaces/kube-system/configmaps/aws-auth"
CLUSTER_INFO_PATH = "/api/v1/namespaces/kube-public/configmaps/cluster-info"

DEFAULT_TIMEOUT = 2.0
CONFIG_SECTION = "eks_detector"


class DetectorOptions(object):
    """Options used by AwsEksResourceDetector and its probes"""

    def __init__(self, **kwds: Dict[str, Any]) -> None:
        self.token_path = TOKEN_PATH
        self.cert_path = CERT_PATH
        self.cgroup_path = CGROUP_PATH

        self.api_host = API_DEFAULT_HOST
        self.api_port = API_DEFAULT_PORT
        self.aws_auth_path = AWS_AUTH_PATH
        self.cluster_info_path = CLUSTER_INFO_PATH

        self.timeout = DEFAULT_TIMEOUT
        self.log_level = logging.WARNING

        self.set_from_config_file()
        self.set_from_env()

        for name, value in kwds.items():
            self._set_keyword(name, value)

    def set_from_config_file(self) -> None:
        """
        Reads the optional yaml file named by EKS_DETECTOR_CONFIG_PATH.

        Example:
            eks_detector:
              timeout: 1500
              log_level: info
        """
        config_path = os.environ.get("EKS_DETECTOR_CONFIG_PATH", "")
        if not config_path:
            return

        section = ConfigReader(config_path).section(CONFIG_SECTION)

        if "timeout" in section:
            timeout = parse_timeout_ms(section["timeout"])
            if timeout is not None:
                self.timeout = timeout

        if "log_level" in section:
            level = parse_log_level(section["log_level"])
            if level is not None:
                self.log_level = level

    def set_from_env(self) -> None:
        timeout_in_ms = os.environ.get("EKS_DETECTOR_TIMEOUT", None)
        if timeout_in_ms is not None:
            # Convert the value from milliseconds to seconds for the requests package
            timeout = parse_timeout_ms(timeout_in_ms)
            if timeout is not None:
                self.timeout = timeout
            else:
                logger.warning(
                    "EKS_DETECTOR_TIMEOUT should specify timeout in milliseconds."
                )

        value = os.environ.get("EKS_DETECTOR_LOG_LEVEL", None)
        if value is not None:
            level = parse_log_level(value)
            if level is not None:
                self.log_level = level

        if "EKS_DETECTOR_DEBUG" in os.environ:
            self.log_level = logging.DEBUG

    def _set_keyword(self, name: str, value: Any) -> None:
        if not hasattr(self, name):
            raise InvalidOptionError(name, value, "unknown option")

        if name == "timeout":
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidOptionError(name, value, "expected seconds as a number")
            try:
                seconds = float(value)
            except OverflowError:
                seconds = math.inf
            if not seconds > 0 or not math.isfinite(seconds):
                raise InvalidOptionError(name, value, "timeout must be positive and finite")
            value = seconds
        elif name == "api_port":
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidOptionError(name, value, "expected an integer port")
        elif name == "log_level":
            level = parse_log_level(value) if isinstance(value, str) else value
            if level not in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR):
                raise InvalidOptionError(name, value, "unknown log level")
            value = level
        elif not isinstance(value, str):
            raise InvalidOptionError(name, value, "expected a string")

        setattr(self, name, value)

    @property
    def api_url(self) -> str:
        """Base URL of the in-cluster Kubernetes API server"""
        return f"https://{self.api_host}:{self.api_port}"
