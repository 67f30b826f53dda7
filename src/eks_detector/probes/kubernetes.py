# (c) Copyright IBM Corp. 2025

"""Module to detect the Kubernetes service account mounted into a Pod"""

import os

from eks_detector.log import logger
from eks_detector.probes.base import BaseProbe


class KubernetesProbe(BaseProbe):
    """Checks for the service account files and turns the token into a credential"""

    def is_kubernetes(self) -> bool:
        """
        True only if both the service account token and the cluster CA
        certificate are present.
        """
        try:
            return os.path.isfile(self.options.token_path) and os.path.isfile(
                self.options.cert_path
            )
        except (OSError, TypeError, ValueError):
            logger.debug("KubernetesProbe.is_kubernetes: ", exc_info=True)
            return False

    def get_credential(self) -> str:
        """
        Reads the service account token.

        @return: "Bearer <token>" or "" if the token can't be read or is empty
        """
        token = self.read_file(self.options.token_path).strip()
        if not token:
            logger.debug("KubernetesProbe.get_credential: no service account token")
            return ""
        return "Bearer " + token
