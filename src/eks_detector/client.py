# (c) Copyright IBM Corp. 2025

"""
Minimal client for the in-cluster Kubernetes API server
"""

from typing import Optional

import requests

from eks_detector.log import logger
from eks_detector.options import DetectorOptions


class KubernetesApiClient(object):
    """
    Issues authenticated GET requests against the Kubernetes API server.

    The server certificate is verified against the cluster CA bundle from the
    service account directory.  Every request is bounded by options.timeout
    and attempted exactly once.
    """

    def __init__(self, options: Optional[DetectorOptions] = None) -> None:
        self.options = options or DetectorOptions()
        self.client = requests.Session()

    def get(self, path: str, credential: str) -> Optional[str]:
        """
        GET <path> from the API server.

        @param path: the API path, e.g. /api/v1/namespaces/kube-system/configmaps/aws-auth
        @param credential: value for the Authorization header ("Bearer <token>")
        @return: the response body on a 2xx status (possibly empty) or None on any failure
        """
        url = self.options.api_url + path
        headers = {
            "Authorization": credential,
            "Accept": "application/json",
        }

        try:
            response = self.client.get(
                url,
                headers=headers,
                timeout=self.options.timeout,
                verify=self.options.cert_path,
                allow_redirects=False,
            )
        except requests.exceptions.RequestException as exc:
            logger.debug("KubernetesApiClient.get: %s failed (%s)", path, type(exc))
            return None
        except Exception:
            logger.debug("KubernetesApiClient.get: ", exc_info=True)
            return None

        if not 200 <= response.status_code < 300:
            logger.debug(
                "KubernetesApiClient.get: %s responded with status code %s",
                path,
                response.status_code,
            )
            return None

        return response.text

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "KubernetesApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
