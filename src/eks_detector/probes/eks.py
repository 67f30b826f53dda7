# (c) Copyright IBM Corp. 2025

"""Module to confirm EKS and look up the cluster name through the Kubernetes API"""

import json
from typing import Optional

from eks_detector.client import KubernetesApiClient
from eks_detector.log import logger
from eks_detector.options import DetectorOptions
from eks_detector.probes.base import BaseProbe

CLUSTER_NAME_KEY = "cluster.name"


class EksProbe(BaseProbe):
    """Queries ConfigMaps that only exist on (or describe) an EKS cluster"""

    def __init__(
        self,
        options: Optional[DetectorOptions] = None,
        client: Optional[KubernetesApiClient] = None,
    ) -> None:
        super(EksProbe, self).__init__(options)
        self.client = client or KubernetesApiClient(self.options)

    def is_eks(self, credential: str) -> bool:
        """
        The aws-auth ConfigMap in kube-system is created by EKS.  Any successful
        response confirms EKS; the content is not inspected.
        """
        body = self.client.get(self.options.aws_auth_path, credential)
        if body is None:
            logger.debug("EksProbe.is_eks: aws-auth ConfigMap not available")
            return False
        return True

    def get_cluster_name(self, credential: str) -> str:
        """
        Reads data["cluster.name"] from the cluster-info ConfigMap.

        @return: the cluster name or "" if it can't be determined
        """
        body = self.client.get(self.options.cluster_info_path, credential)
        if not body:
            return ""
        return parse_cluster_name(body)

    def close(self) -> None:
        self.client.close()


def parse_cluster_name(body: str) -> str:
    """
    Extracts the cluster name from a cluster-info ConfigMap document.

    @param body: JSON text, e.g. {"data": {"cluster.name": "my-eks-cluster"}}
    @return: the cluster name or ""
    """
    try:
        cluster_info = json.loads(body)
        cluster_name = cluster_info["data"][CLUSTER_NAME_KEY]
    except (ValueError, KeyError, TypeError, RecursionError):
        logger.debug("Cannot get cluster name on EKS: ", exc_info=True)
        return ""

    if not isinstance(cluster_name, str):
        logger.debug("Unexpected cluster name type: %s", type(cluster_name))
        return ""
    return cluster_name
