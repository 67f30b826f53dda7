# (c) Copyright IBM Corp. 2025

"""
Resource detector for workloads running on AWS Elastic Kubernetes Service (EKS)

Detection runs the probes in order and stops at the first one that rules out
EKS:

    NotK8s             - no service account token/CA cert, or unreadable token
    K8sUnconfirmedEKS  - the aws-auth ConfigMap can't be fetched
    K8sConfirmedEKS    - cluster name and container id are looked up

Only the last state produces attributes.  A detection run never raises.
"""

from typing import Dict, Optional

from opentelemetry.sdk.resources import Resource, ResourceDetector
from opentelemetry.semconv.resource import (
    CloudPlatformValues,
    CloudProviderValues,
    ResourceAttributes,
)

from eks_detector.log import logger, update_log_level
from eks_detector.options import DetectorOptions
from eks_detector.probes import ContainerProbe, EksProbe, KubernetesProbe


class AwsEksResourceDetector(ResourceDetector):
    """Detects attribute values only available when the app is running on AWS
    Elastic Kubernetes Service (EKS) and returns them in a Resource.
    """

    def __init__(
        self,
        options: Optional[DetectorOptions] = None,
        kubernetes_probe: Optional[KubernetesProbe] = None,
        eks_probe: Optional[EksProbe] = None,
        container_probe: Optional[ContainerProbe] = None,
        raise_on_error: bool = False,
    ) -> None:
        super(AwsEksResourceDetector, self).__init__(raise_on_error=raise_on_error)
        self.options = options or DetectorOptions()
        self.kubernetes_probe = kubernetes_probe or KubernetesProbe(self.options)
        self.container_probe = container_probe or ContainerProbe(self.options)
        # Without an injected probe every run gets its own API client session
        self.eks_probe = eks_probe

        update_log_level(self.options.log_level)

    def detect(self) -> "Resource":
        attributes = self.collect_attributes()
        if not attributes:
            return Resource.get_empty()
        return Resource(attributes)

    def collect_attributes(self) -> Dict[str, str]:
        """
        Runs all probes once.

        @return: the detected attributes, empty if this is not an EKS workload
        """
        try:
            return self._collect_attributes()
        except Exception as exc:
            # Detector failures must never prevent telemetry initialization,
            # so raise_on_error does not apply here.
            logger.warning("%s failed: %s", self.__class__.__name__, exc)
            logger.debug("AwsEksResourceDetector.collect_attributes: ", exc_info=True)
            return {}

    def _collect_attributes(self) -> Dict[str, str]:
        if not self.kubernetes_probe.is_kubernetes():
            logger.debug("Not running on Kubernetes")
            return {}

        credential = self.kubernetes_probe.get_credential()
        if not credential:
            logger.debug("No Kubernetes credential available")
            return {}

        eks_probe = self.eks_probe or EksProbe(self.options)
        try:
            if not eks_probe.is_eks(credential):
                logger.debug("Running on Kubernetes, but not on EKS")
                return {}

            cluster_name = eks_probe.get_cluster_name(credential)
        finally:
            if self.eks_probe is None:
                eks_probe.close()

        container_id = self.container_probe.get_container_id()

        return assemble_attributes(cluster_name, container_id)


def assemble_attributes(cluster_name: str, container_id: str) -> Dict[str, str]:
    """
    Builds the attributes for a confirmed EKS workload.

    Cluster name and container id are each optional, but if neither is known
    nothing is reported.
    """
    if not cluster_name and not container_id:
        logger.debug("Neither cluster name nor container id found on EKS")
        return {}

    attributes = {
        ResourceAttributes.CLOUD_PROVIDER: CloudProviderValues.AWS.value,
        ResourceAttributes.CLOUD_PLATFORM: CloudPlatformValues.AWS_EKS.value,
    }
    if cluster_name:
        attributes[ResourceAttributes.K8S_CLUSTER_NAME] = cluster_name
    if container_id:
        attributes[ResourceAttributes.CONTAINER_ID] = container_id
    return attributes


def detect(options: Optional[DetectorOptions] = None) -> "Resource":
    """Convenience wrapper: run the EKS detector once and return its Resource"""
    return AwsEksResourceDetector(options).detect()
