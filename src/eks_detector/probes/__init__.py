# (c) Copyright IBM Corp. 2025

from eks_detector.probes.container import ContainerProbe
from eks_detector.probes.eks import EksProbe
from eks_detector.probes.kubernetes import KubernetesProbe

__all__ = ["ContainerProbe", "EksProbe", "KubernetesProbe"]
