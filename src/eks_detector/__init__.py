# (c) Copyright IBM Corp. 2025
"""
EKS resource detector for OpenTelemetry

Detects whether the process runs on AWS Elastic Kubernetes Service and, if so,
reports cloud.provider, cloud.platform, k8s.cluster.name and container.id.

    from opentelemetry.sdk.resources import get_aggregated_resources
    from eks_detector import AwsEksResourceDetector

    resource = get_aggregated_resources([AwsEksResourceDetector()])
"""

from eks_detector.detector import AwsEksResourceDetector, detect
from eks_detector.options import DetectorOptions
from eks_detector.version import VERSION

__version__ = VERSION

__all__ = ["AwsEksResourceDetector", "DetectorOptions", "detect"]
