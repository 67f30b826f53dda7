# (c) Copyright IBM Corp. 2025

from typing import Generator

import pytest
from mock import MagicMock

from eks_detector.client import KubernetesApiClient
from eks_detector.options import AWS_AUTH_PATH, CLUSTER_INFO_PATH, DetectorOptions
from eks_detector.probes.eks import EksProbe, parse_cluster_name

CREDENTIAL = "Bearer k8s-token-value"


class TestEksProbe:
    @pytest.fixture(autouse=True)
    def _resource(self, options: DetectorOptions) -> Generator[None, None, None]:
        self.client = MagicMock(spec=KubernetesApiClient)
        self.probe = EksProbe(options, client=self.client)
        yield

    def test_default_client(self, options: DetectorOptions) -> None:
        probe = EksProbe(options)
        assert isinstance(probe.client, KubernetesApiClient)
        assert probe.client.options is options
        probe.close()

    def test_is_eks(self) -> None:
        self.client.get.return_value = '{"kind":"ConfigMap","data":{}}'

        assert self.probe.is_eks(CREDENTIAL)
        self.client.get.assert_called_once_with(AWS_AUTH_PATH, CREDENTIAL)

    def test_is_eks_with_empty_body(self) -> None:
        self.client.get.return_value = ""
        assert self.probe.is_eks(CREDENTIAL)

    def test_is_not_eks(self) -> None:
        self.client.get.return_value = None
        assert not self.probe.is_eks(CREDENTIAL)

    def test_get_cluster_name(self) -> None:
        self.client.get.return_value = '{"data":{"cluster.name":"my-eks-cluster"}}'

        assert self.probe.get_cluster_name(CREDENTIAL) == "my-eks-cluster"
        self.client.get.assert_called_once_with(CLUSTER_INFO_PATH, CREDENTIAL)

    @pytest.mark.parametrize("body", [None, ""])
    def test_get_cluster_name_request_failed(self, body: object) -> None:
        self.client.get.return_value = body
        assert self.probe.get_cluster_name(CREDENTIAL) == ""

    def test_get_cluster_name_deeply_nested_body(self) -> None:
        depth = 100000
        self.client.get.return_value = '{"data":' * depth + "1" + "}" * depth

        assert self.probe.get_cluster_name(CREDENTIAL) == ""

    def test_close(self) -> None:
        self.probe.close()
        self.client.close.assert_called_once()


@pytest.mark.parametrize(
    "body, expected",
    [
        ('{"data":{"cluster.name":"my-eks-cluster"}}', "my-eks-cluster"),
        ('{"kind":"ConfigMap","data":{"cluster.name":"prod","region":"us-east-1"}}', "prod"),
        ('{"data":{"cluster.name":""}}', ""),
        ('{"data":{"cluster.name":42}}', ""),
        ('{"data":{}}', ""),
        ('{"data":null}', ""),
        ('{"kind":"ConfigMap"}', ""),
        ("[]", ""),
        ('"text"', ""),
        ("not json", ""),
        ("{", ""),
    ],
)
def test_parse_cluster_name(body: str, expected: str) -> None:
    assert parse_cluster_name(body) == expected
