# (c) Copyright IBM Corp. 2025

import logging
import os
from pathlib import Path
from typing import Generator

import pytest

from eks_detector.log import logger
from eks_detector.options import DetectorOptions

ENV_VARIABLES = (
    "EKS_DETECTOR_CONFIG_PATH",
    "EKS_DETECTOR_DEBUG",
    "EKS_DETECTOR_LOG_LEVEL",
    "EKS_DETECTOR_TIMEOUT",
)

CONTAINER_ID = "0123456789abcdef" * 4


@pytest.fixture(autouse=True)
def _clean_environment() -> Generator[None, None, None]:
    saved = {name: os.environ.pop(name) for name in ENV_VARIABLES if name in os.environ}
    yield
    for name in ENV_VARIABLES:
        if name in os.environ:
            os.environ.pop(name)
    os.environ.update(saved)


@pytest.fixture
def container_id() -> str:
    return CONTAINER_ID


@pytest.fixture
def service_account(tmp_path: Path) -> Path:
    """A service account directory with a token and a CA certificate"""
    account_dir = tmp_path / "serviceaccount"
    account_dir.mkdir()
    (account_dir / "token").write_text("k8s-token-value\n")
    (account_dir / "ca.crt").write_text(
        "-----BEGIN CERTIFICATE-----\nMIIB\n-----END CERTIFICATE-----\n"
    )
    return account_dir


@pytest.fixture
def cgroup_file(tmp_path: Path, container_id: str) -> Path:
    path = tmp_path / "cgroup"
    path.write_text(
        "12:memory:/kubepods/burstable/pod8a1d2c3e-0000-4000-8000-000000000001/"
        f"{container_id}\n"
        "11:cpu,cpuacct:/kubepods/burstable/pod8a1d2c3e-0000-4000-8000-000000000001/"
        f"{container_id}\n"
    )
    return path


@pytest.fixture
def options(service_account: Path, cgroup_file: Path) -> DetectorOptions:
    return DetectorOptions(
        token_path=str(service_account / "token"),
        cert_path=str(service_account / "ca.crt"),
        cgroup_path=str(cgroup_file),
    )


@pytest.fixture(autouse=True)
def _reset_log_level() -> Generator[None, None, None]:
    yield
    logger.setLevel(logging.WARNING)
