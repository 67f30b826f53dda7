# (c) Copyright IBM Corp. 2025

"""Module to determine the id of the container this process runs in"""

import re

from eks_detector.log import logger
from eks_detector.probes.base import BaseProbe

CONTAINER_ID_LENGTH = 64

# Last path segment of a cgroup entry, e.g.
#   <id>
#   docker-<id>.scope
#   cri-containerd-<id>.scope
#   crio-<id>
#   cri-containerd:<id>
regexp_container_segment = re.compile(
    r"^(?:.*[-:])?([0-9a-f]{%d})(?:\.scope)?$" % CONTAINER_ID_LENGTH
)
regexp_hex_suffix = re.compile(r"^[0-9a-f]{%d}$" % CONTAINER_ID_LENGTH)


class ContainerProbe(BaseProbe):
    """Reads the container id from the cgroup description of this process"""

    def get_container_id(self) -> str:
        """
        @return: the 64 character container id or "" if there is none
        """
        content = self.read_file(self.options.cgroup_path)
        if not content:
            return ""

        container_id = parse_container_id(content)
        if not container_id:
            logger.debug("ContainerProbe: no container id in %s", self.options.cgroup_path)
        return container_id


def parse_container_id(content: str) -> str:
    """
    Extracts a container id from the content of a cgroup file.

    Lines look like "hierarchy-id:controllers:path".  The last line whose path
    ends in a container id wins.  Lines with no recognisable path segment fall
    back to their final 64 characters if those are hex.

    @param content: the cgroup file content
    @return: the container id or ""
    """
    lines = [line.strip() for line in content.splitlines() if line.strip()]

    for line in reversed(lines):
        parts = line.split(":", 2)
        path = parts[2] if len(parts) == 3 else line
        segment = path.rstrip("/").rsplit("/", 1)[-1]

        match = regexp_container_segment.match(segment)
        if match:
            return match.group(1)

    for line in reversed(lines):
        if len(line) > CONTAINER_ID_LENGTH:
            suffix = line[-CONTAINER_ID_LENGTH:]
            if regexp_hex_suffix.match(suffix):
                return suffix

    return ""
