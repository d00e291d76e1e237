# scanconsole/core/constants.py
from enum import Enum
from typing import Dict, List


class SettingKey(str, Enum):
    CONSOLE_URL = "console_url"
    INACTIVE_NODES_DELETE_SCAN_RESULTS = "inactive_delete_scan_results"


class ScanType(str, Enum):
    SECRET = "SecretScan"
    VULNERABILITY = "VulnerabilityScan"
    MALWARE = "MalwareScan"

    @property
    def slug(self) -> str:
        return SCAN_TYPE_SLUGS[self]

    @classmethod
    def from_slug(cls, slug: str) -> "ScanType":
        for scan_type, value in SCAN_TYPE_SLUGS.items():
            if value == slug:
                return scan_type
        raise ValueError(f"Unknown scan type: {slug}")


SCAN_TYPE_SLUGS: Dict[ScanType, str] = {
    ScanType.SECRET: "secret",
    ScanType.VULNERABILITY: "vulnerability",
    ScanType.MALWARE: "malware",
}


class NodeType(str, Enum):
    HOST = "host"
    CONTAINER = "container"
    IMAGE = "container_image"


DEFAULT_NODE_TYPES: List[str] = [NodeType.IMAGE.value, NodeType.CONTAINER.value, NodeType.HOST.value]


class ScanStatus(str, Enum):
    COMPLETE = "complete"
    IN_PROGRESS = "in_progress"
    ERROR = "error"


class SeverityLevel(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


# Tiers summed into a row total; unknown is reported but never counted
TOTAL_SEVERITIES: List[SeverityLevel] = [
    SeverityLevel.CRITICAL,
    SeverityLevel.HIGH,
    SeverityLevel.MEDIUM,
    SeverityLevel.LOW,
]


class ActionType(str, Enum):
    DELETE = "delete"
    DOWNLOAD = "download"


# URL query parameters understood by the scan listing view
class QueryParam(str, Enum):
    STATUS = "status"
    HOSTS = "hosts"
    CONTAINERS = "containers"
    CONTAINER_IMAGES = "containerImages"
    LANGUAGES = "languages"
    CLUSTERS = "clusters"
    NODE_TYPE = "nodeType"
    PAGE = "page"
    SORT_BY = "sortby"
    DESC = "desc"


FILTER_PARAMS: List[str] = [
    QueryParam.STATUS.value,
    QueryParam.HOSTS.value,
    QueryParam.CONTAINERS.value,
    QueryParam.CONTAINER_IMAGES.value,
    QueryParam.LANGUAGES.value,
    QueryParam.CLUSTERS.value,
    QueryParam.NODE_TYPE.value,
]
