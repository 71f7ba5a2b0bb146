"""Constants module for PodWatch TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min, time units)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in podwatch.keyboard module.
"""

from podwatch.constants.defaults import (
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    NAMESPACE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    SETTINGS_PATH_DEFAULT,
)
from podwatch.constants.enums import (
    ContainerLifecycle,
    FetchState,
    StateSeverity,
    ViewMode,
)
from podwatch.constants.limits import (
    REFRESH_INTERVAL_MAX,
    REFRESH_INTERVAL_MIN,
)
from podwatch.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from podwatch.constants.values import (
    APP_TITLE,
    PODS_EMPTY_LABEL,
    PODS_LOADING_LABEL,
    PODS_TREE_TITLE,
)

__all__ = [
    "APP_TITLE",
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "NAMESPACE_DEFAULT",
    "PODS_EMPTY_LABEL",
    "PODS_LOADING_LABEL",
    "PODS_TREE_TITLE",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MAX",
    "REFRESH_INTERVAL_MIN",
    "SETTINGS_PATH_DEFAULT",
    "ContainerLifecycle",
    "FetchState",
    "StateSeverity",
    "ViewMode",
]
