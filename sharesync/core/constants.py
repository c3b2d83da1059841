"""
Project constants definitions
"""

# ============================================================
# Share Paths
# ============================================================

UNC_PREFIX = "\\\\"
PATH_SEPARATOR = "\\"
ADMIN_SHARE_SUFFIX = "$"

# ============================================================
# Result Records
# ============================================================

RECORD_TIME_FORMAT = "%Y-%m-%d %H:%M"
RECORD_SEPARATOR = ";"
OUTCOME_SUCCESS = "Success"
OUTCOME_FAIL = "Fail"

# ============================================================
# Environment
# ============================================================

ENV_PREFIX = "SHARESYNC_"
SSH_CONFIG_PATH = "~/.ssh/config"

# ============================================================
# Exit Codes
# ============================================================

EXIT_ERROR = 1
EXIT_DECLINED = 2
EXIT_PARTIAL = 3
