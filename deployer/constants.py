from enum import Enum

#
# Process exit protocol
#

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

#
# Defaults
#

DEFAULT_CONTRACT_NAME = "EthGrowDAO"

#
# Networks
#

LOCAL_NETWORKS = ["local"]

#
# Orchestrator states
#


class DeploymentState(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    AWAITING_CONFIRMATION = "awaiting confirmation"
    CONFIRMED = "confirmed"
    FAILED = "failed"
