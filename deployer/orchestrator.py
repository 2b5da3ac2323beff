import asyncio
from typing import NamedTuple, Optional, Tuple

from eth_typing import ChecksumAddress

from deployer.constants import DeploymentState
from deployer.factory import ContractFactory


class DeploymentRequest(NamedTuple):
    """Identifies the contract to create and the arguments of its constructor."""

    contract_name: str
    constructor_args: Tuple = ()


class DeploymentResult:
    """
    Outcome of a single deployment: either the confirmed contract address
    or the exception that stopped the deployment, never both.
    """

    class Invalid(Exception):
        """Raised when a result is built with both or neither of its variants"""

    def __init__(
        self,
        address: Optional[ChecksumAddress] = None,
        failure_cause: Optional[BaseException] = None,
    ):
        if (address is None) == (failure_cause is None):
            raise self.Invalid("A deployment result is either an address or a failure cause.")
        self.address = address
        self.failure_cause = failure_cause

    @classmethod
    def success(cls, address: ChecksumAddress) -> "DeploymentResult":
        return cls(address=address)

    @classmethod
    def failure(cls, cause: BaseException) -> "DeploymentResult":
        return cls(failure_cause=cause)

    @property
    def ok(self) -> bool:
        return self.failure_cause is None

    def __repr__(self) -> str:
        if self.ok:
            return f"DeploymentResult(address={self.address})"
        return f"DeploymentResult(failure_cause={self.failure_cause!r})"


class DeploymentOrchestrator:
    """
    Runs the deployment sequence for one contract factory exactly once:
    submit the creation transaction, then separately await its confirmation.

    The orchestrator never retries, never translates errors and imposes no
    confirmation timeout unless one is given.
    """

    class AlreadyRun(Exception):
        """Raised when an orchestrator is asked to deploy a second time"""

    def __init__(self, factory: ContractFactory, confirmation_timeout: Optional[float] = None):
        self.factory = factory
        self.confirmation_timeout = confirmation_timeout
        self._state = DeploymentState.IDLE
        self._pending = None

    @property
    def state(self) -> DeploymentState:
        return self._state

    @property
    def pending(self):
        """The accepted-but-maybe-unconfirmed deployment, once submitted."""
        return self._pending

    async def run(self) -> DeploymentResult:
        if self._state is not DeploymentState.IDLE:
            raise self.AlreadyRun(
                f"Deployment of {self.factory.contract_name} already ran "
                f"(state: {self._state.value})."
            )

        try:
            self._state = DeploymentState.SUBMITTING
            self._pending = await self.factory.submit()

            self._state = DeploymentState.AWAITING_CONFIRMATION
            address = await self._confirm()
        except Exception as e:
            self._state = DeploymentState.FAILED
            return DeploymentResult.failure(cause=e)

        self._state = DeploymentState.CONFIRMED
        return DeploymentResult.success(address=address)

    async def _confirm(self) -> ChecksumAddress:
        if self.confirmation_timeout is None:
            return await self._pending.confirm()
        return await asyncio.wait_for(self._pending.confirm(), timeout=self.confirmation_timeout)


async def deploy(
    factory: ContractFactory, confirmation_timeout: Optional[float] = None
) -> DeploymentResult:
    """Deploys a single contract through the given factory."""
    orchestrator = DeploymentOrchestrator(factory, confirmation_timeout=confirmation_timeout)
    return await orchestrator.run()
