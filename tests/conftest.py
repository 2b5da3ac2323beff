import asyncio
import time
from typing import Optional

import pytest
from eth_utils import keccak, to_checksum_address

from deployer.factory import ContractFactory, PendingDeployment

# Common constants
DEPLOYER_ADDRESS = "0x1111111111111111111111111111111111111111"
SCENARIO_ADDRESS = "0xABC...123"


class InsufficientFundsError(Exception):
    """Stands in for the client error raised when the deployer cannot pay for gas."""


class TransactionRevertedError(Exception):
    """Stands in for the client error raised when the creation reverts."""


# Utility functions
def contract_address(sender: str, nonce: int) -> str:
    return to_checksum_address(keccak(text=f"{sender}:{nonce}")[-20:])


# Fakes
class FakePendingDeployment(PendingDeployment):
    def __init__(
        self,
        address: str,
        error: Optional[Exception] = None,
        gate: Optional[asyncio.Event] = None,
    ):
        self.txn_hash = "0x" + keccak(text=address).hex()
        self.address = address
        self.error = error
        self.gate = gate
        self.confirmations = 0

    async def confirm(self) -> str:
        self.confirmations += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.address


class FakeContractFactory(ContractFactory):
    """
    Simulates a network that assigns a new contract address to every
    accepted creation transaction.
    """

    contract_name = "EthGrowDAO"

    def __init__(
        self,
        address: Optional[str] = None,
        submit_error: Optional[Exception] = None,
        confirm_error: Optional[Exception] = None,
        submit_gate: Optional[asyncio.Event] = None,
        confirm_gate: Optional[asyncio.Event] = None,
    ):
        self.address = address
        self.submit_error = submit_error
        self.confirm_error = confirm_error
        self.submit_gate = submit_gate
        self.confirm_gate = confirm_gate
        self.nonce = 0
        self.submissions = []

    async def submit(self) -> FakePendingDeployment:
        if self.submit_gate is not None:
            await self.submit_gate.wait()
        if self.submit_error is not None:
            raise self.submit_error

        address = self.address or contract_address(DEPLOYER_ADDRESS, self.nonce)
        self.nonce += 1
        pending = FakePendingDeployment(
            address=address, error=self.confirm_error, gate=self.confirm_gate
        )
        self.submissions.append(pending)
        return pending


class NeverConfirmingFactory(FakeContractFactory):
    """Accepts the transaction but the network never confirms it."""

    async def submit(self) -> FakePendingDeployment:
        pending = await super().submit()
        pending.gate = asyncio.Event()
        return pending


class BlockingPendingDeployment(FakePendingDeployment):
    """Confirmation blocks a worker thread, like a synchronous client polling for a receipt."""

    def __init__(self, address: str, seconds: float):
        super().__init__(address=address)
        self.seconds = seconds

    async def confirm(self) -> str:
        self.confirmations += 1
        await asyncio.to_thread(time.sleep, self.seconds)
        return self.address


class BlockingFactory(FakeContractFactory):
    def __init__(self, seconds: float):
        super().__init__()
        self.seconds = seconds

    async def submit(self) -> BlockingPendingDeployment:
        pending = BlockingPendingDeployment(
            address=contract_address(DEPLOYER_ADDRESS, self.nonce), seconds=self.seconds
        )
        self.nonce += 1
        self.submissions.append(pending)
        return pending


# Fixtures
@pytest.fixture
def factory():
    return FakeContractFactory()


@pytest.fixture
def scenario_factory():
    return FakeContractFactory(address=SCENARIO_ADDRESS)
