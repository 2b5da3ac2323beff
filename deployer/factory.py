import asyncio
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ape import networks
from ape.api import AccountAPI, ReceiptAPI
from ape.contracts import ContractContainer
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address, to_hex

from deployer.confirm import DeploymentAborted


class PendingDeployment(ABC):
    """A creation transaction accepted by the network but not necessarily confirmed."""

    txn_hash: str

    @abstractmethod
    async def confirm(self) -> ChecksumAddress:
        """Suspends until the creation is final and returns the contract address."""
        raise NotImplementedError


class ContractFactory(ABC):
    """Capability to submit a contract-creation transaction."""

    contract_name: str

    @abstractmethod
    async def submit(self) -> PendingDeployment:
        """Suspends until the network accepts the creation transaction."""
        raise NotImplementedError


class ApePendingDeployment(PendingDeployment):
    def __init__(self, txn_hash: str, contract_name: str, timeout: Optional[float] = None):
        self.txn_hash = txn_hash
        self.contract_name = contract_name
        self.timeout = timeout

    async def confirm(self) -> ChecksumAddress:
        receipt = await asyncio.to_thread(self._wait_for_receipt)
        receipt.raise_for_status()
        return to_checksum_address(receipt.contract_address)

    def _wait_for_receipt(self) -> ReceiptAPI:
        # without a timeout the provider applies its transaction_acceptance_timeout
        required_confirmations = networks.provider.network.required_confirmations
        return networks.provider.get_receipt(
            self.txn_hash, required_confirmations=required_confirmations, timeout=self.timeout
        )

    def __repr__(self) -> str:
        return f"ApePendingDeployment({self.contract_name}, txn_hash={self.txn_hash})"


class ApeContractFactory(ContractFactory):
    """
    Submits the creation transaction of an ape contract container,
    signed by an ape account, through the active provider.
    """

    def __init__(
        self,
        container: ContractContainer,
        account: AccountAPI,
        constructor_args: Sequence = (),
        confirmation_timeout: Optional[float] = None,
    ):
        self.container = container
        self.account = account
        self.constructor_args = tuple(constructor_args)
        self.confirmation_timeout = confirmation_timeout

    @property
    def contract_name(self) -> str:
        return self.container.contract_type.name

    async def submit(self) -> ApePendingDeployment:
        txn_hash = await asyncio.to_thread(self._send)
        return ApePendingDeployment(
            txn_hash=txn_hash,
            contract_name=self.contract_name,
            timeout=self.confirmation_timeout,
        )

    def _send(self) -> str:
        txn = self.container.constructor.serialize_transaction(
            *self.constructor_args, sender=self.account.address
        )
        txn = self.account.prepare_transaction(txn)
        signed_txn = self.account.sign_transaction(txn)
        if signed_txn is None:
            raise DeploymentAborted(f"Signing of the {self.contract_name} creation was declined.")

        txn_hash = networks.provider.web3.eth.send_raw_transaction(
            signed_txn.serialize_transaction()
        )
        return to_hex(txn_hash)
