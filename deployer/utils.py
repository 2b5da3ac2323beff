import os
from typing import Optional

import click
from ape import networks, project
from ape.api import AccountAPI
from ape.contracts import ContractContainer

from deployer.constants import LOCAL_NETWORKS
from deployer.factory import ApeContractFactory
from deployer.orchestrator import DeploymentRequest


def is_local_network() -> bool:
    return networks.provider.network.name in LOCAL_NETWORKS


def check_infura_plugin() -> None:
    """Live deployments through infura need ape-infura and one of its API key variables."""
    if is_local_network() or networks.provider.name != "infura":
        return
    try:
        from ape_infura.provider import _ENVIRONMENT_VARIABLE_NAMES
    except ImportError:
        raise ImportError("Deploying through infura requires the ape-infura plugin.")
    if not any(os.environ.get(envvar) for envvar in _ENVIRONMENT_VARIABLE_NAMES):
        raise ValueError(
            f"Cannot deploy through infura; set one of {', '.join(_ENVIRONMENT_VARIABLE_NAMES)}."
        )


def check_plugins() -> None:
    click.echo("Checking plugins...")
    check_infura_plugin()


def get_contract_container(contract: str) -> ContractContainer:
    """Finds a compiled contract in the project, then in its dependencies."""
    if hasattr(project, contract):
        return getattr(project, contract)

    searched = ["project"]
    for dependency_name, dependency_versions in project.dependencies.items():
        if not dependency_versions:
            continue
        if len(dependency_versions) > 1:
            raise ValueError(
                f"Ambiguous {dependency_name} dependency for {contract}; "
                f"installed versions: {', '.join(dependency_versions)}"
            )
        (version, dependency_api), = dependency_versions.items()
        searched.append(f"{dependency_name}@{version}")
        if hasattr(dependency_api, contract):
            return getattr(dependency_api, contract)

    raise ValueError(
        f"No contract found with name '{contract}' (searched {', '.join(searched)})."
    )


def load_factory(
    request: DeploymentRequest,
    account: AccountAPI,
    confirmation_timeout: Optional[float] = None,
) -> ApeContractFactory:
    """Looks up the compiled contract and binds it to the deployer account."""
    container = get_contract_container(request.contract_name)
    return ApeContractFactory(
        container=container,
        account=account,
        constructor_args=request.constructor_args,
        confirmation_timeout=confirmation_timeout,
    )


def print_deployment_info(request: DeploymentRequest, account: AccountAPI) -> None:
    click.echo(
        "\n".join(
            [
                f"Account: {account.address}",
                f"Contract: {request.contract_name}",
                f"Ecosystem: {networks.provider.network.ecosystem.name}",
                f"Network: {networks.provider.network.name}",
                f"Chain ID: {networks.provider.network.chain_id}",
                f"Gas Price: {networks.provider.gas_price}",
            ]
        )
    )
