from typing import Sequence

import click


class DeploymentAborted(Exception):
    """Raised when the operator (or the signer) declines the deployment."""


def _confirm_deployment(contract_name: str) -> None:
    """Asks the user to confirm the deployment of a single contract."""
    answer = input(f"Deploy {contract_name} Y/N? ")
    if answer.lower().strip() == "n":
        click.echo("Aborting deployment!")
        raise DeploymentAborted(f"Deployment of {contract_name} declined by the operator.")


def _confirm_resolution(constructor_args: Sequence, contract_name: str) -> None:
    """Asks the user to confirm the constructor arguments for a single contract."""
    if len(constructor_args) == 0:
        click.echo(f"\n(i) No constructor parameters for {contract_name}")
        _confirm_deployment(contract_name)
        return

    click.echo(f"\nConstructor parameters for {contract_name}")
    for position, value in enumerate(constructor_args):
        click.echo(f"\t[{position}]={value}")
    _confirm_deployment(contract_name)
