import asyncio
import traceback
from typing import Callable, Optional

import click

from deployer.constants import EXIT_FAILURE, EXIT_SUCCESS
from deployer.factory import ContractFactory
from deployer.orchestrator import DeploymentResult, deploy


def execute(
    load: Callable[[], ContractFactory], confirmation_timeout: Optional[float] = None
) -> DeploymentResult:
    """
    Looks up the contract factory and deploys it.

    A lookup failure is reported like any other failure; the deployment
    is never submitted in that case.
    """
    try:
        factory = load()
    except Exception as e:
        return DeploymentResult.failure(cause=e)

    # asyncio.run would join worker threads still blocked on the network after a timeout
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(
            deploy(factory, confirmation_timeout=confirmation_timeout)
        )
    finally:
        loop.run_until_complete(loop.shutdown_asyncgens())
        loop.close()


def format_failure(cause: BaseException) -> str:
    return "".join(traceback.format_exception(type(cause), cause, cause.__traceback__))


def report(result: DeploymentResult, contract_name: str = "Contract") -> int:
    """Prints the deployment outcome and returns the process exit code."""
    if result.ok:
        click.secho(f"{contract_name} deployed to: {result.address}", fg="green")
        return EXIT_SUCCESS

    click.secho(f"{contract_name} deployment failed:", fg="red", err=True)
    click.echo(format_failure(result.failure_cause), err=True)
    return EXIT_FAILURE
