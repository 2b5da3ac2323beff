import click

from deployer.constants import DEFAULT_CONTRACT_NAME
from deployer.types import ConstructorArgument, MinFloat

contract_name_option = click.option(
    "--contract-name",
    "-c",
    help="Name of the contract to deploy, as known to the ape project",
    type=click.STRING,
    default=DEFAULT_CONTRACT_NAME,
    show_default=True,
)

constructor_args_option = click.option(
    "--constructor-arg",
    "-a",
    "constructor_args",
    help="Positional constructor argument; repeat for each argument in order",
    type=ConstructorArgument(),
    multiple=True,
)

autosign_option = click.option(
    "--autosign",
    help="Deploy without asking for confirmation and sign automatically",
    is_flag=True,
    default=False,
)

confirmation_timeout_option = click.option(
    "--confirmation-timeout",
    "-t",
    help="Seconds to wait for confirmation; waits indefinitely when unset",
    type=MinFloat(0),
    default=None,
)
