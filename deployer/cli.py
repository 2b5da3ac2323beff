import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from deployer.confirm import _confirm_resolution
from deployer.options import (
    autosign_option,
    confirmation_timeout_option,
    constructor_args_option,
    contract_name_option,
)
from deployer.orchestrator import DeploymentRequest
from deployer.report import execute, report
from deployer.utils import check_plugins, load_factory, print_deployment_info


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@account_option()
@contract_name_option
@constructor_args_option
@autosign_option
@confirmation_timeout_option
@click.pass_context
def cli(ctx, network, account, contract_name, constructor_args, autosign, confirmation_timeout):
    """Deploy a single contract and report its address."""
    request = DeploymentRequest(
        contract_name=contract_name, constructor_args=tuple(constructor_args)
    )

    def _load():
        print_deployment_info(request=request, account=account)
        if autosign:
            click.echo("WARNING: Autosign is enabled. Transactions will be signed automatically.")
            if hasattr(account, "set_autosign"):
                account.set_autosign(True)
        check_plugins()
        factory = load_factory(
            request=request, account=account, confirmation_timeout=confirmation_timeout
        )
        if not autosign:
            _confirm_resolution(request.constructor_args, request.contract_name)
        return factory

    result = execute(_load, confirmation_timeout=confirmation_timeout)
    ctx.exit(report(result, contract_name=contract_name))


if __name__ == "__main__":
    cli()
