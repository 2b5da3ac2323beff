#!/usr/bin/python3
"""
Deploys a single contract of the ape project and reports its address.

    ape run deploy --network ethereum:sepolia:infura --account <alias> -c EthGrowDAO

In CI, pass --autosign so that no confirmation is asked; the exit
status is 0 only when the creation transaction is confirmed.
"""
from deployer.cli import cli

if __name__ == "__main__":
    cli()
