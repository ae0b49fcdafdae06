"""CLI interface for kmachine.

This module provides the ``kmachine`` command with the ``deploy`` and
``manifests`` subcommands.
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from kmachine import __version__
from kmachine.config import DeployConfig
from kmachine.deploy import USAGE, deploy
from kmachine.display import create_manifest_table
from kmachine.hosts import HostResolver, InventoryHostResolver, MachineHostResolver
from kmachine.manifests import MANIFEST_DESCRIPTIONS, ManifestKind, lookup
from kmachine.submit import KubectlSubmitter
from kmachine.utils.errors import ConfigurationError, DeployError

console = Console()


def setup_logging(log_level: str = "info") -> None:
    """Setup logging with Rich handler.

    Args:
        log_level: Logging level (debug, info, warning, error)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=console,
                show_time=False,
                show_path=False,
                rich_tracebacks=True,
            )
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="kmachine",
        description="Deploy cluster add-ons to docker-machine hosts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output with debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"kmachine {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    deploy_parser = subparsers.add_parser(
        "deploy",
        help="Deploy a manifest to a host's cluster",
        description=f"Usage: kmachine {USAGE}\n\nManifest kinds: "
        + ", ".join(kind.value for kind in ManifestKind),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Argument count is checked by the deploy command itself
    deploy_parser.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="<host-reference> <manifest-kind>",
    )

    subparsers.add_parser("manifests", help="List the available manifests")

    return parser


def build_resolver(config: DeployConfig) -> HostResolver:
    """Create the host resolver selected by configuration.

    Args:
        config: kmachine configuration

    Returns:
        HostResolver instance
    """
    if config.host_source == "inventory":
        return InventoryHostResolver(config.get_inventory_path())
    return MachineHostResolver(
        machine_bin=config.machine_bin,
        storage_path=config.machine_storage_path,
    )


def run_deploy(args: list[str], verbose: bool = False) -> int:
    """Run the deploy subcommand.

    Args:
        args: Positional arguments (host reference, manifest kind)
        verbose: Verbose output mode

    Returns:
        Process exit code
    """
    try:
        config = DeployConfig()
        config.validate()

        log_level = "debug" if verbose else config.log_level
        setup_logging(log_level)

        resolver = build_resolver(config)
        submitter = KubectlSubmitter(
            kubectl_bin=config.kubectl_bin,
            insecure_skip_tls_verify=config.insecure_skip_tls_verify,
            timeout=config.submit_timeout,
        )

        result = deploy(
            args,
            resolver,
            submitter,
            report=lambda endpoint: console.print(f"using host: {endpoint}"),
        )

        console.print(
            f"[green]✓ Deployed '{result.kind.value}' to {result.host} ({result.endpoint})[/green]"
        )
        for resource in result.resources:
            console.print(f"  {resource}")
        return 0

    except ConfigurationError as e:
        console.print(f"[red]Configuration Error: {e}[/red]")
        console.print("\n[yellow]Please check your .env file or environment variables.[/yellow]")
        return 1

    except DeployError as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            console.print_exception()
        return 1


def run_manifests() -> int:
    """List the built-in manifests.

    Returns:
        Process exit code
    """
    data = [
        {
            "kind": kind.value,
            "description": MANIFEST_DESCRIPTIONS[kind],
            "size": len(lookup(kind)),
        }
        for kind in ManifestKind
    ]
    console.print(create_manifest_table(data))
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "deploy":
            exit_code = run_deploy(args.args, verbose=args.verbose)
        elif args.command == "manifests":
            exit_code = run_manifests()
        else:
            parser.print_help()
            exit_code = 1
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted[/dim]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Fatal error: {e}[/red]")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
