"""
msbuildkit CLI argument parser.

This module implements the command-line interface for msbuildkit using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from msbuildkit.core.locking import DEFAULT_LOCK_TIMEOUT

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("msbuildkit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """msbuildkit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="msbuildkit",
            description="msbuildkit - Visual Studio Build Tools provisioning",
            epilog='Use "msbuildkit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"msbuildkit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_install_command(subparsers)
        self._add_check_command(subparsers)
        self._add_url_command(subparsers)
        self._add_veto_command(subparsers)

        return parser

    def _add_installer_options(self, parser):
        """Add options describing the installer configuration."""
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./msbuildkit.yaml)",
        )
        parser.add_argument(
            "--build-tools-version",
            dest="build_tools_version",
            metavar="VERSION",
            help="Build Tools version (e.g., 2022, 2019)",
        )
        parser.add_argument(
            "--install-path",
            metavar="PATH",
            help="Custom install root",
        )
        parser.add_argument(
            "--args",
            dest="additional_arguments",
            metavar="ARGS",
            help="Additional installer arguments",
        )
        parser.add_argument(
            "--vsconfig-file",
            type=Path,
            metavar="PATH",
            help="Component configuration (.vsconfig) to apply",
        )

    def _add_install_command(self, subparsers):
        """Add 'install' subcommand."""
        parser = subparsers.add_parser(
            "install",
            help="Install or update the Build Tools on this machine",
            description="Install, update or modify the Visual Studio Build Tools",
        )
        self._add_installer_options(parser)
        parser.add_argument(
            "--lock-dir",
            type=Path,
            metavar="PATH",
            help="Directory for provisioning lock files",
        )
        parser.add_argument(
            "--lock-timeout",
            type=float,
            default=DEFAULT_LOCK_TIMEOUT,
            metavar="SECONDS",
            help=f"Seconds to wait for another provisioning run [default: {DEFAULT_LOCK_TIMEOUT:.0f}]",
        )

    def _add_check_command(self, subparsers):
        """Add 'check' subcommand."""
        parser = subparsers.add_parser(
            "check",
            help="Show installation state without changing anything",
            description="Report platform, install location and pending work",
        )
        self._add_installer_options(parser)

    def _add_url_command(self, subparsers):
        """Add 'url' subcommand."""
        parser = subparsers.add_parser(
            "url",
            help="Print the bootstrapper download URL for a version",
        )
        parser.add_argument("build_tools_version", metavar="VERSION")

    def _add_veto_command(self, subparsers):
        """Add 'veto' subcommand."""
        parser = subparsers.add_parser(
            "veto",
            help="Check whether a process command line may be killed",
            description="Exit code 0 if the process may be killed, 3 if vetoed",
        )
        parser.add_argument(
            "process_arguments",
            nargs=argparse.REMAINDER,
            metavar="CMDLINE",
            help="Process command line, executable first",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "install": "msbuildkit.cli.commands.install",
            "check": "msbuildkit.cli.commands.check",
            "url": "msbuildkit.cli.commands.url",
            "veto": "msbuildkit.cli.commands.veto",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
