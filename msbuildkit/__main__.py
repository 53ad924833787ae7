"""
Entry point for running msbuildkit CLI as a module.

Usage: python -m msbuildkit [command] [options]
"""

from msbuildkit.cli.parser import main

if __name__ == "__main__":
    main()
