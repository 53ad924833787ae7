"""
Entry point for running msbuildkit CLI as a module.

Usage: python -m msbuildkit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
