"""
msbuildkit - Visual Studio Build Tools provisioning for build agents.

Installs and keeps up to date the MSBuild Build Tools on worker nodes and
protects mspdbsrv.exe from process reaping.
"""

__version__ = "0.1.0"
