"""
Utility modules for command_registry.

This package contains the alias resolution helpers shared by the registry.
"""
