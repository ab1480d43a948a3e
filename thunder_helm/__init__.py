__version__ = "0.1.0"

PACKAGE_NAME = "thunder-helm"
"""Pulumi package name; prefix of every type token served by the provider."""
