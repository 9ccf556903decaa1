"""
CPE Candidates - guesses CPE identifiers for scanned packages.
"""

from .generator import generate_package_cpes
from .models import ANY, CPE, JavaMetadata, Language, Package, PackageType, PomProperties, Wildcard

__all__ = [
    "ANY",
    "CPE",
    "JavaMetadata",
    "Language",
    "Package",
    "PackageType",
    "PomProperties",
    "Wildcard",
    "generate_package_cpes",
]
