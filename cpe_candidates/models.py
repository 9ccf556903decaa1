"""
Package and CPE data models.

Packages arrive already extracted by the scanner; CPEs are the candidate
identifiers handed on to vulnerability matching.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Union

from .constants import CPE_PART_APPLICATION


class Language(Enum):
    """Language ecosystem a package was found in."""

    JAVA = "java"
    JAVASCRIPT = "javascript"
    RUBY = "ruby"
    PYTHON = "python"
    GO = "go"
    RUST = "rust"
    PHP = "php"
    UNKNOWN = ""


class PackageType(Enum):
    """Packaging format of a package."""

    APK = "apk"
    GEM = "gem"
    DEB = "deb"
    NPM = "npm"
    PYTHON = "python"
    PHP_COMPOSER = "php-composer"
    JAVA = "java-archive"
    JENKINS_PLUGIN = "jenkins-plugin"
    GO_MODULE = "go-module"
    RUST = "rust-crate"
    RPM = "rpm"
    UNKNOWN = "UnknownPackage"


class Wildcard(Enum):
    """Logical "any value" for a CPE attribute."""

    ANY = "*"

    def __str__(self) -> str:
        return self.value


ANY = Wildcard.ANY

AttributeValue = Union[str, Wildcard]


@dataclass(frozen=True)
class PomProperties:
    """Fields read from a Java archive's pom.properties."""

    group_id: str = ""


@dataclass(frozen=True)
class JavaMetadata:
    """Manifest details found inside a Java archive."""

    pom_properties: Optional[PomProperties] = None


@dataclass(frozen=True)
class Package:
    """A package discovered during a scan."""

    name: str
    version: str
    language: Language = Language.UNKNOWN
    type: PackageType = PackageType.UNKNOWN
    metadata: Optional[Any] = None


@dataclass(frozen=True)
class CPE:
    """An application CPE candidate; unset attributes are ANY."""

    vendor: AttributeValue = ANY
    product: AttributeValue = ANY
    version: AttributeValue = ANY
    target_sw: AttributeValue = ANY
    part: str = CPE_PART_APPLICATION

    @property
    def key(self) -> Tuple[AttributeValue, AttributeValue, AttributeValue, AttributeValue]:
        """Identity used to drop duplicate candidates."""
        return (self.product, self.vendor, self.version, self.target_sw)
