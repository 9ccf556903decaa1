"""Data structure helpers for the CPE candidates CLI.

Converts between JSON package records and Package objects, and builds the
standardized dictionaries used for JSON output.
"""

from typing import Any, Dict, List, Optional

from .models import CPE, JavaMetadata, Language, Package, PackageType, PomProperties


def parse_language(value: Optional[str]) -> Language:
    """Look up a Language by its value (case-insensitive); None/"" means UNKNOWN.

    Raises:
        ValueError: If the value names no known language
    """
    return Language((value or "").strip().lower())


def parse_package_type(value: Optional[str]) -> PackageType:
    """Look up a PackageType by its value; None/"" means UNKNOWN.

    Raises:
        ValueError: If the value names no known package type
    """
    if not value:
        return PackageType.UNKNOWN
    return PackageType(value.strip())


def create_package(
    name: str,
    version: str,
    language: Optional[str] = None,
    package_type: Optional[str] = None,
    group_id: Optional[str] = None,
) -> Package:
    """Create a Package from plain values.

    Args:
        name: Package name
        version: Package version (kept verbatim)
        language: Language value (e.g. "java", "go")
        package_type: Package type value (e.g. "java-archive", "jenkins-plugin")
        group_id: Maven group ID, attached as JavaMetadata when given

    Returns:
        Package record

    Raises:
        ValueError: If the language or package type is unknown
    """
    metadata = None
    if group_id is not None:
        metadata = JavaMetadata(pom_properties=PomProperties(group_id=group_id))

    return Package(
        name=name,
        version=version,
        language=parse_language(language),
        type=parse_package_type(package_type),
        metadata=metadata,
    )


def create_package_from_record(record: Dict[str, Any]) -> Package:
    """Create a Package from a JSON record.

    Args:
        record: Dictionary with "name", "version" and optional "language",
            "type" and "metadata" ({"group_id": ...}) keys

    Returns:
        Package record

    Raises:
        ValueError: If the record is missing a name or version, or has non-string or unknown enum values
    """
    if not isinstance(record, dict):
        raise ValueError(f"package record must be an object, got {type(record).__name__}")

    name = record.get("name")
    version = record.get("version")
    if not isinstance(name, str) or not isinstance(version, str):
        raise ValueError("package record needs string 'name' and 'version' fields")

    metadata = record.get("metadata") or {}
    group_id = metadata.get("group_id") if isinstance(metadata, dict) else None
    language = record.get("language")
    package_type = record.get("type")

    for field, value in (("language", language), ("type", package_type), ("metadata.group_id", group_id)):
        if value is not None and not isinstance(value, str):
            raise ValueError(f"package record field {field!r} must be a string, got {type(value).__name__}")

    return create_package(name, version, language, package_type, group_id)


def create_package_data(package: Package) -> Dict[str, Any]:
    """Create standardized package data structure for output.

    Args:
        package: Package the CPEs were generated for

    Returns:
        Dictionary containing package information
    """
    data: Dict[str, Any] = {
        "name": package.name,
        "version": package.version,
        "language": package.language.value,
        "type": package.type.value,
        "cpes": [],
    }
    if isinstance(package.metadata, JavaMetadata) and package.metadata.pom_properties:
        data["group_id"] = package.metadata.pom_properties.group_id
    return data


def create_cpe_data(cpe: CPE) -> Dict[str, str]:
    """Create standardized CPE data structure; ANY is rendered as "*"."""
    return {
        "part": cpe.part,
        "vendor": str(cpe.vendor),
        "product": str(cpe.product),
        "version": str(cpe.version),
        "target_sw": str(cpe.target_sw),
    }


def create_results_structure(packages: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Create standardized results structure for JSON output.

    Args:
        packages: Package data dictionaries (with their CPEs filled in)

    Returns:
        Dictionary containing results and summary
    """
    return {
        "packages": packages,
        "summary": {
            "total_packages": len(packages),
            "total_cpes": sum(len(package["cpes"]) for package in packages),
        },
    }
