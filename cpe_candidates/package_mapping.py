"""
Package to CPE vendor/product mapping functionality.

Guesses vendor, product and target software candidates from a package's
name, ecosystem and manifest metadata.
"""

import logging
import re
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple
from urllib.parse import unquote, urlsplit

from .constants import (
    GO_MODULE_URL_SCHEME,
    JAVA_GROUP_ID_MIN_FIELDS,
    JAVA_GROUP_ID_PREFIXES,
    JENKINS_PLUGIN_POM_PROPERTIES_GROUP_IDS,
    JIRA_PLUGIN_POM_PROPERTIES_GROUP_ID,
)
from .models import JavaMetadata, Language, Package, PackageType
from .name_variants import generate_all_sub_selections, normalize_all_separators, remove_duplicate_values

# Known package names (keys) mapped to their official CPE product names
PRODUCT_CANDIDATES_BY_PACKAGE_TYPE: Mapping[PackageType, Mapping[str, Tuple[str, ...]]] = MappingProxyType(
    {
        PackageType.JAVA: MappingProxyType(
            {
                "springframework": ("spring_framework", "springsource_spring_framework"),
                "spring-core": ("spring_framework", "springsource_spring_framework"),
            }
        ),
        PackageType.NPM: MappingProxyType(
            {
                "hapi": ("hapi_server_framework",),
                "handlebars.js": ("handlebars",),
                "is-my-json-valid": ("is_my_json_valid",),
                "mustache": ("mustache.js",),
            }
        ),
        PackageType.GEM: MappingProxyType(
            {
                "Arabic-Prawn": ("arabic_prawn",),
                "bio-basespace-sdk": ("basespace_ruby_sdk",),
                "cremefraiche": ("creme_fraiche",),
                "html-sanitizer": ("html_sanitizer",),
                "sentry-raven": ("raven-ruby",),
                "RedCloth": ("redcloth_library",),
                "VladTheEnterprising": ("vladtheenterprising",),
                "yajl-ruby": ("yajl-ruby_gem",),
            }
        ),
        PackageType.PYTHON: MappingProxyType(
            {
                "python-rrdtool": ("rrdtool",),
            }
        ),
    }
)

EXCLUDED_GROUP_ID_PREFIXES = (JIRA_PLUGIN_POM_PROPERTIES_GROUP_ID,) + JENKINS_PLUGIN_POM_PROPERTIES_GROUP_IDS

# percent escapes must be followed by two hex digits
_VALID_ESCAPES = re.compile(r"(?:[^%]|%[0-9A-Fa-f]{2})*")
_CONTROL_CHARACTER = re.compile(r"[\x00-\x1f\x7f]")
_CONTROL_OR_SPACE = re.compile(r"[\x00-\x20\x7f]")


def get_product_aliases(package_type: PackageType, name: str) -> List[str]:
    """Return the known CPE product names for an exact package name, if any."""
    return list(PRODUCT_CANDIDATES_BY_PACKAGE_TYPE.get(package_type, {}).get(name, ()))


def candidate_target_software_attrs(package: Package) -> List[str]:
    """
    Guess the target software a package runs on.

    Args:
        package: Package to inspect

    Returns:
        List of target software values (the wildcard is added by the caller)
    """
    if package.language == Language.JAVA:
        # the more specific indicator wins outright
        if package.type == PackageType.JENKINS_PLUGIN:
            return ["jenkins", "cloudbees_jenkins"]
        return ["java", "maven"]
    elif package.language == Language.JAVASCRIPT:
        return ["node.js", "nodejs"]
    elif package.language == Language.RUBY:
        return ["ruby", "rails"]
    elif package.language == Language.PYTHON:
        return ["python"]
    elif package.language == Language.GO:
        return ["go", "golang"]

    return []


def _base_candidates(package: Package) -> List[str]:
    """Name-based candidates shared by product and vendor guessing."""
    candidates = [package.name]

    if package.language == Language.PYTHON:
        if not package.name.startswith("python"):
            candidates.append("python-" + package.name)
    elif package.language == Language.JAVA:
        if isinstance(package.metadata, JavaMetadata):
            candidates.extend(candidate_products_for_java(package))
    elif package.language == Language.GO:
        # only the module path parser is trusted for Go
        product = candidate_product_for_go(package.name)
        candidates = [product] if product else []

    return candidates


def candidate_products(package: Package) -> List[str]:
    """
    Guess CPE product names for a package.

    Args:
        package: Package to inspect

    Returns:
        Deduplicated product candidates, known aliases first
    """
    products = get_product_aliases(package.type, package.name) + _base_candidates(package)

    # try swapping hyphens for underscores, vice versa, and removing separators altogether
    products = normalize_all_separators(products)

    # e.g. jenkins-ci -> [jenkins, jenkins-ci]
    products = generate_all_sub_selections(products)

    return remove_duplicate_values(products)


def candidate_vendors(package: Package) -> List[str]:
    """
    Guess CPE vendor names for a package.

    Product guesses double as vendor guesses, since projects are often
    registered under their own name.

    Args:
        package: Package to inspect

    Returns:
        Deduplicated vendor candidates
    """
    vendors = _base_candidates(package)

    if package.language == Language.JAVA:
        if isinstance(package.metadata, JavaMetadata):
            vendors.extend(candidate_vendors_for_java(package))
    elif package.language == Language.GO:
        vendor = candidate_vendor_for_go(package.name)
        vendors = [vendor] if vendor else []

    vendors = normalize_all_separators(vendors)
    vendors = generate_all_sub_selections(vendors)

    return remove_duplicate_values(vendors)


def _split_go_module_path(name: str) -> Optional[Tuple[str, str]]:
    """Split a Go module name into (host, trimmed path); None if unparseable."""
    if not _VALID_ESCAPES.fullmatch(name) or _CONTROL_CHARACTER.search(name):
        logging.debug(f"Could not parse Go module path {name!r}: invalid escape or control character")
        return None

    try:
        url = urlsplit(GO_MODULE_URL_SCHEME + name)
    except ValueError as e:
        logging.debug(f"Could not parse Go module path {name!r}: {e}")
        return None

    if _CONTROL_OR_SPACE.search(url.netloc):
        logging.debug(f"Could not parse Go module path {name!r}: invalid host")
        return None

    return url.netloc, unquote(url.path).strip("/")


def candidate_product_for_go(name: str) -> str:
    """
    Find a single product name for a Go module.

    Prefers returning nothing over a nonsensical guess.

    Args:
        name: Go module path (e.g. "github.com/foo/bar")

    Returns:
        Product name, or "" when no confident guess exists
    """
    parsed = _split_go_module_path(name)
    if parsed is None:
        return ""

    host, clean_path = parsed
    path_elements = clean_path.split("/")

    if host in ("golang.org", "gopkg.in"):
        return clean_path
    if host == "google.golang.org":
        return path_elements[0]

    if len(path_elements) < 2:
        return ""

    return path_elements[1]


def candidate_vendor_for_go(name: str) -> str:
    """
    Find a single vendor name for a Go module.

    Prefers returning nothing over a nonsensical guess.

    Args:
        name: Go module path (e.g. "github.com/foo/bar")

    Returns:
        Vendor name, or "" when no confident guess exists
    """
    parsed = _split_go_module_path(name)
    if parsed is None:
        return ""

    host, clean_path = parsed

    if host == "google.golang.org":
        return "google"
    if host == "golang.org":
        return "golang"
    if host == "gopkg.in":
        return ""

    path_elements = clean_path.split("/")
    if len(path_elements) < 2:
        return ""

    return path_elements[0]


def candidate_products_for_java(package: Package) -> List[str]:
    product, _ = product_and_vendor_from_pom_properties_group_id(package)
    if not product:
        return []

    # a Jenkins plugin's group ID would otherwise attribute it to the Jenkins server itself
    if package.type == PackageType.JENKINS_PLUGIN and product.lower() == "jenkins":
        return []

    return [product]


def candidate_vendors_for_java(package: Package) -> List[str]:
    _, vendor = product_and_vendor_from_pom_properties_group_id(package)
    return [vendor] if vendor else []


def product_and_vendor_from_pom_properties_group_id(package: Package) -> Tuple[str, str]:
    """
    Derive (product, vendor) from a Maven group ID such as "org.apache.commons".

    Args:
        package: Package carrying JavaMetadata

    Returns:
        (product, vendor), or ("", "") when the group ID is not usable
    """
    group_id = group_id_from_pom_properties(package)
    if not should_consider_group_id(group_id):
        return "", ""

    if not group_id.startswith(JAVA_GROUP_ID_PREFIXES):
        return "", ""

    fields = group_id.split(".")
    if len(fields) < JAVA_GROUP_ID_MIN_FIELDS:
        return "", ""

    return fields[2], fields[1]


def group_id_from_pom_properties(package: Package) -> str:
    metadata = package.metadata
    if not isinstance(metadata, JavaMetadata) or metadata.pom_properties is None:
        return ""
    return metadata.pom_properties.group_id or ""


def should_consider_group_id(group_id: str) -> bool:
    if not group_id:
        return False
    return not group_id.startswith(EXCLUDED_GROUP_ID_PREFIXES)
