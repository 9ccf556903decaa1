"""
CPE candidate generation.

Combines product, vendor and target software guesses into CPEs, drops
duplicates and known-bad combinations, and orders the rest so the most
specific guess is tried first.
"""

import logging
from typing import List

from .filters import filter_cpes
from .models import ANY, CPE, Package
from .package_mapping import candidate_products, candidate_target_software_attrs, candidate_vendors
from .specificity import sort_by_specificity


def generate_package_cpes(package: Package) -> List[CPE]:
    """
    Create a list of CPEs for a package, guessing vendor/product and target software.

    Args:
        package: Package to generate candidates for

    Returns:
        CPEs ordered most specific first (empty when no product can be guessed)
    """
    products = candidate_products(package)
    if not products:
        logging.debug(f"No product candidates for package {package.name!r}")
        return []

    vendors = candidate_vendors(package)
    target_sws = [ANY] + candidate_target_software_attrs(package)

    seen = set()
    cpes = []
    for product in products:
        for vendor in vendors:
            for target_sw in target_sws:
                cpe = CPE(vendor=vendor, product=product, version=package.version, target_sw=target_sw)
                if cpe.key in seen:
                    continue
                seen.add(cpe.key)
                cpes.append(cpe)

    # filter out any known combinations that don't accurately represent this package
    filtered = filter_cpes(cpes, package)

    logging.debug(
        f"Package {package.name!r}: {len(products)} products, {len(vendors)} vendors, "
        f"{len(cpes)} CPEs generated, {len(cpes) - len(filtered)} filtered"
    )

    return sort_by_specificity(filtered)
