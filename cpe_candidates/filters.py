"""
Exclusion filters for generated CPE candidates.

Each filter vetoes vendor/product combinations known to produce false
positive vulnerability matches for a package.
"""

from typing import Callable, List, Sequence

from .models import ANY, CPE, Package

CPEFilter = Callable[[CPE, Package], bool]


def jira_client_filter(cpe: CPE, package: Package) -> bool:
    """Jira/Atlassian server CPEs should not apply to client libraries."""
    if cpe.product == "jira" and "client" in package.name.lower():
        if cpe.vendor in (ANY, "jira", "atlassian"):
            return True
    return False


def jenkins_server_filter(cpe: CPE, package: Package) -> bool:
    """The Jenkins server CPE only applies to packages named after jenkins."""
    if cpe.product == "jenkins" and "jenkins" not in package.name.lower():
        if cpe.vendor in (ANY, "jenkins", "cloudbees"):
            return True
    return False


CPE_FILTERS: Sequence[CPEFilter] = (
    jira_client_filter,
    jenkins_server_filter,
)


def filter_cpes(cpes: List[CPE], package: Package, filters: Sequence[CPEFilter] = CPE_FILTERS) -> List[CPE]:
    """
    Drop CPEs that any filter rejects for the given package.

    Args:
        cpes: Candidate CPEs
        package: Package the candidates were generated for
        filters: Predicates returning True for CPEs to drop

    Returns:
        The surviving CPEs in their original order
    """
    return [cpe for cpe in cpes if not any(should_drop(cpe, package) for should_drop in filters)]
