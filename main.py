#!/usr/bin/env python3
"""
CPE Candidates - guess CPE identifiers for scanned packages
Run with: uv run main.py
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from cpe_candidates import Package, generate_package_cpes
from cpe_candidates.config import get_log_level, get_max_results
from cpe_candidates.constants import DEFAULT_JSON_INDENT, SEPARATOR_LINE_LENGTH
from cpe_candidates.data_structures import (
    create_cpe_data,
    create_package,
    create_package_data,
    create_package_from_record,
    create_results_structure,
)

# Set up logging (WARNING level for clean output)
logging.basicConfig(level=logging.WARNING, format="%(asctime)s - %(levelname)s - %(message)s")


def load_packages(input_file: Path) -> List[Package]:
    """
    Load package records from a JSON file.

    Args:
        input_file: File holding one package record or a list of records

    Returns:
        List of packages (records that fail to parse are skipped with a warning)

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
    """
    with open(input_file) as f:
        records = json.load(f)

    if not isinstance(records, list):
        records = [records]

    packages = []
    for index, record in enumerate(records):
        try:
            packages.append(create_package_from_record(record))
        except ValueError as e:
            logging.warning(f"Skipping package record {index}: {e}")

    return packages


def generate_candidates(packages: List[Package], json_output: bool = False, limit: int = 0) -> None:
    """
    Generate and print CPE candidates for each package.

    Args:
        packages: Packages to generate candidates for
        json_output: Output results in JSON format instead of human-readable
        limit: Maximum number of CPEs to show per package (0 = all)
    """
    output_lines = []
    package_results: List[Dict[str, Any]] = []

    for package in packages:
        cpes = generate_package_cpes(package)
        shown = cpes[:limit] if limit > 0 else cpes

        package_data = create_package_data(package)
        package_data["cpes"] = [create_cpe_data(cpe) for cpe in shown]
        package_results.append(package_data)

        if json_output:
            continue

        output_lines.append(f"\n📦 Package: {package.name}@{package.version} ({package.language.value or 'unknown'})")
        if not cpes:
            output_lines.append("   ❌ No confident CPE guess")
            continue

        output_lines.append(f"   ✅ {len(cpes)} CPE candidates:")
        for cpe_data in package_data["cpes"]:
            output_lines.append(
                f"      vendor={cpe_data['vendor']} product={cpe_data['product']} "
                f"version={cpe_data['version']} target_sw={cpe_data['target_sw']}"
            )
        if len(shown) < len(cpes):
            output_lines.append(f"      (Showing first {len(shown)} results...)")

    results = create_results_structure(package_results)
    if json_output:
        print(json.dumps(results, indent=DEFAULT_JSON_INDENT))
        return

    output_lines.append("\n" + "=" * SEPARATOR_LINE_LENGTH)
    output_lines.append(f"Packages analyzed: {results['summary']['total_packages']}")
    output_lines.append(f"CPEs shown: {results['summary']['total_cpes']}")
    for line in output_lines:
        print(line)


app = typer.Typer(help="CPE Candidates - CPE guessing for scanned packages")


@app.command()
def main(
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Package name"),
    version: Optional[str] = typer.Option(None, "--version", "-v", help="Package version"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language (java, javascript, ruby, python, go, ...)"),
    package_type: Optional[str] = typer.Option(None, "--type", "-t", help="Package type (java-archive, jenkins-plugin, npm, gem, ...)"),
    group_id: Optional[str] = typer.Option(None, "--group-id", "-g", help="Maven group ID from pom.properties"),
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", help="JSON file with one package record or a list of them"),
    json_output: bool = typer.Option(False, "--json", help="Output results in JSON format"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Maximum CPEs to show per package (0 = all)"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    CPE Candidates - Guess CPE identifiers for packages found during a scan.

    Examples:
        uv run main.py -n commons-text -v 1.9 -l java -g org.apache.commons
        uv run main.py -n github.com/foo/bar -v v1.2.3 -l go
        uv run main.py -i packages.json --json
    """
    logging.getLogger().setLevel(logging.DEBUG if verbose else get_log_level())

    if input_file is not None:
        try:
            packages = load_packages(input_file)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Error: Could not read {input_file}: {e}")
            raise typer.Exit(code=1)
    else:
        if name is None or version is None:
            raise typer.BadParameter("either --input or both --name and --version are required")
        try:
            packages = [create_package(name, version, language, package_type, group_id)]
        except ValueError as e:
            raise typer.BadParameter(str(e))

    if limit is None:
        limit = get_max_results()

    generate_candidates(packages, json_output=json_output, limit=limit)


if __name__ == "__main__":
    app()
