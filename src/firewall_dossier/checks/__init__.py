"""Check plugin system for firewall-dossier.

This module provides the base infrastructure for rule-based audits.
Each check category (security, performance, consistency) registers one
BaseCheck subclass whose findings feed the matching Analysis list.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from firewall_dossier.model.device import DeviceConfiguration
    from firewall_dossier.model.finding import AnyFinding

logger = logging.getLogger(__name__)


@dataclass
class CheckContext:
    """Context passed to all check functions.

    Provides read-only access to the unredacted device configuration.
    """
    device: "DeviceConfiguration"


class BaseCheck(ABC):
    """Abstract base class for all checks.

    Each check must implement:
    - run(context) -> list of findings
    """

    @property
    @abstractmethod
    def category(self) -> str:
        """Category name ('security', 'performance' or 'consistency')."""
        ...

    @abstractmethod
    def run(self, context: CheckContext) -> list["AnyFinding"]:
        """Run the check and return findings."""
        ...


# Registry of all available checks
_check_registry: list[type[BaseCheck]] = []


def register_check(check_class: type[BaseCheck]) -> type[BaseCheck]:
    """Decorator to register a check class."""
    if check_class not in _check_registry:
        _check_registry.append(check_class)
    return check_class


def get_all_checks() -> list[type[BaseCheck]]:
    """Get all registered check classes."""
    return _check_registry.copy()


def run_checks(context: CheckContext) -> dict[str, list["AnyFinding"]]:
    """Run all registered checks and return findings keyed by category.

    Categories are returned in sorted order. A failing check is a defect and
    propagates; there is no partial result.
    """
    results: dict[str, list] = {}

    for check_class in _check_registry:
        check = check_class()
        check_findings = check.run(context)
        logger.debug("%s produced %d finding(s)", check_class.__name__, len(check_findings))
        results.setdefault(check.category, []).extend(check_findings)

    return {category: results[category] for category in sorted(results)}
