"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for product create requests.

Validation Rules:
----------------
- name: required, letters only, must not start with the literals
  ``true``, ``false`` or ``null`` (case-sensitive)
- inventory: required, 1-9999 inclusive
- type: one of the ProductType values (enforced by the request schema)
- cost: optional, unconstrained

==============================================================================
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from store_api.schemas.product import ProductDetails


class ProductNameValidator:
    """
    Validator for product names.

    Example:
        >>> validator = ProductNameValidator()
        >>> validator.validate("Camera")
        (True, None)
        >>> validator.validate("null")
        (False, 'Name should be a string of letters')
    """

    PATTERN = re.compile(r"(?!true|false|null)[a-zA-Z]+")

    def validate(self, name: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate a product name.

        Args:
            name: Raw name from the request body

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not name:
            return False, "Name cannot be empty"

        if not self.PATTERN.fullmatch(name):
            return False, "Name should be a string of letters"

        return True, None


class InventoryValidator:
    """
    Validator for inventory counts.
    """

    MIN_INVENTORY = 1
    MAX_INVENTORY = 9999

    def validate(self, inventory: Optional[int]) -> Tuple[bool, Optional[str]]:
        """
        Validate an inventory count.

        Args:
            inventory: Units in stock, None when absent from the body

        Returns:
            Tuple of (is_valid, error_message)
        """
        if inventory is None:
            return False, "Inventory is required"

        if inventory < self.MIN_INVENTORY:
            return False, f"Inventory must be at least {self.MIN_INVENTORY}"

        if inventory > self.MAX_INVENTORY:
            return False, f"Inventory cannot exceed {self.MAX_INVENTORY}"

        return True, None


class ProductValidator:
    """
    Composite validator for a product create request.

    Runs every field validator and collects all violations instead of
    stopping at the first one.

    Example:
        >>> validator = ProductValidator()
        >>> validator.validate(ProductDetails(name="", type="book", inventory=0))
        ['name: Name cannot be empty', 'inventory: Inventory must be at least 1']
    """

    def __init__(self) -> None:
        self._name = ProductNameValidator()
        self._inventory = InventoryValidator()

    def validate(self, payload: ProductDetails) -> List[str]:
        """
        Validate a product create request.

        Args:
            payload: Deserialized request body

        Returns:
            List of "field: message" violations, empty when valid
        """
        violations = []

        is_valid, error = self._name.validate(payload.name)
        if not is_valid:
            violations.append(f"name: {error}")

        is_valid, error = self._inventory.validate(payload.inventory)
        if not is_valid:
            violations.append(f"inventory: {error}")

        return violations

    def is_valid(self, payload: ProductDetails) -> bool:
        """Quick validation check."""
        return not self.validate(payload)
