"""Error code and category registry for repolog."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from repolog.errors.base import ErrorCategory, ErrorCode


class ErrorRegistry:
    """Singleton registry for all error codes and categories."""

    _instance = None
    _lock = threading.RLock()

    def __new__(cls) -> "ErrorRegistry":
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def register_category(self, name: str) -> ErrorCategory:
        """Register a category, returning the existing one if already known.

        Args:
            name: The category name

        Returns:
            The registered ErrorCategory
        """
        with self._lock:
            if name in self._categories:
                return self._categories[name]

            from repolog.errors.base import ErrorCategory

            category = ErrorCategory(name)
            self._categories[name] = category
            return category

    def register_code(self, code: str, category_name: str) -> ErrorCode:
        """Register a code under a category, creating the category if needed.

        Args:
            code: The error code
            category_name: The category name

        Returns:
            The registered ErrorCode
        """
        with self._lock:
            if code in self._codes:
                return self._codes[code]

            category = self.register_category(category_name)

            from repolog.errors.base import ErrorCode

            error_code = ErrorCode(code, category)
            self._codes[code] = error_code
            return error_code


# Create a single instance for use throughout the package
registry = ErrorRegistry()
