from __future__ import annotations


class Currency:
    """Represents an ISO 4217 currency with code, symbol, minor units and name.

    Instances are immutable. Lookup by code goes through
    `majik_money.domain.monetary.currency_registry.get_currency`.

    Attributes:
        code (str): ISO 4217 currency code (e.g., "USD", "PHP").
        symbol (str): Display symbol (e.g., "$", "₱").
        minor_units (int): Power of ten relating major to minor units (0-18).
        name (str): Full currency name.
    """

    __slots__ = ("_code", "_symbol", "_minor_units", "_name")

    def __init__(self, code: str, symbol: str, minor_units: int, name: str):
        """Initialize a Currency instance.

        Args:
            code (str): ISO 4217 currency code (e.g., "USD", "PHP").
            symbol (str): Display symbol (e.g., "$", "₱").
            minor_units (int): Number of decimal places of the minor unit (0-18).
            name (str): Full currency name.

        Raises:
            ValueError: If parameters are invalid.
        """
        # Validate inputs
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if not isinstance(symbol, str) or not symbol.strip():
            raise ValueError(f"$symbol must be a non-empty string, but provided value is: '{symbol}'")

        # bool is an int subclass; reject it explicitly
        if not isinstance(minor_units, int) or isinstance(minor_units, bool) or minor_units < 0 or minor_units > 18:
            raise ValueError(f"$minor_units must be an integer between 0 and 18, but provided value is: {minor_units}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        object.__setattr__(self, "_code", code.strip())
        object.__setattr__(self, "_symbol", symbol.strip())
        object.__setattr__(self, "_minor_units", minor_units)
        object.__setattr__(self, "_name", name.strip())

    def __setattr__(self, key, value):
        raise AttributeError(f"Cannot set attribute '{key}' because {self.__class__.__name__} is immutable")

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def symbol(self) -> str:
        """Get the currency symbol."""
        return self._symbol

    @property
    def minor_units(self) -> int:
        """Get the number of decimal places of the minor unit."""
        return self._minor_units

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def scale(self) -> int:
        """Number of minor units in one major unit (e.g., 100 for USD, 1 for JPY)."""
        return 10**self._minor_units

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', '{self.symbol}', {self.minor_units}, '{self.name}')"
