"""Interactive car simulator with people, bank accounts, vehicles and dealerships, saved as JSON."""

__version__ = "0.1.0"
__all__ = ["bank_account", "cli", "colorize", "dealership", "person", "util", "vehicle"]