"""Mock data integrity tooling for the UltiCode practice platform."""

__version__ = "0.1.0"
