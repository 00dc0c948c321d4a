"""Descriptions of smart home devices, their routes, inputs, hazards, energy and economy data."""

__version__ = "0.1.0"