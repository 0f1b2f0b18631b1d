"""Typer command line interface for the catalog mirror."""
