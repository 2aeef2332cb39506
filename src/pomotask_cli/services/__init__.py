"""Service layer for Pomotask CLI."""
