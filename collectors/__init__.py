"""Collaborator access: log store, hardware topology, guard paths and input files."""
