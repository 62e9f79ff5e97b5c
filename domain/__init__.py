"""Depot record shapes, column synonym tables and demo seed data."""
