"""Integration adapters.

Adapters connect the command backend to external systems. The backend never
imports from here.
"""
