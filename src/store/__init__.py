"""Relational event store.

This module persists validated event records and provisions the
event table on first use.
"""
