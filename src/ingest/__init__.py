"""Event file ingestion pipeline.

This module reads delimited event files from the intake directory and
loads validated rows into the relational store under a run lock.
"""
