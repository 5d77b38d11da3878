"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that all components work together correctly, from
CSV text through the session to rendered HTML. In-memory and file
sources stand in for the network.

Test Files:
    - test_data_table.py: Full fetch / filter / sort / render workflow
"""
