"""Test suite for the portfolio updates service."""
