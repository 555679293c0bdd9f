"""Tests - Test suite for the bivariate polynomial package."""
