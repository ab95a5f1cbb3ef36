"""Tests for the GGN engine."""
