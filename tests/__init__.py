"""Test suite for inference-router."""
