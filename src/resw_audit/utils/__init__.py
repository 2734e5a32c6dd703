"""Shared utilities for resw_audit."""
