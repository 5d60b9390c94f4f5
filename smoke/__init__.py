"""Smoke runner that probes a running site and checks route gating over HTTP."""
