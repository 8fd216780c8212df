"""Configuration, logging, errors and the in‑memory registry."""
